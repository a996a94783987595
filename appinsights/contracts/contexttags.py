"""Context tags attached to telemetry, with grouped named accessors."""

from __future__ import annotations

from typing import Optional

from . import tagkeys


class _TagField:
    """A named tag in a group, backed by a key of the shared tag dictionary.

    Reading an absent tag yields an empty string; assigning an empty string
    removes the tag.
    """

    def __init__(self, key: str) -> None:
        self.key = key

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Optional["_TagGroup"], objtype: Optional[type] = None):
        if obj is None:
            return self
        return obj._tags.get(self.key, "")

    def __set__(self, obj: "_TagGroup", value: str) -> None:
        if value:
            obj._tags[self.key] = value
        else:
            obj._tags.pop(self.key, None)

    def __delete__(self, obj: "_TagGroup") -> None:
        obj._tags.pop(self.key, None)


class _TagGroup:
    """A view onto a group of related fields in a ContextTags dictionary."""

    def __init__(self, tags: dict[str, str]) -> None:
        self._tags = tags

    def __repr__(self) -> str:
        fields = {
            name: getattr(self, name)
            for name, attr in vars(type(self)).items()
            if isinstance(attr, _TagField)
        }
        return f"{type(self).__name__}({fields!r})"


class ApplicationContextTags(_TagGroup):
    """Context fields grouped under 'application'."""

    ver = _TagField(tagkeys.APPLICATION_VERSION)


class DeviceContextTags(_TagGroup):
    """Context fields grouped under 'device'."""

    id = _TagField(tagkeys.DEVICE_ID)
    locale = _TagField(tagkeys.DEVICE_LOCALE)
    model = _TagField(tagkeys.DEVICE_MODEL)
    oem_name = _TagField(tagkeys.DEVICE_OEM_NAME)
    os_version = _TagField(tagkeys.DEVICE_OS_VERSION)
    type = _TagField(tagkeys.DEVICE_TYPE)


class LocationContextTags(_TagGroup):
    """Context fields grouped under 'location'."""

    ip = _TagField(tagkeys.LOCATION_IP)


class OperationContextTags(_TagGroup):
    """Context fields grouped under 'operation'."""

    id = _TagField(tagkeys.OPERATION_ID)
    name = _TagField(tagkeys.OPERATION_NAME)
    parent_id = _TagField(tagkeys.OPERATION_PARENT_ID)
    synthetic_source = _TagField(tagkeys.OPERATION_SYNTHETIC_SOURCE)
    correlation_vector = _TagField(tagkeys.OPERATION_CORRELATION_VECTOR)


class SessionContextTags(_TagGroup):
    """Context fields grouped under 'session'."""

    id = _TagField(tagkeys.SESSION_ID)
    is_first = _TagField(tagkeys.SESSION_IS_FIRST)


class UserContextTags(_TagGroup):
    """Context fields grouped under 'user'."""

    account_id = _TagField(tagkeys.USER_ACCOUNT_ID)
    id = _TagField(tagkeys.USER_ID)
    auth_user_id = _TagField(tagkeys.USER_AUTH_USER_ID)


class CloudContextTags(_TagGroup):
    """Context fields grouped under 'cloud'."""

    role = _TagField(tagkeys.CLOUD_ROLE)
    role_instance = _TagField(tagkeys.CLOUD_ROLE_INSTANCE)


class InternalContextTags(_TagGroup):
    """Context fields grouped under 'internal'."""

    sdk_version = _TagField(tagkeys.INTERNAL_SDK_VERSION)
    agent_version = _TagField(tagkeys.INTERNAL_AGENT_VERSION)
    node_name = _TagField(tagkeys.INTERNAL_NODE_NAME)


class ContextTags(dict):
    """Key/value context tags, with grouped views over the well-known keys."""

    def application(self) -> ApplicationContextTags:
        """Return a view of the fields grouped under 'application'."""
        return ApplicationContextTags(self)

    def device(self) -> DeviceContextTags:
        """Return a view of the fields grouped under 'device'."""
        return DeviceContextTags(self)

    def location(self) -> LocationContextTags:
        """Return a view of the fields grouped under 'location'."""
        return LocationContextTags(self)

    def operation(self) -> OperationContextTags:
        """Return a view of the fields grouped under 'operation'."""
        return OperationContextTags(self)

    def session(self) -> SessionContextTags:
        """Return a view of the fields grouped under 'session'."""
        return SessionContextTags(self)

    def user(self) -> UserContextTags:
        """Return a view of the fields grouped under 'user'."""
        return UserContextTags(self)

    def cloud(self) -> CloudContextTags:
        """Return a view of the fields grouped under 'cloud'."""
        return CloudContextTags(self)

    def internal(self) -> InternalContextTags:
        """Return a view of the fields grouped under 'internal'."""
        return InternalContextTags(self)