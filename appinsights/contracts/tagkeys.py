"""Well-known context tag keys and their maximum value lengths."""

APPLICATION_VERSION = "ai.application.ver"
DEVICE_ID = "ai.device.id"
DEVICE_LOCALE = "ai.device.locale"
DEVICE_MODEL = "ai.device.model"
DEVICE_OEM_NAME = "ai.device.oemName"
DEVICE_OS_VERSION = "ai.device.osVersion"
DEVICE_TYPE = "ai.device.type"
LOCATION_IP = "ai.location.ip"
OPERATION_ID = "ai.operation.id"
OPERATION_NAME = "ai.operation.name"
OPERATION_PARENT_ID = "ai.operation.parentId"
OPERATION_SYNTHETIC_SOURCE = "ai.operation.syntheticSource"
OPERATION_CORRELATION_VECTOR = "ai.operation.correlationVector"
SESSION_ID = "ai.session.id"
SESSION_IS_FIRST = "ai.session.isFirst"
USER_ACCOUNT_ID = "ai.user.accountId"
USER_ID = "ai.user.id"
USER_AUTH_USER_ID = "ai.user.authUserId"
CLOUD_ROLE = "ai.cloud.role"
CLOUD_ROLE_INSTANCE = "ai.cloud.roleInstance"
INTERNAL_SDK_VERSION = "ai.internal.sdkVersion"
INTERNAL_AGENT_VERSION = "ai.internal.agentVersion"
INTERNAL_NODE_NAME = "ai.internal.nodeName"

TAG_MAX_LENGTHS: dict[str, int] = {
    APPLICATION_VERSION: 1024,
    DEVICE_ID: 1024,
    DEVICE_LOCALE: 64,
    DEVICE_MODEL: 256,
    DEVICE_OEM_NAME: 256,
    DEVICE_OS_VERSION: 256,
    DEVICE_TYPE: 64,
    LOCATION_IP: 46,
    OPERATION_ID: 128,
    OPERATION_NAME: 1024,
    OPERATION_PARENT_ID: 128,
    OPERATION_SYNTHETIC_SOURCE: 1024,
    OPERATION_CORRELATION_VECTOR: 64,
    SESSION_ID: 64,
    SESSION_IS_FIRST: 5,
    USER_ACCOUNT_ID: 1024,
    USER_ID: 128,
    USER_AUTH_USER_ID: 1024,
    CLOUD_ROLE: 256,
    CLOUD_ROLE_INSTANCE: 256,
    INTERNAL_SDK_VERSION: 64,
    INTERNAL_AGENT_VERSION: 64,
    INTERNAL_NODE_NAME: 256,
}


def sanitize_tags(tags: dict[str, str]) -> list[str]:
    """Truncate over-long tag values in place and return a warning for each."""
    warnings = []
    for key, value in tags.items():
        limit = TAG_MAX_LENGTHS.get(key)
        if limit is not None and len(value) > limit:
            tags[key] = value[:limit]
            warnings.append(f"Value for {key} exceeded maximum length of {limit}")
    return warnings