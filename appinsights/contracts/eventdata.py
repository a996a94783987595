"""Event, page view, trace message and metric data contracts."""

from dataclasses import dataclass, field

from .base import Domain
from .enums import SeverityLevel
from .frames import DataPoint, _truncate_fields

_PROPERTY_VALUE_MAX = 8192
_KEY_MAX = 150


def _envelope_name(key: str, suffix: str) -> str:
    if key:
        return f"Microsoft.ApplicationInsights.{key}.{suffix}"
    return f"Microsoft.ApplicationInsights.{suffix}"


def _sanitize_properties(properties: dict[str, str], type_name: str) -> list[str]:
    """Truncate over-long property values and keys in place."""
    warnings = []
    for key, value in list(properties.items()):
        if len(value) > _PROPERTY_VALUE_MAX:
            properties[key] = value[:_PROPERTY_VALUE_MAX]
            warnings.append(
                f"{type_name}.Properties has value with length exceeding max of "
                f"{_PROPERTY_VALUE_MAX}: {key}"
            )
        if len(key) > _KEY_MAX:
            properties[key[:_KEY_MAX]] = properties.pop(key)
            warnings.append(
                f"{type_name}.Properties has key with length exceeding max of "
                f"{_KEY_MAX}: {key}"
            )
    return warnings


def _sanitize_measurements(measurements: dict[str, float], type_name: str) -> list[str]:
    """Truncate over-long measurement keys in place."""
    warnings = []
    for key in list(measurements):
        if len(key) > _KEY_MAX:
            measurements[key[:_KEY_MAX]] = measurements.pop(key)
            warnings.append(
                f"{type_name}.Measurements has key with length exceeding max of "
                f"{_KEY_MAX}: {key}"
            )
    return warnings


@dataclass
class EventData(Domain):
    """A structured event record, grouped and searched by its properties."""

    ver: int = 2
    name: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "Event")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "EventData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        warnings = _truncate_fields(self, "EventData", (("name", "Name", 512),))
        warnings.extend(_sanitize_properties(self.properties, "EventData"))
        warnings.extend(_sanitize_measurements(self.measurements, "EventData"))
        return warnings


@dataclass
class PageViewData(EventData):
    """A generic action on a page, such as a button click."""

    url: str = ""
    duration: str = ""

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "PageView")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "PageViewData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        warnings = _truncate_fields(
            self,
            "PageViewData",
            (("url", "Url", 2048), ("name", "Name", 512)),
        )
        warnings.extend(_sanitize_properties(self.properties, "PageViewData"))
        warnings.extend(_sanitize_measurements(self.measurements, "PageViewData"))
        return warnings


@dataclass
class MessageData(Domain):
    """A printf-like trace statement that is text-searched."""

    ver: int = 2
    message: str = ""
    severity_level: SeverityLevel = SeverityLevel.VERBOSE
    properties: dict[str, str] = field(default_factory=dict)

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "Message")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "MessageData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        warnings = _truncate_fields(
            self, "MessageData", (("message", "Message", 32768),)
        )
        warnings.extend(_sanitize_properties(self.properties, "MessageData"))
        return warnings


@dataclass
class MetricData(Domain):
    """A list of measurements and/or aggregations."""

    ver: int = 2
    metrics: list[DataPoint] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "Metric")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "MetricData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields, including those of the data points."""
        warnings = []
        for point in self.metrics:
            warnings.extend(point.sanitize())
        warnings.extend(_sanitize_properties(self.properties, "MetricData"))
        return warnings