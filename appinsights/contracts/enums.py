"""Enumerations used by the telemetry data contracts."""

from enum import IntEnum


class SeverityLevel(IntEnum):
    """Defines the level of severity for the event."""

    VERBOSE = 0
    INFORMATION = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    def __str__(self) -> str:
        return self.name.title()


class DataPointType(IntEnum):
    """Type of the metric data measurement."""

    MEASUREMENT = 0
    AGGREGATION = 1

    def __str__(self) -> str:
        return self.name.title()