"""Shortcuts for the metric kinds and severity levels."""

from .contracts.enums import DataPointType, SeverityLevel

MEASUREMENT = DataPointType.MEASUREMENT
AGGREGATION = DataPointType.AGGREGATION

VERBOSE = SeverityLevel.VERBOSE
INFORMATION = SeverityLevel.INFORMATION
WARNING = SeverityLevel.WARNING
ERROR = SeverityLevel.ERROR
CRITICAL = SeverityLevel.CRITICAL