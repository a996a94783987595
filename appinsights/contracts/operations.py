"""Availability, exception and remote dependency data contracts."""

from dataclasses import dataclass, field

from .base import Domain
from .enums import SeverityLevel
from .eventdata import _envelope_name, _sanitize_measurements, _sanitize_properties
from .frames import ExceptionDetails, _truncate_fields


@dataclass
class AvailabilityData(Domain):
    """The result of executing an availability test."""

    ver: int = 2
    id: str = ""
    name: str = ""
    duration: str = ""
    success: bool = False
    run_location: str = ""
    message: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "Availability")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "AvailabilityData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        warnings = _truncate_fields(
            self,
            "AvailabilityData",
            (
                ("id", "Id", 64),
                ("name", "Name", 1024),
                ("run_location", "RunLocation", 1024),
                ("message", "Message", 8192),
            ),
        )
        warnings.extend(_sanitize_properties(self.properties, "AvailabilityData"))
        warnings.extend(_sanitize_measurements(self.measurements, "AvailabilityData"))
        return warnings


@dataclass
class ExceptionData(Domain):
    """A handled or unhandled exception in the monitored application."""

    ver: int = 2
    exceptions: list[ExceptionDetails] = field(default_factory=list)
    severity_level: SeverityLevel = SeverityLevel.VERBOSE
    problem_id: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "Exception")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "ExceptionData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields, including those of the exception chain."""
        warnings = []
        for details in self.exceptions:
            warnings.extend(details.sanitize())
        warnings.extend(
            _truncate_fields(
                self, "ExceptionData", (("problem_id", "ProblemId", 1024),)
            )
        )
        warnings.extend(_sanitize_properties(self.properties, "ExceptionData"))
        warnings.extend(_sanitize_measurements(self.measurements, "ExceptionData"))
        return warnings


@dataclass
class RemoteDependencyData(Domain):
    """An interaction with a remote component such as SQL or an HTTP endpoint."""

    ver: int = 2
    name: str = ""
    id: str = ""
    result_code: str = ""
    duration: str = ""
    success: bool = True
    data: str = ""
    target: str = ""
    type: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "RemoteDependency")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "RemoteDependencyData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        warnings = _truncate_fields(
            self,
            "RemoteDependencyData",
            (
                ("name", "Name", 1024),
                ("id", "Id", 128),
                ("result_code", "ResultCode", 1024),
                ("data", "Data", 8192),
                ("target", "Target", 1024),
                ("type", "Type", 1024),
            ),
        )
        warnings.extend(_sanitize_properties(self.properties, "RemoteDependencyData"))
        warnings.extend(
            _sanitize_measurements(self.measurements, "RemoteDependencyData")
        )
        return warnings