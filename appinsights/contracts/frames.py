"""Stack frame, exception detail and metric data point contracts."""

from dataclasses import dataclass, field

from .enums import DataPointType


def _truncate_fields(obj, type_name: str, limits) -> list[str]:
    warnings = []
    for attr, label, limit in limits:
        value = getattr(obj, attr)
        if len(value) > limit:
            setattr(obj, attr, value[:limit])
            warnings.append(f"{type_name}.{label} exceeded maximum length of {limit}")
    return warnings


@dataclass
class StackFrame:
    """Stack frame information."""

    level: int = 0
    method: str = ""
    assembly: str = ""
    file_name: str = ""
    line: int = 0

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        return _truncate_fields(
            self,
            "StackFrame",
            (
                ("method", "Method", 1024),
                ("assembly", "Assembly", 1024),
                ("file_name", "FileName", 1024),
            ),
        )


@dataclass
class ExceptionDetails:
    """Details of one exception in a chain."""

    id: int = 0
    outer_id: int = 0
    type_name: str = ""
    message: str = ""
    has_full_stack: bool = True
    stack: str = ""
    parsed_stack: list[StackFrame] = field(default_factory=list)

    def sanitize(self) -> list[str]:
        """Truncate over-long fields, including those of the stack frames."""
        warnings = _truncate_fields(
            self,
            "ExceptionDetails",
            (
                ("type_name", "TypeName", 1024),
                ("message", "Message", 32768),
                ("stack", "Stack", 32768),
            ),
        )
        for frame in self.parsed_stack:
            warnings.extend(frame.sanitize())
        return warnings


@dataclass
class DataPoint:
    """A single metric measurement or aggregation."""

    name: str = ""
    kind: DataPointType = DataPointType.MEASUREMENT
    value: float = 0.0
    count: int = 0
    min: float = 0.0
    max: float = 0.0
    std_dev: float = 0.0

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        return _truncate_fields(self, "DataPoint", (("name", "Name", 1024),))