"""The envelope that wraps every telemetry item."""

from dataclasses import dataclass, field
from typing import Any

_LIMITS = (
    ("name", "Name", 1024),
    ("time", "Time", 64),
    ("seq", "Seq", 64),
    ("ikey", "IKey", 40),
)


@dataclass
class Envelope:
    """System variables for a telemetry item."""

    ver: int = 1
    name: str = ""
    time: str = ""
    sample_rate: float = 100.0
    seq: str = ""
    ikey: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    data: Any = None

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        warnings = []
        for attr, label, limit in _LIMITS:
            value = getattr(self, attr)
            if len(value) > limit:
                setattr(self, attr, value[:limit])
                warnings.append(f"Envelope.{label} exceeded maximum length of {limit}")
        return warnings