"""Common base types for the telemetry data contracts."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Base:
    """Container holding only the custom-field section of an item."""

    base_type: str = ""

    def sanitize(self) -> list[str]:
        """Truncate over-long fields; nothing here can be too long."""
        return []


@dataclass
class Domain:
    """The abstract common base of all domains."""

    def sanitize(self) -> list[str]:
        """Truncate over-long fields; a domain has none."""
        return []


@dataclass
class Data(Base):
    """Container holding both the data item and its base type."""

    base_data: Any = None

    def sanitize(self) -> list[str]:
        """Truncate over-long fields; the container itself has none."""
        return []