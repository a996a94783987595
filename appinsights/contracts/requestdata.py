"""Request data contract."""

from dataclasses import dataclass, field

from .base import Domain
from .eventdata import _envelope_name, _sanitize_measurements, _sanitize_properties
from .frames import _truncate_fields


@dataclass
class RequestData(Domain):
    """Completion of an external request to the application, with its results."""

    ver: int = 2
    id: str = ""
    source: str = ""
    name: str = ""
    duration: str = ""
    response_code: str = ""
    success: bool = False
    url: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)

    def envelope_name(self, key: str) -> str:
        """Return the name used when this is wrapped in an envelope."""
        return _envelope_name(key, "Request")

    def base_type(self) -> str:
        """Return the base type used when placed in a Data container."""
        return "RequestData"

    def sanitize(self) -> list[str]:
        """Truncate over-long fields and return a warning for each."""
        warnings = _truncate_fields(
            self,
            "RequestData",
            (
                ("id", "Id", 128),
                ("source", "Source", 1024),
                ("name", "Name", 1024),
                ("response_code", "ResponseCode", 1024),
                ("url", "Url", 2048),
            ),
        )
        warnings.extend(_sanitize_properties(self.properties, "RequestData"))
        warnings.extend(_sanitize_measurements(self.measurements, "RequestData"))
        return warnings