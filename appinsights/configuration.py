"""Settings used to set up a telemetry client."""

from dataclasses import dataclass
from typing import Any

DEFAULT_ENDPOINT_URL = "https://dc.services.visualstudio.com/v2/track"


@dataclass
class TelemetryConfiguration:
    """Configuration for a telemetry client.

    ``max_batch_interval`` is in seconds.  ``client`` is an optional custom
    HTTP client; None means the default one.
    """

    instrumentation_key: str
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    max_batch_size: int = 1024
    max_batch_interval: float = 10.0
    client: Any = None