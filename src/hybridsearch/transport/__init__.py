"""HTTP transport to the search backend."""

from hybridsearch.transport.client import (
    Transport,
    TransportResponse,
    VespaTransport,
)

__all__ = [
    "Transport",
    "TransportResponse",
    "VespaTransport",
]
