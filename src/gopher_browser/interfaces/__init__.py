"""Abstract interfaces for the Gopher Browser."""

from .gopher_transport import (
    GopherTransport,
    FetchResult,
    TransportError,
    ResolutionError,
    ConnectError,
    SendError,
    ReceiveError,
    EmptyResponseError,
)

__all__ = [
    "GopherTransport",
    "FetchResult",
    "TransportError",
    "ResolutionError",
    "ConnectError",
    "SendError",
    "ReceiveError",
    "EmptyResponseError",
]
