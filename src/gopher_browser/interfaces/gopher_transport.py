"""Abstract interface for fetching Gopher resources."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class TransportError(Exception):
    """Base class for failures of a single fetch attempt."""


class ResolutionError(TransportError):
    """Host name could not be resolved to an address."""


class ConnectError(TransportError):
    """Connection was refused or timed out."""


class SendError(TransportError):
    """Request could not be written to the socket."""


class ReceiveError(TransportError):
    """Reading the response failed or timed out."""


class EmptyResponseError(TransportError):
    """Server closed the connection without sending anything."""


@dataclass(frozen=True)
class FetchResult:
    """Raw bytes returned by a server.

    Attributes:
        data: Response body, at most the transport's size cap.
        truncated: True if reading stopped at the size cap.
    """

    data: bytes
    truncated: bool = False


class GopherTransport(ABC):
    """Abstract interface for issuing a single Gopher request."""

    @abstractmethod
    def fetch(self, host: str, selector: str, port: int) -> FetchResult:
        """Send a selector to host:port and return the response.

        Args:
            host: Server host name or address.
            selector: Selector string, sent verbatim.
            port: Server TCP port.

        Returns:
            The response bytes and truncation flag.

        Raises:
            TransportError: If the fetch failed.
        """
        pass
