"""TCP socket transport for Gopher requests."""

import logging
import socket

from ..interfaces import (
    GopherTransport,
    FetchResult,
    ResolutionError,
    ConnectError,
    SendError,
    ReceiveError,
)

logger = logging.getLogger(__name__)


class SocketTransport(GopherTransport):
    """Fetches Gopher resources over a plain TCP connection.

    One socket per fetch: it is opened, used and closed before
    fetch() returns, whether the request succeeded or not.
    """

    DEFAULT_TIMEOUT = 15.0
    DEFAULT_MAX_RESPONSE_BYTES = 512 * 1024
    RECV_SIZE = 4096

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
        encoding: str = "utf-8",
    ):
        """
        Initialize the transport.

        Args:
            timeout: Socket read/write timeout in seconds.
            max_response_bytes: Responses longer than this are truncated.
            encoding: Encoding for selectors; surrogate-escaped bytes
                      from a parsed menu are sent unchanged.
        """
        self.timeout = timeout
        self.max_response_bytes = max_response_bytes
        self.encoding = encoding

    def fetch(self, host: str, selector: str, port: int = 70) -> FetchResult:
        """
        Send a selector request and read the response.

        Args:
            host: Server host name or address.
            selector: Selector string (empty requests the root menu).
            port: Server TCP port.

        Returns:
            FetchResult with the response bytes. If the response exceeded
            max_response_bytes, data holds the first max_response_bytes
            bytes and truncated is True.

        Raises:
            ResolutionError: If the host could not be resolved.
            ConnectError: If the connection failed or timed out.
            SendError: If the request could not be sent.
            ReceiveError: If reading the response failed or timed out.
        """
        address_info = self._resolve(host, port)
        sock = self._connect(address_info, host, port)
        try:
            self._send(sock, selector)
            data, truncated = self._receive(sock)
        finally:
            sock.close()

        logger.debug(f"Received {len(data)} bytes from {host}:{port}")
        return FetchResult(data=data, truncated=truncated)

    def _resolve(self, host: str, port: int) -> tuple:
        """Resolve host to the first stream address."""
        try:
            addresses = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        # idna rejects empty or over-long labels with UnicodeError
        except (socket.gaierror, UnicodeError, ValueError) as e:
            raise ResolutionError(f"Could not resolve {host!r}: {e}") from e

        if not addresses:
            raise ResolutionError(f"No address found for {host}")

        return addresses[0]

    def _connect(self, address_info: tuple, host: str, port: int) -> socket.socket:
        """Open a socket to the resolved address."""
        family, socktype, proto, _canonname, address = address_info
        sock = socket.socket(family, socktype, proto)
        try:
            sock.settimeout(self.timeout)
            sock.connect(address)
        except OSError as e:
            sock.close()
            raise ConnectError(f"Could not connect to {host}:{port}: {e}") from e

        logger.debug(f"Connected to {host}:{port}")
        return sock

    def _send(self, sock: socket.socket, selector: str) -> None:
        """Send the selector line."""
        try:
            request = f"{selector}\r\n".encode(self.encoding, errors="surrogateescape")
        except UnicodeError as e:
            raise SendError(f"Cannot encode selector {selector!r}: {e}") from e

        try:
            sock.sendall(request)
        except OSError as e:
            raise SendError(f"Failed to send request: {e}") from e

    def _receive(self, sock: socket.socket) -> tuple[bytes, bool]:
        """Read until the peer closes or the size cap is exceeded."""
        chunks = []
        total = 0
        truncated = False

        while True:
            try:
                chunk = sock.recv(self.RECV_SIZE)
            except OSError as e:
                raise ReceiveError(f"Failed to read response: {e}") from e

            if not chunk:
                break

            chunks.append(chunk)
            total += len(chunk)

            if total > self.max_response_bytes:
                truncated = True
                break

        data = b"".join(chunks)
        if truncated:
            logger.warning(f"Response exceeded {self.max_response_bytes} bytes, truncating")
            data = data[: self.max_response_bytes]

        return data, truncated
