"""Transport implementations for the Gopher Browser."""

from .socket_transport import SocketTransport

__all__ = ["SocketTransport"]
