"""UDP broadcast transport implementation using Python sockets."""

from __future__ import annotations

import logging
import socket
from types import TracebackType

from wolctl.core.errors import BroadcastSetupError, PacketSendError, SocketCreationError
from wolctl.transports.base import SocketFactory

LOGGER = logging.getLogger(__name__)


class BroadcastSocket:
    """Sole owner of one UDP socket handle; closes it exactly once."""

    def __init__(self, sock: socket.socket | None = None) -> None:
        self._sock = sock

    @classmethod
    def create(cls, factory: SocketFactory | None = None) -> BroadcastSocket:
        factory = factory or socket.socket
        try:
            sock = factory(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        except OSError as exc:
            raise SocketCreationError(f"Could not create UDP socket: {exc}") from exc
        return cls(sock)

    @property
    def closed(self) -> bool:
        return self._sock is None

    def replace(self, sock: socket.socket) -> None:
        if sock is None:
            raise ValueError("replacement socket must not be None")
        if sock is self._sock:
            return
        self.close()
        self._sock = sock

    def enable_broadcast(self) -> None:
        try:
            self._handle().setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as exc:
            raise BroadcastSetupError(f"Could not enable SO_BROADCAST: {exc}") from exc

    def send_to(self, payload: bytes, destination: tuple[str, int]) -> int:
        try:
            return self._handle().sendto(payload, destination)
        except OSError as exc:
            raise PacketSendError(f"UDP send to {destination[0]}:{destination[1]} failed: {exc}") from exc

    def close(self) -> None:
        if self._sock is None:
            return
        sock, self._sock = self._sock, None
        try:
            sock.close()
        except OSError as exc:
            LOGGER.warning("Closing UDP socket failed: %s", exc)

    def _handle(self) -> socket.socket:
        if self._sock is None:
            raise SocketCreationError("UDP socket is not open")
        return self._sock

    def __enter__(self) -> BroadcastSocket:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def resolve_destination(address: str, port: int) -> tuple[str, int]:
    """Convert dotted-quad text into a sendto() destination."""
    try:
        packed = socket.inet_pton(socket.AF_INET, address)
    except (OSError, UnicodeEncodeError, ValueError) as exc:
        raise BroadcastSetupError(f"Could not convert broadcast address {address!r}: {exc}") from exc
    return socket.inet_ntop(socket.AF_INET, packed), port
