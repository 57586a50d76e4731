"""Magic packet transmission used by CLI and API frontends."""

from __future__ import annotations

import logging

from wolctl.core.errors import PacketSendError, WolctlError
from wolctl.core.model import TargetConfig
from wolctl.core.outcome import WolErrorCode
from wolctl.core.packet import MAGIC_PACKET_SIZE, magic_packet_for
from wolctl.transports.base import SocketFactory
from wolctl.transports.stack import NetworkStack, NetworkStackGuard
from wolctl.transports.udp import BroadcastSocket, resolve_destination

LOGGER = logging.getLogger(__name__)


class BroadcastSender:
    """Sends one magic packet per call. No retries: WOL has no acknowledgment."""

    def __init__(
        self,
        *,
        stack: NetworkStack | None = None,
        socket_factory: SocketFactory | None = None,
    ) -> None:
        self.stack = stack
        self.socket_factory = socket_factory

    def send_magic_packet(self, hardware_address: str, broadcast_address: str, port: int) -> WolErrorCode:
        # Inputs come from the config loader, which already validated them.
        assert hardware_address, "hardware address must not be empty"
        assert broadcast_address, "broadcast address must not be empty"
        assert port != 0, "port must not be zero"

        packet = magic_packet_for(hardware_address)

        try:
            self._transmit(packet, broadcast_address, port)
        except WolctlError as exc:
            LOGGER.error("%s", exc)
            return exc.code
        except Exception:
            LOGGER.exception("Unexpected error while sending magic packet to %s", hardware_address)
            return WolErrorCode.UNEXPECTED_FAILURE

        LOGGER.info("Magic packet for %s sent to %s:%d", hardware_address, broadcast_address, port)
        return WolErrorCode.SUCCESS

    def send_config(self, config: TargetConfig) -> WolErrorCode:
        return self.send_magic_packet(config.hardware_address, config.broadcast_address, config.port)

    def _transmit(self, packet: bytes, broadcast_address: str, port: int) -> None:
        with NetworkStackGuard(self.stack):
            with BroadcastSocket.create(self.socket_factory) as sock:
                sock.enable_broadcast()
                destination = resolve_destination(broadcast_address, port)
                sent = sock.send_to(packet, destination)

        if sent != MAGIC_PACKET_SIZE:
            raise PacketSendError(f"Short UDP send: {sent} of {MAGIC_PACKET_SIZE} bytes written")
