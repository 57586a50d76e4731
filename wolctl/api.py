"""Outcome-returning entry points for scripts and services that wake hosts.

Everything re-exported here is safe to depend on. `Client` methods report
failures as a `WolErrorCode` rather than raising, so callers can map them
straight to exit codes.
"""

from __future__ import annotations

from pathlib import Path

from wolctl.core.config_loader import default_config_path, load_config
from wolctl.core.errors import (
    BroadcastSetupError,
    ConfigLoadError,
    ConfigPathError,
    ConfigValidationError,
    NetworkStackInitError,
    PacketSendError,
    SocketCreationError,
    TransportError,
    WolctlError,
)
from wolctl.core.model import HardwareAddress, LoadedConfig, TargetConfig
from wolctl.core.outcome import WolErrorCode
from wolctl.core.packet import MAGIC_PACKET_SIZE, build_magic_packet, parse_hardware_address
from wolctl.core.sender import BroadcastSender
from wolctl.core.validation import (
    parse_port,
    validate_broadcast_address,
    validate_hardware_address,
    validate_port,
)
from wolctl.transports.stack import NetworkStack, NetworkStackGuard

__all__ = [
    "WolctlError",
    "ConfigPathError",
    "ConfigLoadError",
    "ConfigValidationError",
    "TransportError",
    "NetworkStackInitError",
    "SocketCreationError",
    "BroadcastSetupError",
    "PacketSendError",
    "HardwareAddress",
    "LoadedConfig",
    "TargetConfig",
    "WolErrorCode",
    "MAGIC_PACKET_SIZE",
    "BroadcastSender",
    "NetworkStack",
    "NetworkStackGuard",
    "Client",
]


class Client:
    """Public client for interacting with wolctl core capabilities.

    A `Client` wraps config loading, field validation, and magic packet
    transmission. Every method returns a `WolErrorCode` (or carries one)
    instead of raising.
    """

    def __init__(self, *, sender: BroadcastSender | None = None) -> None:
        self._sender = sender or BroadcastSender()

    @staticmethod
    def default_config_path() -> Path:
        return default_config_path()

    def load_config(self, path: Path | str | None = None) -> LoadedConfig:
        return load_config(path)

    def wake(self, config: TargetConfig) -> WolErrorCode:
        if not config.hardware_address:
            return WolErrorCode.MISSING_HARDWARE_ADDRESS
        if not config.broadcast_address:
            return WolErrorCode.MISSING_BROADCAST_ADDRESS
        if not config.port:
            return WolErrorCode.MISSING_PORT
        return self.wake_target(config.hardware_address, config.broadcast_address, config.port)

    def wake_target(
        self,
        mac_address: str,
        broadcast_address: str = "255.255.255.255",
        port: int | str = 9,
    ) -> WolErrorCode:
        outcome = validate_hardware_address(mac_address)
        if outcome is WolErrorCode.SUCCESS:
            outcome = validate_broadcast_address(broadcast_address)
        if outcome is WolErrorCode.SUCCESS:
            outcome = validate_port(port)
        if outcome is not WolErrorCode.SUCCESS:
            return outcome
        return self._sender.send_magic_packet(mac_address, broadcast_address, parse_port(port))

    def wake_from_config(self, path: Path | str | None = None) -> WolErrorCode:
        loaded = self.load_config(path)
        if loaded.outcome is not WolErrorCode.SUCCESS:
            return loaded.outcome
        return self.wake(loaded.config)

    def build_packet(self, mac_address: str) -> tuple[WolErrorCode, bytes]:
        outcome = validate_hardware_address(mac_address)
        if outcome is not WolErrorCode.SUCCESS:
            return outcome, b""
        return outcome, build_magic_packet(parse_hardware_address(mac_address))
