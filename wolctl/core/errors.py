"""Domain-specific errors for wolctl.

Each error carries the outcome code it maps to. Errors are raised inside the
loader and transport scopes and converted to a `WolErrorCode` at the public
seam that owns the scope.
"""

from __future__ import annotations

from wolctl.core.outcome import WolErrorCode


class WolctlError(Exception):
    """Base error for wolctl."""

    code: WolErrorCode = WolErrorCode.UNEXPECTED_FAILURE

    def __init__(self, message: str, *, code: WolErrorCode | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ConfigPathError(WolctlError):
    """Raised when the configuration file location cannot be resolved."""

    code = WolErrorCode.CONFIG_PATH_UNAVAILABLE


class ConfigLoadError(WolctlError):
    """Raised when the configuration file cannot be found or read."""

    code = WolErrorCode.CONFIG_FILE_UNREADABLE


class ConfigValidationError(WolctlError):
    """Raised when a configuration field is missing or malformed."""


class TransportError(WolctlError):
    """Base transport error."""


class NetworkStackInitError(TransportError):
    """Raised when the host network subsystem cannot be initialized."""

    code = WolErrorCode.NETWORK_STACK_INIT_FAILED


class SocketCreationError(TransportError):
    """Raised when the UDP socket cannot be allocated."""

    code = WolErrorCode.SOCKET_CREATION_FAILED


class BroadcastSetupError(TransportError):
    """Raised when broadcast permission or the destination cannot be set up."""

    code = WolErrorCode.BROADCAST_SETUP_FAILED


class PacketSendError(TransportError):
    """Raised when the datagram send fails or is short."""

    code = WolErrorCode.PACKET_SEND_FAILED
