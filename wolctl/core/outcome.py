"""Closed set of outcomes returned by every fallible wolctl operation."""

from __future__ import annotations

from enum import IntEnum


class WolErrorCode(IntEnum):
    """Operation outcome. The numeric value doubles as the process exit code."""

    SUCCESS = 0

    CONFIG_PATH_UNAVAILABLE = 1
    INVALID_CONFIG_PATH = 2

    CONFIG_FILE_NOT_FOUND = 3
    CONFIG_FILE_UNREADABLE = 4
    MISSING_HARDWARE_ADDRESS = 5
    INVALID_HARDWARE_ADDRESS = 6
    MISSING_BROADCAST_ADDRESS = 7
    INVALID_BROADCAST_ADDRESS = 8
    MISSING_PORT = 9
    INVALID_PORT = 10

    NETWORK_STACK_INIT_FAILED = 11
    SOCKET_CREATION_FAILED = 12
    BROADCAST_SETUP_FAILED = 13
    PACKET_SEND_FAILED = 14

    UNEXPECTED_FAILURE = 15

    @property
    def ok(self) -> bool:
        return self is WolErrorCode.SUCCESS

    def describe(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[WolErrorCode, str] = {
    WolErrorCode.SUCCESS: "Success",
    WolErrorCode.CONFIG_PATH_UNAVAILABLE: "Could not determine the configuration directory",
    WolErrorCode.INVALID_CONFIG_PATH: "Configuration path is not a regular file",
    WolErrorCode.CONFIG_FILE_NOT_FOUND: "Configuration file not found",
    WolErrorCode.CONFIG_FILE_UNREADABLE: "Configuration file could not be read",
    WolErrorCode.MISSING_HARDWARE_ADDRESS: "MAC address is missing from the configuration",
    WolErrorCode.INVALID_HARDWARE_ADDRESS: "Invalid MAC address",
    WolErrorCode.MISSING_BROADCAST_ADDRESS: "Broadcast address is missing from the configuration",
    WolErrorCode.INVALID_BROADCAST_ADDRESS: "Invalid broadcast address",
    WolErrorCode.MISSING_PORT: "Port is missing from the configuration",
    WolErrorCode.INVALID_PORT: "Invalid port number",
    WolErrorCode.NETWORK_STACK_INIT_FAILED: "Network stack initialization failed",
    WolErrorCode.SOCKET_CREATION_FAILED: "Socket creation failed",
    WolErrorCode.BROADCAST_SETUP_FAILED: "Broadcast setup failed",
    WolErrorCode.PACKET_SEND_FAILED: "Packet send failed",
    WolErrorCode.UNEXPECTED_FAILURE: "Unexpected error",
}
