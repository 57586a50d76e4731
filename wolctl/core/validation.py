"""Syntax checks for the hardware address, broadcast address, and port.

All validators are pure and total: they return a `WolErrorCode` and never
raise. The first fault found short-circuits and is reported as a single
diagnostic line on the module logger.
"""

from __future__ import annotations

import logging
import re
import string

from wolctl.core.outcome import WolErrorCode

LOGGER = logging.getLogger(__name__)

MAC_ADDRESS_MAX_LENGTH = 18
MAC_ADDRESS_TEXT_LENGTH = 17
MAC_SEPARATOR = "-"
_MAC_SEPARATOR_INDICES = frozenset({2, 5, 8, 11, 14})
_HEX_DIGITS = frozenset(string.hexdigits)

IP_ADDRESS_MAX_LENGTH = 15
_IP_DOT_COUNT = 3
_OCTET_MAX_DIGITS = 3
_OCTET_MAX_VALUE = 255

MIN_PORT = 1
MAX_PORT = 65535
_PORT_MAX_DIGITS = 10
_DECIMAL_RE = re.compile(r"^[0-9]+$")


def validate_hardware_address(value: str) -> WolErrorCode:
    """Accept only ``XX-XX-XX-XX-XX-XX`` with case-insensitive hex digits."""
    if not isinstance(value, str) or not value or len(value) > MAC_ADDRESS_MAX_LENGTH:
        LOGGER.warning("MAC address length is invalid: %r", value)
        return WolErrorCode.INVALID_HARDWARE_ADDRESS
    if len(value) != MAC_ADDRESS_TEXT_LENGTH:
        LOGGER.warning("MAC address must hold six 2-digit hex groups: %r", value)
        return WolErrorCode.INVALID_HARDWARE_ADDRESS

    for index, ch in enumerate(value):
        if index in _MAC_SEPARATOR_INDICES:
            if ch != MAC_SEPARATOR:
                LOGGER.warning(
                    "MAC address separator %r at position %d is invalid; only %r is accepted",
                    ch,
                    index,
                    MAC_SEPARATOR,
                )
                return WolErrorCode.INVALID_HARDWARE_ADDRESS
        elif ch not in _HEX_DIGITS:
            LOGGER.warning("MAC address contains an invalid character: %r", ch)
            return WolErrorCode.INVALID_HARDWARE_ADDRESS

    return WolErrorCode.SUCCESS


def validate_broadcast_address(value: str) -> WolErrorCode:
    """Accept a dotted-quad IPv4 address without leading zeros."""
    if not isinstance(value, str) or not value or len(value) > IP_ADDRESS_MAX_LENGTH:
        LOGGER.warning("Broadcast address length is invalid: %r", value)
        return WolErrorCode.INVALID_BROADCAST_ADDRESS

    start = 0
    dot_count = 0
    for index in range(len(value) + 1):
        at_end = index == len(value)
        if not at_end and value[index] != ".":
            continue

        outcome = _validate_octet(value[start:index])
        if outcome is not WolErrorCode.SUCCESS:
            return outcome
        start = index + 1

        if not at_end:
            dot_count += 1
            if dot_count > _IP_DOT_COUNT:
                LOGGER.warning("Broadcast address has too many '.' separators: %r", value)
                return WolErrorCode.INVALID_BROADCAST_ADDRESS

    if dot_count != _IP_DOT_COUNT:
        LOGGER.warning(
            "Broadcast address needs %d '.' separators, found %d: %r",
            _IP_DOT_COUNT,
            dot_count,
            value,
        )
        return WolErrorCode.INVALID_BROADCAST_ADDRESS

    return WolErrorCode.SUCCESS


def _validate_octet(octet: str) -> WolErrorCode:
    if not octet or len(octet) > _OCTET_MAX_DIGITS:
        LOGGER.warning("Broadcast address octet length is invalid: %r", octet)
        return WolErrorCode.INVALID_BROADCAST_ADDRESS

    for ch in octet:
        if ch not in string.digits:
            LOGGER.warning("Broadcast address octet contains an invalid character: %r", ch)
            return WolErrorCode.INVALID_BROADCAST_ADDRESS

    if len(octet) > 1 and octet[0] == "0":
        LOGGER.warning("Broadcast address octet has a leading zero: %r", octet)
        return WolErrorCode.INVALID_BROADCAST_ADDRESS

    if int(octet) > _OCTET_MAX_VALUE:
        LOGGER.warning("Broadcast address octet is out of range (0-255): %s", octet)
        return WolErrorCode.INVALID_BROADCAST_ADDRESS

    return WolErrorCode.SUCCESS


def validate_port(value: int | str) -> WolErrorCode:
    """Accept 1-65535 given as an int or as plain decimal text."""
    if isinstance(value, bool):
        LOGGER.warning("Port must be a number, got %r", value)
        return WolErrorCode.INVALID_PORT

    if isinstance(value, str):
        text = value.strip()
        if not text:
            LOGGER.warning("Port is empty")
            return WolErrorCode.INVALID_PORT
        if not _DECIMAL_RE.match(text):
            LOGGER.warning("Port is not a decimal number: %r", value)
            return WolErrorCode.INVALID_PORT
        if len(text) > _PORT_MAX_DIGITS:
            LOGGER.warning("Port numeral is out of range: %s", text)
            return WolErrorCode.INVALID_PORT
        number = int(text)
    elif isinstance(value, int):
        number = value
    else:
        LOGGER.warning("Port must be a number, got %r", value)
        return WolErrorCode.INVALID_PORT

    if number < MIN_PORT or number > MAX_PORT:
        LOGGER.warning("Port must be within %d-%d, got %d", MIN_PORT, MAX_PORT, number)
        return WolErrorCode.INVALID_PORT

    return WolErrorCode.SUCCESS


def parse_port(value: int | str) -> int:
    """Convert a port that already passed `validate_port`."""
    assert validate_port(value) is WolErrorCode.SUCCESS, f"unvalidated port: {value!r}"
    return int(value.strip()) if isinstance(value, str) else int(value)
