"""Magic packet construction."""

from __future__ import annotations

from wolctl.core.model import HARDWARE_ADDRESS_SIZE, HardwareAddress
from wolctl.core.outcome import WolErrorCode
from wolctl.core.validation import MAC_SEPARATOR, validate_hardware_address

SYNC_STREAM = b"\xff" * 6
ADDRESS_REPEAT_COUNT = 16
MAGIC_PACKET_SIZE = len(SYNC_STREAM) + HARDWARE_ADDRESS_SIZE * ADDRESS_REPEAT_COUNT


def parse_hardware_address(validated: str) -> HardwareAddress:
    """Decode a MAC address string that already passed validation.

    Malformed input here is a caller bug, so it is asserted rather than
    reported as an outcome.
    """
    assert validate_hardware_address(validated) is WolErrorCode.SUCCESS, f"unvalidated MAC: {validated!r}"
    return HardwareAddress(bytes(int(group, 16) for group in validated.split(MAC_SEPARATOR)))


def build_magic_packet(address: HardwareAddress) -> bytes:
    return SYNC_STREAM + address.octets * ADDRESS_REPEAT_COUNT


def magic_packet_for(validated: str) -> bytes:
    return build_magic_packet(parse_hardware_address(validated))
