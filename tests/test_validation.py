from __future__ import annotations

import pytest

from wolctl.core.outcome import WolErrorCode
from wolctl.core.validation import (
    parse_port,
    validate_broadcast_address,
    validate_hardware_address,
    validate_port,
)


def test_dash_separated_mac_is_valid() -> None:
    assert validate_hardware_address("A0-36-BC-BB-EB-CC") is WolErrorCode.SUCCESS
    assert validate_hardware_address("a0-36-bc-bb-eb-cc") is WolErrorCode.SUCCESS
    assert validate_hardware_address("00-11-22-aA-Bb-cC") is WolErrorCode.SUCCESS


@pytest.mark.parametrize(
    "value",
    [
        "",
        "A0:36:BC:BB:EB:CC",
        "A0 36 BC BB EB CC",
        "A0-36-BC:BB-EB-CC",
        "A0-36-BC-BB-EB",
        "A0-36-BC-BB-EB-CC-",
        "A0-36-BC-BB-EB-CC-DD",
        "A0-36-BC-BB-EB-CG",
        "A036BCBBEBCC",
        "A0--36-BC-BB-EB-C",
    ],
)
def test_malformed_mac_is_rejected(value: str) -> None:
    assert validate_hardware_address(value) is WolErrorCode.INVALID_HARDWARE_ADDRESS


def test_mac_failure_logs_a_single_diagnostic(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="wolctl.core.validation"):
        validate_hardware_address("A0:36:BC:BB:EB:CC")
    assert len(caplog.records) == 1
    assert "separator" in caplog.records[0].getMessage()


def test_every_octet_value_is_accepted_in_every_position() -> None:
    for value in range(256):
        octet = str(value)
        for address in (
            f"{octet}.0.0.0",
            f"10.{octet}.0.0",
            f"10.0.{octet}.0",
            f"10.0.0.{octet}",
        ):
            assert validate_broadcast_address(address) is WolErrorCode.SUCCESS, address


@pytest.mark.parametrize(
    "value",
    [
        "192.168.00.255",
        "01.2.3.4",
        "1.2.3.010",
    ],
)
def test_leading_zero_octet_is_rejected(value: str) -> None:
    assert validate_broadcast_address(value) is WolErrorCode.INVALID_BROADCAST_ADDRESS


@pytest.mark.parametrize(
    "value",
    [
        "",
        "192.168.0.1.255",
        "192.168.0",
        "1.2.3.",
        ".1.2.3",
        "1..2.3",
        "1.2.3.4.",
        "256.1.1.1",
        "1.2.3.999",
        "1.2.3.1000",
        "a.b.c.d",
        "1.2.3.-4",
        "1.2.3.4 ",
        "255.255.255.2555",
    ],
)
def test_malformed_broadcast_address_is_rejected(value: str) -> None:
    assert validate_broadcast_address(value) is WolErrorCode.INVALID_BROADCAST_ADDRESS


def test_trailing_empty_octet_is_rejected_by_octet_check(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="wolctl.core.validation"):
        assert validate_broadcast_address("1.2.3.") is WolErrorCode.INVALID_BROADCAST_ADDRESS
    assert "octet length" in caplog.records[-1].getMessage()


def test_port_range_boundaries() -> None:
    assert validate_port(1) is WolErrorCode.SUCCESS
    assert validate_port(9) is WolErrorCode.SUCCESS
    assert validate_port(65535) is WolErrorCode.SUCCESS
    assert validate_port(0) is WolErrorCode.INVALID_PORT
    assert validate_port(65536) is WolErrorCode.INVALID_PORT
    assert validate_port(-1) is WolErrorCode.INVALID_PORT


@pytest.mark.parametrize("value", ["", "   ", "9abc", "abc", "-1", "+9", "9.0", "0", "65536", "99999999999999999999"])
def test_malformed_port_text_is_rejected(value: str) -> None:
    assert validate_port(value) is WolErrorCode.INVALID_PORT


def test_port_text_and_bool() -> None:
    assert validate_port("9") is WolErrorCode.SUCCESS
    assert validate_port(" 65535 ") is WolErrorCode.SUCCESS
    assert validate_port(True) is WolErrorCode.INVALID_PORT
    assert parse_port(" 7 ") == 7
    assert parse_port(9) == 9
