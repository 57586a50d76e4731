from __future__ import annotations

from pathlib import Path

from tests.fakes import FakeSocketFactory
from wolctl.api import BroadcastSender, Client, NetworkStack, TargetConfig, WolErrorCode


def _client(factory: FakeSocketFactory) -> Client:
    stack = NetworkStack(startup=lambda: None, teardown=lambda: None)
    return Client(sender=BroadcastSender(stack=stack, socket_factory=factory))


def test_public_client_wake_target() -> None:
    factory = FakeSocketFactory()
    client = _client(factory)

    assert client.wake_target("A0-36-BC-BB-EB-CC", "192.168.0.255", 9) is WolErrorCode.SUCCESS
    packet, destination = factory.sock.sent[0]
    assert destination == ("192.168.0.255", 9)
    assert packet[:6] == b"\xff" * 6


def test_public_client_wake_target_validates_first() -> None:
    factory = FakeSocketFactory()
    client = _client(factory)

    assert client.wake_target("A0:36:BC:BB:EB:CC") is WolErrorCode.INVALID_HARDWARE_ADDRESS
    assert client.wake_target("A0-36-BC-BB-EB-CC", "192.168.0.1.255") is WolErrorCode.INVALID_BROADCAST_ADDRESS
    assert client.wake_target("A0-36-BC-BB-EB-CC", port=0) is WolErrorCode.INVALID_PORT
    assert client.wake_target("A0-36-BC-BB-EB-CC", port="65535") is WolErrorCode.SUCCESS
    assert factory.calls and len(factory.sock.sent) == 1


def test_public_client_wake_from_config(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("target:\n  mac_address: 00-11-22-AA-BB-CC\n  port: 9\n", encoding="utf-8")
    factory = FakeSocketFactory()
    client = _client(factory)

    assert client.wake_from_config(path) is WolErrorCode.SUCCESS
    assert factory.sock.sent[0][1] == ("255.255.255.255", 9)
    assert client.wake_from_config(tmp_path / "missing.yaml") is WolErrorCode.CONFIG_FILE_NOT_FOUND


def test_public_client_refuses_empty_config() -> None:
    factory = FakeSocketFactory()
    assert _client(factory).wake(TargetConfig()) is WolErrorCode.MISSING_HARDWARE_ADDRESS
    assert factory.calls == []


def test_public_client_build_packet() -> None:
    client = _client(FakeSocketFactory())
    outcome, packet = client.build_packet("A0-36-BC-BB-EB-CC")
    assert outcome is WolErrorCode.SUCCESS
    assert len(packet) == 102

    outcome, packet = client.build_packet("A0 36 BC BB EB CC")
    assert outcome is WolErrorCode.INVALID_HARDWARE_ADDRESS
    assert packet == b""


def test_public_client_wake_reports_empty_fields() -> None:
    factory = FakeSocketFactory()
    client = _client(factory)

    assert client.wake(TargetConfig("A0-36-BC-BB-EB-CC", "", 9)) is WolErrorCode.MISSING_BROADCAST_ADDRESS
    assert client.wake(TargetConfig("", "192.168.0.255", 9)) is WolErrorCode.MISSING_HARDWARE_ADDRESS
    assert client.wake(TargetConfig("A0-36-BC-BB-EB-CC", "192.168.0.255", 0)) is WolErrorCode.MISSING_PORT
    assert factory.calls == []


def test_public_client_wake_validates_caller_built_config() -> None:
    factory = FakeSocketFactory()
    client = _client(factory)

    assert client.wake(TargetConfig("A0:36:BC:BB:EB:CC", "192.168.0.255", 9)) is WolErrorCode.INVALID_HARDWARE_ADDRESS
    assert client.wake(TargetConfig("A0-36-BC-BB-EB-CC", "192.168.00.255", 9)) is WolErrorCode.INVALID_BROADCAST_ADDRESS
    assert client.wake(TargetConfig("A0-36-BC-BB-EB-CC", "192.168.0.255", 65536)) is WolErrorCode.INVALID_PORT
    assert factory.calls == []

    assert client.wake(TargetConfig("A0-36-BC-BB-EB-CC", "192.168.0.255", 9)) is WolErrorCode.SUCCESS
    assert len(factory.sock.sent) == 1
