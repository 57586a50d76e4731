"""Core data models used across validation, loader, sender, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from wolctl.core.outcome import WolErrorCode

HARDWARE_ADDRESS_SIZE = 6


@dataclass(frozen=True)
class HardwareAddress:
    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != HARDWARE_ADDRESS_SIZE:
            raise ValueError(f"hardware address must be {HARDWARE_ADDRESS_SIZE} bytes, got {len(self.octets)}")

    def __str__(self) -> str:
        return "-".join(f"{octet:02X}" for octet in self.octets)


@dataclass(frozen=True)
class TargetConfig:
    hardware_address: str = ""
    broadcast_address: str = ""
    port: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.hardware_address and not self.broadcast_address and self.port == 0


EMPTY_CONFIG = TargetConfig()


@dataclass(frozen=True)
class LoadedConfig:
    outcome: WolErrorCode
    config: TargetConfig
    source: Path | None = None
