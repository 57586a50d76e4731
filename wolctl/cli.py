"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from wolctl.core.config_loader import default_config_path, load_config
from wolctl.core.errors import WolctlError
from wolctl.core.model import HARDWARE_ADDRESS_SIZE, LoadedConfig
from wolctl.core.outcome import WolErrorCode
from wolctl.core.packet import magic_packet_for
from wolctl.core.sender import BroadcastSender
from wolctl.core.validation import validate_hardware_address

app = typer.Typer(help="Wake-on-LAN magic packet sender")

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config.yaml")

_CHECKLIST = (
    "Wake-on-LAN is enabled in the target's BIOS/UEFI",
    "The network adapter's power management allows wake on magic packet",
    "The MAC address and broadcast address are correct",
    "Firewall/router settings let the broadcast through",
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_or_exit(config: Path | None) -> LoadedConfig:
    loaded = load_config(config)
    if loaded.outcome is not WolErrorCode.SUCCESS:
        typer.echo("Error: Failed to load configuration.", err=True)
        typer.echo(f"  {loaded.outcome.describe()}", err=True)
        if loaded.source is not None:
            typer.echo(f"  Config file: {loaded.source}", err=True)
        raise typer.Exit(code=int(loaded.outcome))
    return loaded


def _print_target(loaded: LoadedConfig) -> None:
    typer.echo("=== Wake-on-LAN ===")
    typer.echo(f"Target MAC: {loaded.config.hardware_address}")
    typer.echo(f"Broadcast IP: {loaded.config.broadcast_address}")
    typer.echo(f"Port: {loaded.config.port}")
    typer.echo("===================")


@app.command("wake")
def wake(config: Path | None = _CONFIG_OPTION) -> None:
    """Send a magic packet to the configured target."""
    loaded = _load_or_exit(config)
    _print_target(loaded)

    outcome = BroadcastSender().send_config(loaded.config)
    typer.echo(f"Result: {outcome.describe()}")

    if outcome is WolErrorCode.SUCCESS:
        typer.echo("Magic packet sent.")
        typer.echo("If the target does not power on, check:")
        for index, item in enumerate(_CHECKLIST, start=1):
            typer.echo(f"  {index}. {item}")
    else:
        typer.echo("Error: Magic packet could not be sent.", err=True)
    raise typer.Exit(code=int(outcome))


@app.command("check")
def check(config: Path | None = _CONFIG_OPTION) -> None:
    """Validate the configuration file without sending anything."""
    loaded = _load_or_exit(config)
    _print_target(loaded)
    typer.echo(f"Configuration OK: {loaded.source}")


@app.command("packet")
def packet(mac_address: str) -> None:
    """Print the magic packet for MAC_ADDRESS (XX-XX-XX-XX-XX-XX) as hex."""
    outcome = validate_hardware_address(mac_address)
    if outcome is not WolErrorCode.SUCCESS:
        typer.echo(f"Error: {outcome.describe()}: {mac_address}", err=True)
        raise typer.Exit(code=int(outcome))

    payload = magic_packet_for(mac_address)
    for offset in range(0, len(payload), HARDWARE_ADDRESS_SIZE):
        typer.echo(payload[offset : offset + HARDWARE_ADDRESS_SIZE].hex(" "))


@app.command("config-path")
def config_path() -> None:
    """Show where the configuration file is looked up by default."""
    try:
        typer.echo(str(default_config_path()))
    except WolctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=int(exc.code)) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()
