"""Configuration loading and validation for the wake target.

The config file is YAML::

    target:
      mac_address: "A0-36-BC-BB-EB-CC"
      broadcast_ip: "192.168.0.255"   # optional, defaults to 255.255.255.255
      port: 9

`load_config` never raises: it returns a `LoadedConfig` whose outcome is the
first failure found, and whose config is empty unless every field is valid.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from wolctl.core.errors import ConfigLoadError, ConfigPathError, ConfigValidationError, WolctlError
from wolctl.core.model import EMPTY_CONFIG, LoadedConfig, TargetConfig
from wolctl.core.outcome import WolErrorCode
from wolctl.core.validation import (
    parse_port,
    validate_broadcast_address,
    validate_hardware_address,
    validate_port,
)

CONFIG_FILE_NAME = "config.yaml"
DEFAULT_BROADCAST_ADDRESS = "255.255.255.255"
LOGGER = logging.getLogger(__name__)

_FIELD_OUTCOMES = {
    "mac_address": WolErrorCode.INVALID_HARDWARE_ADDRESS,
    "broadcast_ip": WolErrorCode.INVALID_BROADCAST_ADDRESS,
    "port": WolErrorCode.INVALID_PORT,
}


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects duplicate mapping keys."""


UniqueKeyLoader.yaml_implicit_resolvers = {
    key: list(value) for key, value in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

for first_char, mappings in list(UniqueKeyLoader.yaml_implicit_resolvers.items()):
    UniqueKeyLoader.yaml_implicit_resolvers[first_char] = [
        (tag, regexp)
        for tag, regexp in mappings
        if tag != "tag:yaml.org,2002:bool"
    ]


def _construct_mapping(loader: UniqueKeyLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise ConfigLoadError(f"Duplicate key '{key}' in YAML document")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,
)


@lru_cache(maxsize=1)
def _load_schema_validator() -> Any:
    schema_text = resources.files("wolctl.schemas").joinpath("config.schema.json").read_text(
        encoding="utf-8"
    )
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def default_config_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/wolctl/config.yaml`` (``~/.config`` fallback)."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "wolctl" / CONFIG_FILE_NAME
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise ConfigPathError(f"Could not determine the home directory: {exc}") from exc
    return home / ".config" / "wolctl" / CONFIG_FILE_NAME


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigLoadError(
            f"Configuration file not found: {path}",
            code=WolErrorCode.CONFIG_FILE_NOT_FOUND,
        )
    if not path.is_file():
        raise ConfigLoadError(
            f"Configuration path is not a regular file: {path}",
            code=WolErrorCode.INVALID_CONFIG_PATH,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(f"Configuration file {path} is not UTF-8 encoded: {exc}") from exc
    except OSError as exc:
        raise ConfigLoadError(f"Could not read configuration file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigLoadError(f"Configuration file {path} must contain a mapping at root")
    return loaded


def _check_schema(doc: dict[str, Any], source: Path) -> None:
    validator = _load_schema_validator()
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = [str(p) for p in exc.path]
        where = f" ({'.'.join(path)})" if path else ""
        code = _FIELD_OUTCOMES.get(path[-1]) if path else None
        raise ConfigValidationError(
            f"Schema validation failed for {source}{where}: {exc.message}",
            code=code or WolErrorCode.CONFIG_FILE_UNREADABLE,
        ) from exc


def _build_config(doc: dict[str, Any], source: Path) -> TargetConfig:
    _check_schema(doc, source)
    target = doc["target"]

    mac_address = target.get("mac_address")
    if not mac_address:
        raise ConfigValidationError(
            f"{source}: target.mac_address is missing",
            code=WolErrorCode.MISSING_HARDWARE_ADDRESS,
        )

    broadcast_ip = target.get("broadcast_ip", DEFAULT_BROADCAST_ADDRESS)
    if not broadcast_ip:
        raise ConfigValidationError(
            f"{source}: target.broadcast_ip is empty",
            code=WolErrorCode.MISSING_BROADCAST_ADDRESS,
        )

    port = target.get("port")
    if port is None or (isinstance(port, str) and not port.strip()):
        raise ConfigValidationError(f"{source}: target.port is missing", code=WolErrorCode.MISSING_PORT)

    outcome = validate_hardware_address(mac_address)
    if outcome is WolErrorCode.SUCCESS:
        outcome = validate_broadcast_address(broadcast_ip)
    if outcome is WolErrorCode.SUCCESS:
        outcome = validate_port(port)
    if outcome is not WolErrorCode.SUCCESS:
        raise ConfigValidationError(f"{source}: {outcome.describe()}", code=outcome)

    return TargetConfig(
        hardware_address=mac_address,
        broadcast_address=broadcast_ip,
        port=parse_port(port),
    )


def load_config(path: Path | str | None = None) -> LoadedConfig:
    source: Path | None = None
    try:
        source = Path(path) if path is not None else default_config_path()
        doc = _read_yaml(source)
        config = _build_config(doc, source)
    except WolctlError as exc:
        LOGGER.warning("%s", exc)
        return LoadedConfig(outcome=exc.code, config=EMPTY_CONFIG, source=source)

    return LoadedConfig(outcome=WolErrorCode.SUCCESS, config=config, source=source)
