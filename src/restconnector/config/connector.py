"""Loading connector descriptors from disk."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Iterable

import msgspec

from restconnector.errors.types import ConfigError
from restconnector.models import ConnectorConfig
from restconnector.plugins.base import Plugin
from restconnector.plugins.registry import resolve_plugins


def convert_connector_config(
    data: dict,
    plugins: Iterable[str | Plugin] | None = None,
) -> ConnectorConfig:
    """Convert a raw descriptor dict to a ConnectorConfig.

    Plugin entries in the descriptor are names looked up in the plugin
    registry; ``plugins`` passed here are appended after them.

    Raises:
        ConfigError: If the descriptor does not match the expected shape
    """
    data = dict(data)
    entries: list[str | Plugin] = list(data.pop("plugins", None) or [])
    entries.extend(plugins or [])

    try:
        config = msgspec.convert(data, type=ConnectorConfig)
    except msgspec.ValidationError as e:
        raise ConfigError("Invalid connector configuration.", reference=str(e)) from e

    return msgspec.structs.replace(config, plugins=resolve_plugins(entries))


def _read_descriptor(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Connector configuration not found: {path}")

    try:
        if path.suffix == ".toml":
            with path.open("rb") as f:
                data = tomllib.load(f)
        else:
            data = msgspec.json.decode(path.read_bytes())
    except (tomllib.TOMLDecodeError, msgspec.DecodeError) as e:
        raise ConfigError(f"Could not parse {path.name}.", reference=str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain an object at the top level.")
    return data


def load_connector_config(
    path: Path,
    plugins: Iterable[str | Plugin] | None = None,
    parameters: dict[str, Any] | None = None,
) -> ConnectorConfig:
    """Load a connector descriptor from a JSON or TOML file.

    Args:
        path: Descriptor file; ``.toml`` is read as TOML, anything else as JSON
        plugins: Extra plugins appended after those named in the file
        parameters: Runtime parameters overriding those in the file

    Returns:
        ConnectorConfig with plugins resolved
    """
    config = convert_connector_config(_read_descriptor(path), plugins)
    if parameters:
        config = msgspec.structs.replace(
            config, parameters={**config.parameters, **parameters}
        )
    return config
