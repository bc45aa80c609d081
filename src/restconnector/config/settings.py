"""Engine settings and loading for restconnector."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Literal

import msgspec

logger = logging.getLogger(__name__)

# Default values
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FetchSettings(msgspec.Struct, omit_defaults=True):
    """Transport timeouts."""

    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT


class LoggingSettings(msgspec.Struct, omit_defaults=True):
    """Log output settings."""

    level: LogLevel = DEFAULT_LOG_LEVEL


class Settings(msgspec.Struct, omit_defaults=True):
    """Main settings structure."""

    fetch: FetchSettings = msgspec.field(default_factory=FetchSettings)
    logging: LoggingSettings = msgspec.field(default_factory=LoggingSettings)


def _load_from_toml(path: Path) -> dict:
    """Load settings from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def convert_settings(data: dict) -> Settings:
    """Convert raw dict to Settings struct."""
    return msgspec.convert(data, type=Settings)


def _apply_env_overrides(settings: Settings) -> Settings:
    """Apply environment variable overrides to settings.

    RESTCONNECTOR_TIMEOUT: Transport timeout in seconds
    RESTCONNECTOR_LOG_LEVEL: Log level name
    """
    if "RESTCONNECTOR_TIMEOUT" in os.environ:
        raw = os.environ["RESTCONNECTOR_TIMEOUT"]
        try:
            fetch = msgspec.structs.replace(settings.fetch, timeout=float(raw))
            settings = msgspec.structs.replace(settings, fetch=fetch)
        except ValueError:
            logger.warning("Ignoring invalid RESTCONNECTOR_TIMEOUT: %r", raw)

    if "RESTCONNECTOR_LOG_LEVEL" in os.environ:
        level = os.environ["RESTCONNECTOR_LOG_LEVEL"].strip().upper()
        try:
            log_settings = msgspec.convert({"level": level}, type=LoggingSettings)
            settings = msgspec.structs.replace(settings, logging=log_settings)
        except msgspec.ValidationError:
            logger.warning("Ignoring invalid RESTCONNECTOR_LOG_LEVEL: %r", level)

    return settings


# Settings state storage
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the current settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from disk."""
    global _settings
    _settings = load_settings()
    return _settings


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from file with defaults."""
    from .paths import config_file

    settings_path = path or config_file()

    raw_data = _load_from_toml(settings_path)
    if not raw_data:
        settings = Settings()
    else:
        settings = convert_settings(raw_data)

    return _apply_env_overrides(settings)
