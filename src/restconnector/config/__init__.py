"""Configuration for restconnector."""

from restconnector.config.connector import (
    convert_connector_config,
    load_connector_config,
)
from restconnector.config.paths import PACKAGE_NAME, config_dir, config_file
from restconnector.config.settings import (
    FetchSettings,
    LoggingSettings,
    Settings,
    get_settings,
    load_settings,
    reload_settings,
)

__all__ = [
    # paths
    "PACKAGE_NAME",
    "config_dir",
    "config_file",
    # settings
    "Settings",
    "FetchSettings",
    "LoggingSettings",
    "get_settings",
    "load_settings",
    "reload_settings",
    # connector
    "convert_connector_config",
    "load_connector_config",
]
