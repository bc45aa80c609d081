"""restconnector: REST data retrieval with a pluggable request pipeline."""

from __future__ import annotations

__version__ = "0.1.0"

from restconnector.core.orchestrator import RestFetcher
from restconnector.core.orchestrator import fetch_paths
from restconnector.core.orchestrator import get_data
from restconnector.errors.types import FetchError
from restconnector.errors.types import TransportError
from restconnector.models import AuthConfig
from restconnector.models import ConnectorConfig
from restconnector.models import GeneralConfig
from restconnector.models import QueryConfig
from restconnector.models import RequestDescriptor
from restconnector.models import TransportResponse
from restconnector.plugins.base import Plugin

__all__ = [
    "__version__",
    "AuthConfig",
    "QueryConfig",
    "GeneralConfig",
    "ConnectorConfig",
    "RequestDescriptor",
    "TransportResponse",
    "Plugin",
    "FetchError",
    "TransportError",
    "RestFetcher",
    "get_data",
    "fetch_paths",
]


def main() -> None:
    """Entry point for the restconnector CLI."""
    from restconnector.cli.app import run_app

    run_app()
