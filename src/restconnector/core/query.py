"""Request composition from connector configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

import httpx
import msgspec

from restconnector.models import ConnectorConfig
from restconnector.models import RequestDescriptor

SCHEME_SEPARATOR = "://"


def resolve_url(base_url: str | None, path: str) -> str:
    """Use path verbatim if absolute, else append it to the base URL."""
    if SCHEME_SEPARATOR in path:
        return path
    return (base_url or "") + path


def compose_query(config: ConnectorConfig) -> tuple[tuple[str, Any], ...]:
    """Collect query entries in fixed order: start, end, then properties."""
    query = config.general_config.query
    if query is None:
        return ()

    entries: list[tuple[str, Any]] = []
    if query.start and "start" in config.parameters:
        entries.append((query.start, config.parameters["start"]))
    if query.end and "end" in config.parameters:
        entries.append((query.end, config.parameters["end"]))
    for name, value in (query.properties or {}).items():
        # A one-entry mapping is itself the key/value pair
        if isinstance(value, Mapping) and len(value) == 1:
            entries.extend(value.items())
        else:
            entries.append((name, value))
    return tuple(entries)


def compose_request(config: ConnectorConfig, path: str) -> RequestDescriptor:
    """Build the initial descriptor for one resource path."""
    return RequestDescriptor(
        method="GET",
        url=resolve_url(config.auth_config.url, path),
        headers=dict(config.auth_config.headers or {}),
        query=compose_query(config),
    )


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(entries: Iterable[tuple[str, Any]]) -> str:
    """Join entries as key=value pairs with '&'.

    Keys and values are not escaped.
    """
    return "&".join(f"{key}={_format_value(value)}" for key, value in entries)


def _query_separator(url: str) -> str:
    if list(httpx.URL(url).params.keys()):
        return "&"
    if url.endswith("?"):
        return ""
    return "?"


def attach_query(descriptor: RequestDescriptor) -> RequestDescriptor:
    """Fold query entries into the URL and drop them from the descriptor."""
    if not descriptor.query:
        return descriptor

    url = descriptor.url + _query_separator(descriptor.url) + build_query_string(
        descriptor.query
    )
    return msgspec.structs.replace(descriptor, url=url, query=())
