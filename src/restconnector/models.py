"""Data models for restconnector.

Connector configuration mirrors the JSON descriptor the surrounding
connector hands in (``authConfig``, ``generalConfig``, ``parameters``,
``plugins``); attribute names are snake_case and mapped with
``rename="camel"``.
"""

from __future__ import annotations

from typing import Any

import msgspec


class AuthConfig(msgspec.Struct, frozen=True, rename="camel", omit_defaults=True):
    """Target system location and static request headers."""

    url: str | None = None
    headers: dict[str, str] | None = None
    template: str | None = None


class QueryConfig(msgspec.Struct, frozen=True, rename="camel", omit_defaults=True):
    """Mapping of runtime parameters onto query-string names."""

    start: str | None = None  # Query name for parameters["start"]
    end: str | None = None  # Query name for parameters["end"]
    properties: dict[str, Any] | None = None  # Static entries, emitted in order


class GeneralConfig(msgspec.Struct, frozen=True, rename="camel", omit_defaults=True):
    """General request settings."""

    query: QueryConfig | None = None


class ConnectorConfig(msgspec.Struct, frozen=True, rename="camel"):
    """Everything the fetch engine reads about one target system."""

    auth_config: AuthConfig = msgspec.field(default_factory=AuthConfig)
    general_config: GeneralConfig = msgspec.field(default_factory=GeneralConfig)
    parameters: dict[str, Any] = msgspec.field(default_factory=dict)
    plugins: list[Any] = msgspec.field(default_factory=list)  # Plugin instances once converted

    @property
    def template(self) -> str | None:
        """Template identifier used to label log lines."""
        return self.auth_config.template


class RequestDescriptor(msgspec.Struct, frozen=True):
    """One outgoing request.

    ``query`` holds composed (key, value) pairs until they are folded
    into ``url``; it is always empty by the time the transport sees it.
    """

    url: str
    method: str = "GET"
    headers: dict[str, str] = msgspec.field(default_factory=dict)
    query: tuple[tuple[str, Any], ...] = ()
    resolve_with_full_response: bool = True


class TransportResponse(msgspec.Struct, frozen=True):
    """Full response returned by a transport."""

    status_code: int
    body: str | bytes | None = None
    headers: dict[str, str] = msgspec.field(default_factory=dict)
