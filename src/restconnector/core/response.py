"""Downstream response handling."""

from __future__ import annotations

from typing import Any, Awaitable, Protocol

from restconnector.models import ConnectorConfig


class ResponseHandler(Protocol):
    """Receives each parsed body together with its path and position.

    May return the result directly or an awaitable of it.
    """

    def __call__(
        self, config: ConnectorConfig, path: str, index: int, data: Any
    ) -> Any | Awaitable[Any]: ...


async def passthrough_handler(
    config: ConnectorConfig, path: str, index: int, data: Any
) -> Any:
    """Return the parsed body unchanged."""
    return data
