"""Orchestration for multi-path fetch operations."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from restconnector.core.context import FetchContext
from restconnector.core.executor import request_data
from restconnector.core.http import HttpxTransport
from restconnector.core.http import Transport
from restconnector.core.response import ResponseHandler
from restconnector.core.response import passthrough_handler
from restconnector.models import ConnectorConfig

DEFAULT_LOGGER_NAME = "restconnector"


async def get_data(context: FetchContext, paths: Iterable[str]) -> list[Any]:
    """Fetch every path in order, one at a time.

    Empty results (e.g. not-found paths) are dropped. The first
    unrecovered FetchError aborts the run and propagates unchanged.

    Returns:
        Truthy per-path results in input order
    """
    items: list[Any] = []
    for index, path in enumerate(paths):
        item = await request_data(context, path, index)
        if item:
            items.append(item)
    return items


class RestFetcher:
    """Fetch engine bound to one connector config.

    Usage:
        async with RestFetcher(config) as fetcher:
            items = await fetcher.get_data(["/items", "/users"])
    """

    def __init__(
        self,
        config: ConnectorConfig,
        transport: Transport | None = None,
        handler: ResponseHandler | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._owned_transport = HttpxTransport() if transport is None else None
        self.context = FetchContext(
            config=config,
            transport=transport if transport is not None else self._owned_transport,
            handler=handler or passthrough_handler,
            logger=logger or logging.getLogger(DEFAULT_LOGGER_NAME),
        )

    @property
    def config(self) -> ConnectorConfig:
        return self.context.config

    async def get_data(self, paths: Iterable[str]) -> list[Any]:
        """Fetch every path in order; see :func:`get_data`."""
        return await get_data(self.context, paths)

    async def fetch_one(self, path: str, index: int = 0) -> Any:
        """Fetch a single path, including its one recovery attempt."""
        return await request_data(self.context, path, index)

    async def aclose(self) -> None:
        """Close the transport if this fetcher created it."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> RestFetcher:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


async def fetch_paths(
    config: ConnectorConfig,
    paths: Iterable[str],
    *,
    transport: Transport | None = None,
    handler: ResponseHandler | None = None,
    logger: logging.Logger | None = None,
) -> list[Any]:
    """Fetch paths with a short-lived RestFetcher."""
    async with RestFetcher(config, transport, handler, logger) as fetcher:
        return await fetcher.get_data(paths)
