"""Plugin pipeline invocation points."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import msgspec

from restconnector.errors.types import DEFAULT_MESSAGE
from restconnector.errors.types import FetchError
from restconnector.errors.types import TransportError
from restconnector.models import ConnectorConfig
from restconnector.models import RequestDescriptor
from restconnector.plugins.base import Capability
from restconnector.plugins.base import Plugin
from restconnector.plugins.base import call_hook

logger = logging.getLogger(__name__)


def _exposing(plugins: Iterable[Plugin], capability: Capability) -> list[Plugin]:
    return [plugin for plugin in plugins if plugin.has(capability)]


async def run_request_hooks(
    plugins: Iterable[Plugin],
    config: ConnectorConfig,
    descriptor: RequestDescriptor,
) -> RequestDescriptor:
    """Pass the descriptor through every request hook in order.

    Each hook sees the descriptor returned by the previous one.
    """
    for plugin in _exposing(plugins, Capability.REQUEST):
        descriptor = await call_hook(plugin.hook(Capability.REQUEST), config, descriptor)
        if not isinstance(descriptor, RequestDescriptor):
            raise FetchError(
                500,
                DEFAULT_MESSAGE,
                reference=f"Plugin {plugin.name!r} request hook returned "
                f"{type(descriptor).__name__}, expected RequestDescriptor.",
            )
    return descriptor


async def run_error_hooks(
    plugins: Iterable[Plugin],
    config: ConnectorConfig,
    error: TransportError,
) -> Any:
    """Hand the error to the first plugin exposing an onerror hook.

    Returns:
        Whatever the hook returns

    Raises:
        FetchError: If no plugin exposes an onerror hook
    """
    for plugin in _exposing(plugins, Capability.ONERROR):
        return await call_hook(plugin.hook(Capability.ONERROR), config, error)

    raise FetchError(error.status_code, DEFAULT_MESSAGE)


async def transform_body(
    plugins: Iterable[Plugin],
    body: str | bytes | None,
    log: logging.Logger | None = None,
) -> Any:
    """Turn a raw response body into a parsed value.

    The first data_manipulation hook wins. Without one the body is
    parsed as JSON; malformed input is logged and yields None.
    """
    for plugin in _exposing(plugins, Capability.DATA_MANIPULATION):
        return await call_hook(plugin.hook(Capability.DATA_MANIPULATION), body)

    try:
        return msgspec.json.decode(body)
    except (msgspec.DecodeError, TypeError):
        (log or logger).error("Failed to parse response body.")
        return None
