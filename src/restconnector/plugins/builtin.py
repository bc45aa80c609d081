"""Plugins shipped with restconnector."""

from __future__ import annotations

import logging

import msgspec

from restconnector.errors.types import TransportError
from restconnector.models import ConnectorConfig
from restconnector.models import RequestDescriptor
from restconnector.plugins.base import Plugin
from restconnector.plugins.registry import register_plugin

logger = logging.getLogger(__name__)

TOKEN_PARAMETER = "token"


def _add_bearer_token(
    config: ConnectorConfig, descriptor: RequestDescriptor
) -> RequestDescriptor:
    token = config.parameters.get(TOKEN_PARAMETER)
    if not token:
        return descriptor
    headers = {**descriptor.headers, "Authorization": f"Bearer {token}"}
    return msgspec.structs.replace(descriptor, headers=headers)


async def _log_and_retry(config: ConnectorConfig, error: TransportError) -> None:
    logger.warning(
        "%s: Retrying after status code %s (%s)",
        config.template,
        error.status_code,
        error.message,
    )


def _decode_text(body: str | bytes | None) -> str | None:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


@register_plugin("bearer-token")
def bearer_token() -> Plugin:
    """Send parameters["token"] as a bearer Authorization header."""
    return Plugin(name="bearer-token", request=_add_bearer_token)


@register_plugin("retry-once")
def retry_once() -> Plugin:
    """Retry any plugin-recoverable failure a single time."""
    return Plugin(name="retry-once", onerror=_log_and_retry)


@register_plugin("plain-text")
def plain_text() -> Plugin:
    """Return response bodies as text instead of parsing JSON."""
    return Plugin(name="plain-text", data_manipulation=_decode_text)
