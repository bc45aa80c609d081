"""Single-path request execution."""

from __future__ import annotations

from typing import Any

from restconnector.core.context import FetchContext
from restconnector.core.query import attach_query
from restconnector.core.query import compose_request
from restconnector.core.recovery import recover as recover_from
from restconnector.errors.classify import classify_exception
from restconnector.errors.classify import is_not_found
from restconnector.errors.types import FetchError
from restconnector.errors.types import TransportError
from restconnector.models import RequestDescriptor
from restconnector.models import TransportResponse
from restconnector.plugins.base import call_hook
from restconnector.plugins.pipeline import run_request_hooks
from restconnector.plugins.pipeline import transform_body


async def prepare_request(context: FetchContext, path: str) -> RequestDescriptor:
    """Compose a fresh descriptor for a path and run it through request hooks."""
    descriptor = compose_request(context.config, path)
    descriptor = await run_request_hooks(context.plugins, context.config, descriptor)
    return attach_query(descriptor)


async def _dispatch(context: FetchContext, path: str) -> TransportResponse | None:
    descriptor = await prepare_request(context, path)
    context.logger.debug("%s: %s %s", context.label, descriptor.method, descriptor.url)
    return await context.transport.send(descriptor)


async def request_data(
    context: FetchContext,
    path: str,
    index: int,
    *,
    recover: bool = True,
) -> Any:
    """Fetch one resource path and hand its parsed body downstream.

    Args:
        context: Config and collaborators for this run
        path: Absolute URL or segment appended to the base URL
        index: Position of ``path`` in the caller's list
        recover: Whether a plugin may trigger one retry on failure

    Returns:
        The downstream handler's result, or an empty list when the
        resource is absent (status 404 or 400)

    Raises:
        FetchError: On any failure that is not recovered
    """
    try:
        return await _fetch(context, path, index, recover)
    except FetchError:
        raise
    except Exception as e:
        context.logger.debug("%s: %s failed: %r", context.label, path, e)
        raise classify_exception(e) from e


async def _fetch(context: FetchContext, path: str, index: int, recover: bool) -> Any:
    if not context.config.auth_config.url and not path:
        raise FetchError(500, "No url or path found in authConfig.")

    try:
        response = await _dispatch(context, path)
    except TransportError as e:
        if is_not_found(e):
            context.logger.debug(
                "%s: %s not found (status %s)", context.label, path, e.status_code
            )
            return []
        if not recover:
            context.logger.info(
                "%s: Response with status code %s", context.label, e.status_code
            )
            raise e.to_fetch_error() from e
        return await recover_from(
            context,
            e,
            lambda: request_data(context, path, index, recover=False),
        )

    if response is None:
        raise FetchError(522, "Connection timed out.")

    data = await transform_body(context.plugins, response.body, context.logger)
    return await call_hook(context.handler, context.config, path, index, data)
