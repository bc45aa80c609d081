"""Error classification and one-shot recovery."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from restconnector.core.context import FetchContext
from restconnector.errors.classify import classify_status
from restconnector.errors.types import StatusTier
from restconnector.errors.types import TransportError
from restconnector.plugins.pipeline import run_error_hooks


async def handle_error(context: FetchContext, error: TransportError) -> Any:
    """Decide what a transport failure means.

    Connection-class failures are raised as-is. Anything else goes to
    the first plugin with an onerror hook; with no such plugin a generic
    internal error is raised.

    Returns:
        The onerror hook's result, if it did not raise

    Raises:
        FetchError: If the failure is fatal or nobody handles it
    """
    context.logger.info(
        "%s: Response with status code %s", context.label, error.status_code
    )

    if classify_status(error.status_code) is StatusTier.CONNECTION_FATAL:
        raise error.to_fetch_error()

    return await run_error_hooks(context.plugins, context.config, error)


async def recover(
    context: FetchContext,
    error: TransportError,
    retry: Callable[[], Awaitable[Any]],
) -> Any:
    """Run the error handling and, if a plugin recovered, retry once.

    ``retry`` must not itself recover; its failure propagates unchanged.
    """
    await handle_error(context, error)

    context.logger.debug("%s: Recovered from %s, retrying", context.label, error.status_code)
    return await retry()
