"""Status tier classification and exception translation."""

from __future__ import annotations

import asyncio

import httpx
import msgspec

from restconnector.errors.types import CONNECTION_FATAL_STATUSES
from restconnector.errors.types import NOT_FOUND_STATUSES
from restconnector.errors.types import FetchError
from restconnector.errors.types import StatusTier
from restconnector.errors.types import TransportError


def classify_status(status_code: int | None) -> StatusTier:
    """Classify a transport status code into a handling tier.

    A missing status code (e.g. a connection reset with no response)
    is treated as recoverable so plugins get a chance at it.
    """
    if status_code in NOT_FOUND_STATUSES:
        return StatusTier.NOT_FOUND
    if status_code in CONNECTION_FATAL_STATUSES:
        return StatusTier.CONNECTION_FATAL
    return StatusTier.RECOVERABLE


def is_not_found(error: Exception) -> bool:
    """Check whether a failure resolves to an empty result."""
    return (
        isinstance(error, TransportError)
        and classify_status(error.status_code) is StatusTier.NOT_FOUND
    )


def classify_exception(e: Exception) -> FetchError:
    """Translate any exception into a FetchError."""

    if isinstance(e, FetchError):
        return e

    if isinstance(e, TransportError):
        return e.to_fetch_error()

    if isinstance(e, httpx.TimeoutException):
        return FetchError(522, "Connection timed out.", reference=str(e) or None)

    if isinstance(e, httpx.HTTPStatusError):
        return FetchError(e.response.status_code, e.response.reason_phrase)

    if isinstance(e, httpx.HTTPError):
        return FetchError(502, "Failed to connect to server.", reference=str(e) or None)

    if isinstance(e, asyncio.TimeoutError):
        return FetchError(522, "Connection timed out.")

    if isinstance(e, (msgspec.DecodeError, msgspec.ValidationError)):
        return FetchError(500, "Invalid data format.", reference=str(e))

    return FetchError(reference=f"{type(e).__name__}: {e}")
