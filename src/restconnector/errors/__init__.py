"""Error handling for restconnector."""

from restconnector.errors.classify import (
    classify_exception,
    classify_status,
    is_not_found,
)
from restconnector.errors.types import (
    CONNECTION_FATAL_STATUSES,
    DEFAULT_MESSAGE,
    DEFAULT_STATUS_CODE,
    NOT_FOUND_STATUSES,
    ConfigError,
    FetchError,
    StatusTier,
    TransportError,
)

__all__ = [
    # Core types
    "FetchError",
    "TransportError",
    "ConfigError",
    "StatusTier",
    "CONNECTION_FATAL_STATUSES",
    "NOT_FOUND_STATUSES",
    "DEFAULT_MESSAGE",
    "DEFAULT_STATUS_CODE",
    # Classification functions
    "classify_status",
    "classify_exception",
    "is_not_found",
]
