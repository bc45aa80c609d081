"""Error types and status tiers."""

from __future__ import annotations

from enum import StrEnum

DEFAULT_STATUS_CODE = 500
DEFAULT_MESSAGE = "Internal Server Error."

# Statuses that mean "nothing here" rather than failure
NOT_FOUND_STATUSES: frozenset[int] = frozenset({400, 404})

# Statuses that are never handed to plugins
CONNECTION_FATAL_STATUSES: frozenset[int] = frozenset({500, 502, 503, 504, 522})


class StatusTier(StrEnum):
    """How a transport failure is handled."""

    NOT_FOUND = "not_found"
    CONNECTION_FATAL = "connection_fatal"
    RECOVERABLE = "recoverable"


class FetchError(Exception):
    """Normalized failure surfaced to callers of the fetch engine."""

    def __init__(
        self,
        http_status_code: int | None = None,
        message: str | None = None,
        reference: str | None = None,
    ) -> None:
        self.http_status_code = http_status_code or DEFAULT_STATUS_CODE
        self.message = message or DEFAULT_MESSAGE
        self.reference = reference
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"FetchError(http_status_code={self.http_status_code!r}, "
            f"message={self.message!r}, reference={self.reference!r})"
        )

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        data = {
            "httpStatusCode": self.http_status_code,
            "message": self.message,
        }
        if self.reference:
            data["reference"] = self.reference
        return data


class TransportError(Exception):
    """Raw failure reported by the transport collaborator."""

    def __init__(self, status_code: int | None, message: str = "") -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)

    def to_fetch_error(self, reference: str | None = None) -> FetchError:
        """Translate into the caller-facing error shape."""
        return FetchError(self.status_code, self.message, reference)


class ConfigError(FetchError):
    """Connector configuration could not be loaded or is unusable."""

    def __init__(self, message: str, reference: str | None = None) -> None:
        super().__init__(DEFAULT_STATUS_CODE, message, reference)
