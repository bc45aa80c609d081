"""JSON output utilities for restconnector."""

from __future__ import annotations

import sys
from typing import Any

import msgspec

from restconnector.errors.types import FetchError

__all__ = [
    "ErrorResponse",
    "encode_json",
    "output_json",
    "output_json_error",
]


class ErrorResponse(msgspec.Struct, frozen=True, omit_defaults=True):
    """Fetch error as written to JSON output."""

    http_status_code: int = msgspec.field(name="httpStatusCode")
    message: str
    reference: str | None = None

    @classmethod
    def from_fetch_error(cls, error: FetchError) -> ErrorResponse:
        return cls(
            http_status_code=error.http_status_code,
            message=error.message,
            reference=error.reference,
        )


def _enc_hook(obj: Any) -> Any:
    if isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    raise NotImplementedError(f"Objects of type {type(obj)} are not supported")


def encode_json(data: Any, pretty: bool = False) -> bytes:
    """Encode data to JSON bytes."""
    encoded = msgspec.json.encode(data, enc_hook=_enc_hook)
    if pretty:
        encoded = msgspec.json.format(encoded, indent=2)
    return encoded


def output_json(data: Any, pretty: bool = True) -> None:
    """Write data as JSON to stdout."""
    sys.stdout.write(encode_json(data, pretty=pretty).decode() + "\n")


def output_json_error(error: FetchError) -> None:
    """Write a fetch error as JSON to stdout."""
    output_json({"error": ErrorResponse.from_fetch_error(error)})
