"""Output formatting for restconnector."""

from restconnector.display.json import (
    ErrorResponse,
    encode_json,
    output_json,
    output_json_error,
)

__all__ = [
    "ErrorResponse",
    "encode_json",
    "output_json",
    "output_json_error",
]
