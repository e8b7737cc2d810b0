"""Shared helpers for envelope validation."""
from .errors import (
    DecodeFailure,
    EnvelopeError,
    NotificationIdError,
    ResponseDecodeError,
    ResponseMismatchError,
)
from .validation import describe, is_i64, is_reserved_method

__all__ = [
    "DecodeFailure",
    "EnvelopeError",
    "NotificationIdError",
    "ResponseDecodeError",
    "ResponseMismatchError",
    "describe",
    "is_i64",
    "is_reserved_method",
]
