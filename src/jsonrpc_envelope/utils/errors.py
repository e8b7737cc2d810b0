"""Custom exception classes for envelope decoding."""
from enum import Enum
from typing import Dict, Optional


class DecodeFailure(str, Enum):
    """Which check a response failed, for callers that branch on it."""

    INVALID_JSON = "invalid_json"
    NOT_AN_OBJECT = "not_an_object"
    VERSION_MISSING = "version_missing"
    VERSION_INVALID = "version_invalid"
    ID_MISSING = "id_missing"
    ID_INVALID = "id_invalid"
    RESULT_AND_ERROR = "result_and_error"
    EXTRA_KEYS = "extra_keys"
    UNDECODABLE = "undecodable"


class EnvelopeError(Exception):
    """Base exception for JSON-RPC envelope errors."""

    pass


class NotificationIdError(EnvelopeError, ValueError):
    """A notification id was used where a response id is required."""

    pass


class ResponseMismatchError(EnvelopeError, ValueError):
    """Text matched neither the Success nor the Error response shape."""

    def __init__(self, errors: Dict[str, Exception]):
        self.errors = errors
        details = "\n".join(f"{name}: {error}" for name, error in errors.items())
        super().__init__(f"Response matched neither Success nor Error\n{details}")


class ResponseDecodeError(EnvelopeError, ValueError):
    """Diagnostic explaining why text is not a JSON-RPC response.

    ``hint`` is the human-readable explanation and ``kind`` the check that
    produced it.
    """

    def __init__(
        self, hint: str, kind: DecodeFailure, cause: Optional[Exception] = None
    ):
        self.hint = hint
        self.kind = kind
        self.cause = cause
        super().__init__(hint)
