"""JSON-RPC 2.0 error codes."""
from enum import IntEnum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, ValidationInfo
from pydantic_core import PydanticCustomError

from .utils.validation import describe, is_i64

# Reserved for implementation-defined server errors
SERVER_ERROR_MIN = -32099
SERVER_ERROR_MAX = -32000

SERVER_ERROR = "SERVER_ERROR"


class ErrorCode(IntEnum):
    """JSON-RPC 2.0 error codes.

    The five pre-defined codes are members. Any other signed 64-bit integer
    maps to a ``SERVER_ERROR`` pseudo-member carrying that value, so the
    mapping between codes and integers is total and lossless::

        >>> ErrorCode(-32601)
        <ErrorCode.METHOD_NOT_FOUND: -32601>
        >>> ErrorCode(-32000)
        <ErrorCode.SERVER_ERROR: -32000>

    Server errors outside -32099..-32000 still decode; use ``is_valid()`` to
    detect them.
    """

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    @classmethod
    def _missing_(cls, value):
        if not is_i64(value):
            return None
        member = int.__new__(cls, value)
        member._name_ = SERVER_ERROR
        member._value_ = value
        return member

    @classmethod
    def from_int(cls, value: int) -> "ErrorCode":
        """Map an integer to its code.

        Raises:
            ValueError: If value is not an integer in the signed 64-bit range.
        """
        if isinstance(value, cls):
            return value
        if not is_i64(value):
            raise ValueError(f"error code must be a 64-bit integer, got: {value!r}")
        return cls(value)

    @classmethod
    def server_error(cls, value: int) -> "ErrorCode":
        """Build the code for an implementation-defined server error."""
        return cls.from_int(value)

    @property
    def is_server_error(self) -> bool:
        """Whether this is a pseudo-member rather than a pre-defined code."""
        return self._name_ == SERVER_ERROR

    def is_valid(self) -> bool:
        """Return False only for server errors outside -32099..-32000."""
        if self.is_server_error:
            return SERVER_ERROR_MIN <= self._value_ <= SERVER_ERROR_MAX
        return True

    @property
    def default_message(self) -> str:
        return DEFAULT_MESSAGES.get(self._name_, "Server error")


DEFAULT_MESSAGES = {
    "PARSE_ERROR": "Parse error",
    "INVALID_REQUEST": "Invalid Request",
    "METHOD_NOT_FOUND": "Method not found",
    "INVALID_PARAMS": "Invalid params",
    "INTERNAL_ERROR": "Internal error",
}


def validate_code(value: Any, info: ValidationInfo) -> ErrorCode:
    """Decode an error code.

    Every 64-bit integer is accepted unless the validation context sets
    ``strict_error_codes``, in which case server errors must sit in the
    reserved band.
    """
    if isinstance(value, ErrorCode):
        code = value
    elif is_i64(value):
        code = ErrorCode(value)
    else:
        raise PydanticCustomError(
            "error_code_type",
            "error code must be a 64-bit integer, found {found}",
            {"found": describe(value)},
        )

    context = info.context or {}
    if context.get("strict_error_codes") and not code.is_valid():
        raise PydanticCustomError(
            "error_code_reserved",
            "server error code {code} is outside the reserved range -32099..-32000",
            {"code": int(code)},
        )
    return code


ErrorCodeField = Annotated[
    ErrorCode,
    PlainValidator(validate_code),
    PlainSerializer(int, return_type=int),
]
