"""JSON-RPC 2.0 message model and validation."""
from .codes import ErrorCode
from .ids import NOTIFICATION, Id, IdReq, Notification, into_id, is_notification
from .models import (
    Error,
    ErrorObject,
    Request,
    Response,
    Success,
    decode_response,
    make_error_response,
    make_notification,
    make_request,
    make_success_response,
)
from .parser import diagnose_response, parse_request, parse_response
from .utils.errors import (
    DecodeFailure,
    EnvelopeError,
    NotificationIdError,
    ResponseDecodeError,
    ResponseMismatchError,
)
from .version import JSONRPC_VERSION, V2_0, Version

__all__ = [
    "JSONRPC_VERSION",
    "NOTIFICATION",
    "V2_0",
    "DecodeFailure",
    "EnvelopeError",
    "Error",
    "ErrorCode",
    "ErrorObject",
    "Id",
    "IdReq",
    "Notification",
    "NotificationIdError",
    "Request",
    "Response",
    "ResponseDecodeError",
    "ResponseMismatchError",
    "Success",
    "Version",
    "decode_response",
    "diagnose_response",
    "into_id",
    "is_notification",
    "make_error_response",
    "make_notification",
    "make_request",
    "make_success_response",
    "parse_request",
    "parse_response",
]
