"""JSON-RPC 2.0 message parsing with descriptive diagnostics."""
import json
import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from . import config
from .codes import ErrorCode
from .ids import validate_id
from .models import Error, Request, Response, decode_response, make_error_response
from .utils.errors import DecodeFailure, ResponseDecodeError, ResponseMismatchError
from .utils.validation import describe
from .version import JSONRPC_VERSION

logger = logging.getLogger(__name__)

RESPONSE_KEYS = ("jsonrpc", "id", "result", "error")


@lru_cache(maxsize=None)
def method_adapter(method_type: Any) -> TypeAdapter:
    """Cached adapter for validating methods as ``method_type``."""
    return TypeAdapter(method_type)


def validation_context(strict_error_codes: Optional[bool]) -> Dict[str, Any]:
    """Build the pydantic context, falling back to the configured default."""
    if strict_error_codes is None:
        strict_error_codes = config.STRICT_ERROR_CODES
    return {"strict_error_codes": strict_error_codes}


def error_messages(error: ValidationError) -> List[str]:
    """Flatten a ValidationError into short ``loc: message`` lines."""
    messages = []
    for detail in error.errors(include_url=False):
        loc = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{loc}: {detail['msg']}" if loc else detail["msg"])
    return messages


def parse_request(
    text: Union[str, bytes],
    method_type: Any = str,
    strict_error_codes: Optional[bool] = None,
) -> Union[Request, Error]:
    """Parse JSON text into a JSON-RPC 2.0 Request.

    Failures come back as Error envelopes ready to send to the client:

    - PARSE_ERROR when the text is not JSON,
    - INVALID_REQUEST when the envelope is malformed (id is null, since a
      malformed envelope has no trustworthy id),
    - METHOD_NOT_FOUND when the method is not a ``method_type`` (echoing
      the request's own id).

    Values are checked without coercion, so ``"5"`` is not an ``int`` method.

    Args:
        text: Raw JSON text.
        method_type: Type the method must validate as, e.g. a str Enum.
        strict_error_codes: Override for ``JSONRPC_STRICT_ERROR_CODES``.

    Returns:
        A ``Request[method_type, Any]`` or an ``Error``.
    """
    # Parse JSON
    try:
        json.loads(text)
    except ValueError as e:
        logger.debug(f"Request is not valid JSON: {e}")
        return make_error_response(None, ErrorCode.PARSE_ERROR, data=str(e))

    context = validation_context(strict_error_codes)

    # Validate the envelope with any method
    try:
        envelope = Request.model_validate_json(text, strict=True, context=context)
    except ValidationError as e:
        logger.debug(f"Invalid request envelope: {e}")
        return make_error_response(None, ErrorCode.INVALID_REQUEST, data=error_messages(e))

    # Validate the method against the caller's type
    try:
        method = method_adapter(method_type).validate_json(
            json.dumps(envelope.method), strict=True, context=context
        )
    except ValidationError:
        logger.debug(f"Method not found: {envelope.method!r}")
        # A notification has no id to echo back
        request_id = None if envelope.is_notification else envelope.id
        return make_error_response(
            request_id,
            ErrorCode.METHOD_NOT_FOUND,
            f"Method not found: {describe(envelope.method)}",
        )

    fields: Dict[str, Any] = {"method": method, "id": envelope.id}
    if "params" in envelope.model_fields_set:
        fields["params"] = envelope.params
    return Request[method_type, Any](**fields)


def parse_response(
    text: Union[str, bytes],
    result_type: Any = Any,
    strict_error_codes: Optional[bool] = None,
) -> Response:
    """Parse JSON text into a JSON-RPC 2.0 Response.

    Args:
        text: Raw JSON text.
        result_type: Type the ``result`` member must validate as.
        strict_error_codes: Override for ``JSONRPC_STRICT_ERROR_CODES``.

    Returns:
        A ``Success[result_type]``, or an ``Error`` if the peer replied with one.

    Raises:
        ResponseDecodeError: If the text is not a valid response. The hint
            names the most specific problem found.
    """
    context = validation_context(strict_error_codes)
    try:
        return decode_response(text, result_type, context=context)
    except ResponseMismatchError as e:
        mismatch = e

    logger.debug("Response did not decode, diagnosing")
    try:
        value = json.loads(text)
    except ValueError as e:
        raise ResponseDecodeError(
            f"Invalid JSON: {e}", DecodeFailure.INVALID_JSON, cause=e
        ) from e

    if not isinstance(value, dict):
        raise ResponseDecodeError(
            f"Not an object: {describe(value)}", DecodeFailure.NOT_AN_OBJECT, cause=mismatch
        )

    raise diagnose_response(value, mismatch)


def diagnose_response(obj: Dict[str, Any], cause: Exception) -> ResponseDecodeError:
    """Explain why a JSON object is not a valid response.

    Checks run in wire order: ``jsonrpc``, ``id``, ``result``/``error``
    exclusivity, then unknown members. The first failing check wins. If
    all of them pass, the typed decode error is returned as the likely cause.
    """
    # Validate jsonrpc version
    if "jsonrpc" not in obj:
        return ResponseDecodeError(
            "jsonrpc attribute does not exist", DecodeFailure.VERSION_MISSING, cause=cause
        )
    version = obj["jsonrpc"]
    if not (isinstance(version, str) and version == JSONRPC_VERSION):
        return ResponseDecodeError(
            f"jsonrpc attribute is the incorrect value: {describe(version)}",
            DecodeFailure.VERSION_INVALID,
            cause=cause,
        )

    # Get id (required in responses, can be null)
    if "id" not in obj:
        return ResponseDecodeError("id does not exist", DecodeFailure.ID_MISSING, cause=cause)
    try:
        validate_id(obj["id"])
    except PydanticCustomError as e:
        return ResponseDecodeError(e.message(), DecodeFailure.ID_INVALID, cause=cause)

    # Must not have both result and error
    if "result" in obj and "error" in obj:
        return ResponseDecodeError(
            "both `result` and `error` fields are present",
            DecodeFailure.RESULT_AND_ERROR,
            cause=cause,
        )

    extra = sorted(key for key in obj if key not in RESPONSE_KEYS)
    if extra:
        return ResponseDecodeError(
            f"Extra keys are present: {extra}", DecodeFailure.EXTRA_KEYS, cause=cause
        )

    return ResponseDecodeError(
        f"Could not deserialize into either Response or Error. Possible cause:\n{cause}",
        DecodeFailure.UNDECODABLE,
        cause=cause,
    )
