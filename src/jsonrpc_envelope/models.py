"""JSON-RPC 2.0 request/response models."""
from enum import Enum
from typing import Any, Dict, Generic, Optional, Tuple, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError

from .codes import ErrorCode, ErrorCodeField
from .ids import NOTIFICATION, Id, IdReq, is_notification
from .utils.errors import ResponseMismatchError
from .utils.validation import is_reserved_method
from .version import V2_0, Version

MethodT = TypeVar("MethodT")
ParamsT = TypeVar("ParamsT")
ResultT = TypeVar("ResultT")
DataT = TypeVar("DataT")


class Envelope(BaseModel):
    """Base for every top-level JSON-RPC message."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Version

    def __init__(self, **data: Any) -> None:
        data.setdefault("jsonrpc", V2_0)
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def require_version(cls, data: Any) -> Any:
        if isinstance(data, dict) and "jsonrpc" not in data:
            raise PydanticCustomError(
                "version_missing",
                'jsonrpc attribute does not exist, expected exactly "2.0"',
            )
        return data

    def to_json(self) -> str:
        """Serialize to compact JSON text."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, text: Union[str, bytes], **kwargs: Any):
        """Deserialize from JSON text without coercing values."""
        kwargs.setdefault("strict", True)
        return cls.model_validate_json(text, **kwargs)


class Request(Envelope, Generic[MethodT, ParamsT]):
    """JSON-RPC 2.0 request model.

    ``params`` is only written when it was supplied, so an explicit ``null``
    survives a round trip while an absent member stays absent. ``id``
    defaults to ``NOTIFICATION`` and is then left off the wire.
    """

    method: MethodT
    params: Optional[ParamsT] = None
    id: IdReq = NOTIFICATION

    @model_serializer(mode="wrap")
    def serialize_request(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if "params" not in self.model_fields_set:
            data.pop("params", None)
        if is_notification(self.id):
            data.pop("id", None)
        return data

    @property
    def is_notification(self) -> bool:
        return is_notification(self.id)

    @property
    def method_name(self) -> Optional[str]:
        """The method as it appears on the wire, if it is a string."""
        method = self.method
        if isinstance(method, Enum):
            method = method.value
        return method if isinstance(method, str) else None

    def is_system_extension(self) -> bool:
        """Whether the method is in the ``rpc.`` namespace reserved for extensions."""
        name = self.method_name
        return name is not None and is_reserved_method(name)


class Success(Envelope, Generic[ResultT]):
    """JSON-RPC 2.0 success response model."""

    model_config = ConfigDict(extra="forbid")

    result: ResultT
    id: Id


class ErrorObject(BaseModel, Generic[DataT]):
    """JSON-RPC 2.0 error model."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCodeField
    message: str
    data: Optional[DataT] = None

    @model_serializer(mode="wrap")
    def serialize_error(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if "data" not in self.model_fields_set:
            data.pop("data", None)
        return data


class Error(Envelope, Generic[DataT]):
    """JSON-RPC 2.0 error response model."""

    model_config = ConfigDict(extra="forbid")

    error: ErrorObject[DataT]
    id: Id


Response = Union[Success, Error]


def response_types(result_type: Any = Any) -> Tuple[Type[Success], Type[Error]]:
    """Candidate response shapes, in the order they are tried."""
    return Success[result_type], Error[Any]


def decode_response(
    text: Union[str, bytes],
    result_type: Any = Any,
    context: Optional[Dict[str, Any]] = None,
) -> Response:
    """Decode a response by trying Success then Error.

    Both shapes reject unknown members, so at most one of them can match.
    Values are never coerced: ``"1"`` is not an ``int`` result.

    Raises:
        ResponseMismatchError: If neither shape matches.
    """
    errors: Dict[str, Exception] = {}
    for model in response_types(result_type):
        try:
            return model.model_validate_json(text, strict=True, context=context)
        except ValidationError as e:
            errors[model.__name__] = e
    raise ResponseMismatchError(errors)


def make_success_response(request_id: Any, result: Any) -> Success:
    """Create a success response.

    Args:
        request_id: The id from the original request.
        result: The result of the method call.
    """
    return Success[Any](id=request_id, result=result)


def make_error_response(
    request_id: Any,
    code: Union[ErrorCode, int],
    message: Optional[str] = None,
    data: Any = None,
) -> Error:
    """Create an error response.

    Args:
        request_id: The id from the original request.
        code: JSON-RPC error code.
        message: Human-readable error message. Defaults to the standard
            message for the code.
        data: Optional additional error data; omitted from the wire when None.

    Returns:
        An Error envelope ready to serialize.
    """
    code = ErrorCode.from_int(code)
    error: Dict[str, Any] = {
        "code": code,
        "message": message if message is not None else code.default_message,
    }
    if data is not None:
        error["data"] = data

    return Error[Any](id=request_id, error=error)


def make_request(method: Any, params: Any = None, request_id: Any = NOTIFICATION) -> Request:
    """Create a request; params are left off the wire when None."""
    fields: Dict[str, Any] = {"method": method, "id": request_id}
    if params is not None:
        fields["params"] = params
    return Request(**fields)


def make_notification(method: Any, params: Any = None) -> Request:
    """Create a notification, a request with no id."""
    return make_request(method, params=params)
