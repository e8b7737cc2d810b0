"""Request and response identifiers."""
from typing import Annotated, Any, Optional, Union

from pydantic import GetCoreSchemaHandler, PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError, core_schema

from .utils.errors import NotificationIdError
from .utils.validation import describe, is_i64


class Notification:
    """Sentinel for a request whose ``id`` member is absent.

    Distinct from ``None``, which is an ``id`` member present with the value
    ``null``. Encoding a request with this id omits the member entirely.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTIFICATION"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "NOTIFICATION"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(cls)


NOTIFICATION = Notification()


def validate_id(value: Any) -> Optional[Union[str, int]]:
    """Validate a String, Int or Null id.

    Numbers must be integral and fit in 64 bits. Floats are rejected even
    when their fractional part is zero, so nothing is ever truncated.
    """
    if value is None or isinstance(value, str):
        return value
    if is_i64(value):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        raise PydanticCustomError(
            "id_non_i64", "id is a non-i64 number: {found}", {"found": describe(value)}
        )
    raise PydanticCustomError(
        "id_type", "id is not a valid type: {found}", {"found": describe(value)}
    )


def validate_id_req(value: Any) -> Union[str, int, None, Notification]:
    """Like ``validate_id``, but also accepts ``NOTIFICATION``."""
    if isinstance(value, Notification):
        return value
    return validate_id(value)


def serialize_id_req(value):
    """Encode a request id; ``NOTIFICATION`` becomes None."""
    # Notifications never reach the wire; envelopes drop the member.
    if isinstance(value, Notification):
        return None
    return value


Id = Annotated[Optional[Union[str, int]], PlainValidator(validate_id)]

IdReq = Annotated[
    Union[str, int, None, Notification],
    PlainValidator(validate_id_req),
    PlainSerializer(serialize_id_req),
]


def is_notification(value: Any) -> bool:
    """Whether value is the ``NOTIFICATION`` sentinel."""
    return isinstance(value, Notification)


def into_id(value: Any) -> Optional[Union[str, int]]:
    """Convert an ``IdReq`` into an ``Id``.

    Raises:
        NotificationIdError: If value is ``NOTIFICATION``.
    """
    if is_notification(value):
        raise NotificationIdError("a notification has no id to reply with")
    return validate_id(value)
