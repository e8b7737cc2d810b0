"""The ``jsonrpc`` protocol version marker."""
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from .utils.validation import describe

JSONRPC_VERSION = "2.0"


class Version:
    """Marker for the ``jsonrpc`` member of every envelope.

    Carries no data. Serializes to exactly ``"2.0"`` and only decodes from
    that exact string; ``"2"``, ``"2.0.0"`` and the number ``2.0`` are rejected.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return f'"{JSONRPC_VERSION}"'

    def __str__(self) -> str:
        return JSONRPC_VERSION

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "V2_0"

    @staticmethod
    def encode() -> str:
        return JSONRPC_VERSION

    @classmethod
    def decode(cls, value: Any) -> "Version":
        """Decode the marker, raising an ``invalid_value`` error on any mismatch."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value == JSONRPC_VERSION:
            return cls()
        raise PydanticCustomError(
            "invalid_value",
            'expected exactly "2.0", found {found}',
            {"found": describe(value)},
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.decode,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: JSONRPC_VERSION,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict:
        return {"type": "string", "const": JSONRPC_VERSION}


V2_0 = Version()
