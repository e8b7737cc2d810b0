"""Input validation utilities."""
import json
from typing import Any

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

RESERVED_METHOD_PREFIX = "rpc."


def is_i64(value: Any) -> bool:
    """Check that value is an integer that fits in a signed 64-bit slot.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return I64_MIN <= value <= I64_MAX


def is_reserved_method(name: str) -> bool:
    """Whether a method name sits in the namespace reserved for rpc extensions."""
    return name.startswith(RESERVED_METHOD_PREFIX)


def describe(value: Any) -> str:
    """Render a decoded value for diagnostics, as JSON where possible."""
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
