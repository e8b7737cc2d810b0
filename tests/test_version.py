"""Unit tests for the jsonrpc version marker."""
import copy
import pickle

import pytest
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from jsonrpc_envelope.models import Success
from jsonrpc_envelope.version import JSONRPC_VERSION, V2_0, Version


def test_encode_is_exact_literal():
    """Test that the marker always encodes to "2.0"."""
    assert Version.encode() == "2.0"
    assert JSONRPC_VERSION == "2.0"
    assert str(V2_0) == "2.0"


def test_decode_exact_match():
    """Test that only the exact string decodes."""
    assert Version.decode("2.0") is V2_0
    assert Version.decode(V2_0) is V2_0


@pytest.mark.parametrize(
    "value, found",
    [
        ("2", '"2"'),
        ("2.0.0", '"2.0.0"'),
        (2.0, "2.0"),
        (None, "null"),
    ],
)
def test_decode_rejects_other_values(value, found):
    """Test that near misses are rejected with a diagnostic naming the literal."""
    with pytest.raises(PydanticCustomError) as exc_info:
        Version.decode(value)

    assert exc_info.value.type == "invalid_value"
    assert exc_info.value.message() == f'expected exactly "2.0", found {found}'


def test_marker_is_singleton():
    """Test that copies and pickles keep the same marker."""
    assert Version() is V2_0
    assert copy.copy(V2_0) is V2_0
    assert copy.deepcopy(V2_0) is V2_0
    assert pickle.loads(pickle.dumps(V2_0)) is V2_0


class TestVersionInEnvelope:
    """Test the marker as the jsonrpc member of an envelope."""

    def test_wrong_version_string(self):
        """Test that a wrong version string fails decoding."""
        with pytest.raises(ValidationError) as exc_info:
            Success.model_validate_json('{"jsonrpc":"2.0.0","result":1,"id":1}')

        errors = exc_info.value.errors()
        assert errors[0]["type"] == "invalid_value"
        assert errors[0]["loc"] == ("jsonrpc",)
        assert 'expected exactly "2.0"' in errors[0]["msg"]

    def test_numeric_version(self):
        """Test that the number 2.0 is not the string "2.0"."""
        with pytest.raises(ValidationError) as exc_info:
            Success.model_validate_json('{"jsonrpc":2.0,"result":1,"id":1}')

        assert 'expected exactly "2.0", found 2.0' in str(exc_info.value)

    def test_missing_version(self):
        """Test that an absent jsonrpc member fails decoding."""
        with pytest.raises(ValidationError) as exc_info:
            Success.model_validate_json('{"result":1,"id":1}')

        errors = exc_info.value.errors()
        assert errors[0]["type"] == "version_missing"
        assert '"2.0"' in errors[0]["msg"]

    def test_constructor_defaults_version(self):
        """Test that building an envelope in Python fills in the marker."""
        success = Success(result=1, id=1)
        assert success.jsonrpc is V2_0
        assert success.to_json() == '{"jsonrpc":"2.0","result":1,"id":1}'
