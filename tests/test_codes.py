"""Unit tests for JSON-RPC error codes."""
import pytest
from pydantic import ValidationError

from jsonrpc_envelope.codes import ErrorCode
from jsonrpc_envelope.models import ErrorObject


def test_error_codes():
    """Test that error codes are correctly defined."""
    assert ErrorCode.PARSE_ERROR == -32700
    assert ErrorCode.INVALID_REQUEST == -32600
    assert ErrorCode.METHOD_NOT_FOUND == -32601
    assert ErrorCode.INVALID_PARAMS == -32602
    assert ErrorCode.INTERNAL_ERROR == -32603


def test_named_codes_from_int():
    """Test that the pre-defined values map to their members."""
    assert ErrorCode.from_int(-32700) is ErrorCode.PARSE_ERROR
    assert ErrorCode.from_int(-32601) is ErrorCode.METHOD_NOT_FOUND
    assert not ErrorCode.METHOD_NOT_FOUND.is_server_error


def test_other_values_are_server_errors():
    """Test that any other integer becomes a server error."""
    code = ErrorCode.server_error(-32000)
    assert code.is_server_error
    assert code.name == "SERVER_ERROR"
    assert int(code) == -32000
    assert code == ErrorCode(-32000)


@pytest.mark.parametrize(
    "value",
    [-32700, -32600, -32601, -32602, -32603, -32000, -32099, -32100, -31999, 0, 42,
     2**63 - 1, -(2**63)],
)
def test_numeric_round_trip(value):
    """Test that every integer maps to a code and back without loss."""
    code = ErrorCode.from_int(value)
    assert int(code) == value
    assert ErrorCode.from_int(int(code)) == code


def test_is_valid():
    """Test that only server errors outside the reserved band are invalid."""
    for code in ErrorCode:
        assert code.is_valid()

    assert ErrorCode.server_error(-32000).is_valid()
    assert ErrorCode.server_error(-32099).is_valid()
    assert ErrorCode.server_error(-32050).is_valid()
    assert not ErrorCode.server_error(-31999).is_valid()
    assert not ErrorCode.server_error(-32100).is_valid()
    assert not ErrorCode.server_error(1).is_valid()


@pytest.mark.parametrize("value", [True, 1.5, "-32000", 2**63])
def test_from_int_rejects_non_i64(value):
    """Test that only 64-bit integers are codes."""
    with pytest.raises(ValueError):
        ErrorCode.from_int(value)


def test_default_messages():
    """Test the standard message for each code."""
    assert ErrorCode.PARSE_ERROR.default_message == "Parse error"
    assert ErrorCode.INVALID_REQUEST.default_message == "Invalid Request"
    assert ErrorCode.METHOD_NOT_FOUND.default_message == "Method not found"
    assert ErrorCode.INVALID_PARAMS.default_message == "Invalid params"
    assert ErrorCode.INTERNAL_ERROR.default_message == "Internal error"
    assert ErrorCode.server_error(-32001).default_message == "Server error"


class TestErrorCodeField:
    """Test decoding codes inside an error object."""

    def test_decodes_out_of_band_code(self):
        """Test that codes outside the reserved band still decode."""
        error = ErrorObject.model_validate_json('{"code":1,"message":"custom"}')
        assert error.code.is_server_error
        assert error.code == 1
        assert not error.code.is_valid()

    def test_strict_context_rejects_out_of_band_code(self):
        """Test the opt-in strict check."""
        with pytest.raises(ValidationError) as exc_info:
            ErrorObject.model_validate_json(
                '{"code":1,"message":"custom"}',
                context={"strict_error_codes": True},
            )

        assert exc_info.value.errors()[0]["type"] == "error_code_reserved"

    def test_strict_context_allows_reserved_band(self):
        """Test that strict mode still accepts compliant codes."""
        error = ErrorObject.model_validate_json(
            '{"code":-32042,"message":"custom"}',
            context={"strict_error_codes": True},
        )
        assert error.code == -32042

    @pytest.mark.parametrize("code", ['"-32000"', "-32000.5", "true", "null"])
    def test_rejects_non_integer_code(self, code):
        """Test that codes must be integers."""
        with pytest.raises(ValidationError) as exc_info:
            ErrorObject.model_validate_json(f'{{"code":{code},"message":"x"}}')

        assert exc_info.value.errors()[0]["type"] == "error_code_type"

    def test_encodes_as_integer(self):
        """Test that codes serialize as plain integers."""
        error = ErrorObject(code=ErrorCode.server_error(-32000), message="BadIndexes")
        assert error.model_dump_json() == '{"code":-32000,"message":"BadIndexes"}'
