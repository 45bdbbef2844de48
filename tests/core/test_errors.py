"""Tests for error types and codes."""

import pytest

from flowspec.core.errors import (
    ConfigError,
    ErrorCode,
    FlowSpecError,
    ModelError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.MODEL_MALFORMED_ROW, 3000),
            (ErrorCode.MODEL_METHOD_PATH_EXPECTED, 3000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(self, code: ErrorCode, expected_range: int) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestFlowSpecError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = FlowSpecError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        error = FlowSpecError(code=ErrorCode.MODEL_MALFORMED_ROW, message="Something broke")

        assert str(error) == "[3001] MODEL_MALFORMED_ROW: Something broke"

    def test_error_is_raisable(self) -> None:
        """Errors can be raised and caught as exceptions."""
        with pytest.raises(FlowSpecError) as exc_info:
            raise ModelError.unsupported_language("cobol")

        assert exc_info.value.code == ErrorCode.MODEL_UNSUPPORTED_LANGUAGE


class TestConfigError:
    """ConfigError factory method tests."""

    def test_parse_error(self) -> None:
        """parse_error names the file and the reason."""
        error = ConfigError.parse_error("/tmp/config.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert "/tmp/config.yaml" in error.message
        assert error.details == {"path": "/tmp/config.yaml", "reason": "bad indent"}

    def test_invalid_value(self) -> None:
        """invalid_value stringifies the offending value."""
        error = ConfigError.invalid_value("editor.mode", 42, "not a mode")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["value"] == "42"
        assert "editor.mode" in error.message


class TestModelError:
    """ModelError factory method tests."""

    def test_malformed_row(self) -> None:
        """malformed_row keeps a printable copy of the row."""
        error = ModelError.malformed_row("sinkModel", "expected 9 columns, got 2", ["a", "b"])

        assert error.code == ErrorCode.MODEL_MALFORMED_ROW
        assert error.details["row"] == "['a', 'b']"

    def test_unsupported_predicate(self) -> None:
        """unsupported_predicate names language and model type."""
        error = ModelError.unsupported_predicate("java", "type")

        assert error.message == "Language 'java' has no 'type' predicate"

    def test_unsupported_feature(self) -> None:
        """unsupported_feature names the missing capability."""
        error = ModelError.unsupported_feature("csharp", "access path suggestions")

        assert error.code == ErrorCode.MODEL_UNSUPPORTED_FEATURE
        assert error.details == {"language": "csharp", "feature": "access path suggestions"}

    def test_method_path_expected(self) -> None:
        """method_path_expected capitalizes the model type."""
        error = ModelError.method_path_expected("summary", "Member[foo].Argument[0]")

        assert error.message == "Summary path must be a method, got 'Member[foo].Argument[0]'"
