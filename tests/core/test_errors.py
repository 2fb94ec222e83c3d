"""Tests for error types and codes."""

import pytest

from routecov.core.errors import (
    ConfigError,
    CoverageGateError,
    ErrorCode,
    RouteCovError,
    RouteParseError,
    TraceRetrievalError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.ROUTE_PARSE_ERROR, 3000),
            (ErrorCode.TRACE_LOAD_FAILED, 4000),
            (ErrorCode.TRACE_INVALID_DUMP, 4000),
            (ErrorCode.COVERAGE_INCOMPLETE, 5000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestRouteCovError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        # Given
        error = RouteCovError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_includes_code_and_message(self) -> None:
        error = RouteCovError(code=ErrorCode.ROUTE_PARSE_ERROR, message="bad route")
        assert str(error) == "[3001] ROUTE_PARSE_ERROR: bad route"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(RouteCovError):
            raise RouteParseError.invalid_source("routes.yaml", "oops")


class TestFactories:
    def test_config_parse_error(self) -> None:
        error = ConfigError.parse_error("/p/routecov.yaml", "bad indent")
        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/p/routecov.yaml", "reason": "bad indent"}

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("logging.level", "LOUD", "not allowed")
        assert "logging.level" in error.message
        assert error.details["value"] == "LOUD"

    def test_trace_load_failed_names_route(self) -> None:
        error = TraceRetrievalError.load_failed("orders", "permission denied")
        assert error.route_id == "orders"
        assert "route: orders" in error.message
        assert "permission denied" in error.message

    def test_trace_invalid_dump(self) -> None:
        error = TraceRetrievalError.invalid_dump("dump.xml", "orders", "not xml")
        assert error.code == ErrorCode.TRACE_INVALID_DUMP
        assert error.route_id == "orders"

    def test_coverage_gate(self) -> None:
        error = CoverageGateError.not_fully_covered(3)
        assert error.message == "There are 3 route(s) not fully covered!"
        assert error.details == {"not_covered": 3}
