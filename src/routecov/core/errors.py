"""routecov error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Route parsing
- 4xxx: Trace retrieval
- 5xxx: Coverage gate
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Route parsing (3xxx)
    ROUTE_PARSE_ERROR = 3001

    # Trace retrieval (4xxx)
    TRACE_LOAD_FAILED = 4001
    TRACE_INVALID_DUMP = 4002

    # Coverage gate (5xxx)
    COVERAGE_INCOMPLETE = 5001


@dataclass(frozen=True, slots=True)
class RouteCovError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(RouteCovError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class RouteParseError(RouteCovError):
    """A route source file could not be turned into route trees.

    Recoverable: the file is skipped and the run continues.
    """

    @classmethod
    def invalid_source(cls, path: str, reason: str) -> "RouteParseError":
        return cls(
            code=ErrorCode.ROUTE_PARSE_ERROR,
            message=f"Error parsing route file {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class TraceRetrievalError(RouteCovError):
    """Trace data for a route exists but could not be loaded. Fatal to the run."""

    @property
    def route_id(self) -> str | None:
        return self.details.get("route_id")

    @classmethod
    def load_failed(cls, route_id: str, reason: str) -> "TraceRetrievalError":
        return cls(
            code=ErrorCode.TRACE_LOAD_FAILED,
            message=f"Error during gathering route coverage data for route: {route_id} ({reason})",
            details={"route_id": route_id, "reason": reason},
        )

    @classmethod
    def invalid_dump(cls, path: str, route_id: str, reason: str) -> "TraceRetrievalError":
        return cls(
            code=ErrorCode.TRACE_INVALID_DUMP,
            message=f"Invalid route coverage dump {path} for route: {route_id} ({reason})",
            details={"path": path, "route_id": route_id, "reason": reason},
        )


class CoverageGateError(RouteCovError):
    """One or more routes were not fully covered and the gate is enabled."""

    @classmethod
    def not_fully_covered(cls, count: int) -> "CoverageGateError":
        return cls(
            code=ErrorCode.COVERAGE_INCOMPLETE,
            message=f"There are {count} route(s) not fully covered!",
            details={"not_covered": count},
        )
