"""flowspec error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Model (wire rows, adapters)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Model (3xxx)
    MODEL_MALFORMED_ROW = 3001
    MODEL_UNSUPPORTED_PREDICATE = 3002
    MODEL_UNSUPPORTED_LANGUAGE = 3003
    MODEL_METHOD_PATH_EXPECTED = 3004
    MODEL_UNSUPPORTED_FEATURE = 3005


@dataclass(frozen=True, slots=True)
class FlowSpecError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'MODEL_MALFORMED_ROW')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(FlowSpecError):
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


class ModelError(FlowSpecError):
    """Errors raised while translating between rows and modeled methods."""

    @classmethod
    def malformed_row(cls, predicate: str, reason: str, row: Any = None) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_MALFORMED_ROW,
            message=f"Malformed {predicate} row: {reason}",
            details={"predicate": predicate, "reason": reason, "row": repr(row)},
        )

    @classmethod
    def unsupported_predicate(cls, language: str, model_type: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_UNSUPPORTED_PREDICATE,
            message=f"Language '{language}' has no '{model_type}' predicate",
            details={"language": language, "model_type": model_type},
        )

    @classmethod
    def unsupported_language(cls, language: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_UNSUPPORTED_LANGUAGE,
            message=f"No adapter registered for language '{language}'",
            details={"language": language},
        )

    @classmethod
    def unsupported_feature(cls, language: str, feature: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_UNSUPPORTED_FEATURE,
            message=f"Language '{language}' does not support {feature}",
            details={"language": language, "feature": feature},
        )

    @classmethod
    def method_path_expected(cls, model_type: str, path: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_METHOD_PATH_EXPECTED,
            message=f"{model_type.capitalize()} path must be a method, got '{path}'",
            details={"model_type": model_type, "path": path},
        )
