"""
Error taxonomy for the numeric input filters.

This module provides the application error hierarchy used when an edit
descriptor or a configuration value breaks its contract.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories for consistent error handling."""

    VALIDATION = "validation"
    CONFIG = "config"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes for common scenarios."""

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_MISSING = "CONFIG_MISSING"

    # System errors
    OS_ERROR = "OS_ERROR"

    # Generic
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with structured metadata.

    Root of all custom errors, carrying a stable code and a user-facing
    message alongside optional technical details.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return user-friendly error message."""
        return self.user_message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type.value}, code={self.code.value}, message='{self.user_message}')"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "code": self.code.value,
            "user_message": self.user_message,
            "technical_message": self.technical_message,
            "severity": self.severity.value,
            "context": self.context,
        }


class ValidationError(BaseAppError):
    """Input validation related errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context,
        )

    @property
    def field(self) -> str | None:
        """Get the field that caused the validation error."""
        return self.context.get("field")


class EditRangeError(ValidationError):
    """Selection or caret offsets that fall outside the field's text."""

    def __init__(self, text_length: int, selection_start: int, selection_length: int):
        super().__init__(
            code=ErrorCode.VALUE_OUT_OF_RANGE,
            user_message="Edit position is outside the field text",
            technical_message=(
                f"selection [{selection_start}, {selection_start + selection_length}) "
                f"does not fit text of length {text_length}"
            ),
            severity=ErrorSeverity.HIGH,
            context={
                "text_length": text_length,
                "selection_start": selection_start,
                "selection_length": selection_length,
            },
        )


class ConfigError(BaseAppError):
    """Configuration related errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.CONFIG,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


class SystemError(BaseAppError):
    """Unexpected runtime failures."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


# Exception mapping configuration
_EXCEPTION_MAPPING: dict[type[Exception], tuple[ErrorType, ErrorCode, str]] = {
    ValueError: (ErrorType.VALIDATION, ErrorCode.INVALID_INPUT, "Invalid input provided"),
    TypeError: (ErrorType.VALIDATION, ErrorCode.INVALID_FORMAT, "Unexpected value type"),
    IndexError: (ErrorType.VALIDATION, ErrorCode.VALUE_OUT_OF_RANGE, "Position out of range"),
    KeyError: (ErrorType.CONFIG, ErrorCode.CONFIG_MISSING, "Missing configuration key"),
    OSError: (ErrorType.SYSTEM, ErrorCode.OS_ERROR, "System error occurred"),
}

_ERROR_CLASSES: dict[ErrorType, type[BaseAppError]] = {
    ErrorType.VALIDATION: ValidationError,
    ErrorType.CONFIG: ConfigError,
    ErrorType.SYSTEM: SystemError,
}


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map a built-in exception to a custom application error.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError instance with appropriate type and metadata
    """
    context = context or {}

    if isinstance(exc, BaseAppError):
        return exc

    exc_type = type(exc)
    if exc_type in _EXCEPTION_MAPPING:
        error_type, error_code, default_message = _EXCEPTION_MAPPING[exc_type]
        error_class = _ERROR_CLASSES[error_type]
        user_message = str(exc) if str(exc) else default_message

        result: BaseAppError = error_class(
            code=error_code,
            user_message=user_message,
            technical_message=f"{exc_type.__name__}: {exc}",
            context=context,
        )
        return result

    # Fallback for unknown exceptions
    logger.warning(f"Unknown exception type: {exc_type.__name__}: {exc}")
    return SystemError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=f"{exc_type.__name__}: {exc}",
        context=context,
    )


def from_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """Convert any exception to a BaseAppError (alias for map_exception)."""
    return map_exception(exc, context)
