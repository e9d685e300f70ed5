"""
Tests for the error taxonomy and exception mapping.
"""

from core.errors import (
    BaseAppError,
    ConfigError,
    EditRangeError,
    ErrorCode,
    ErrorSeverity,
    ErrorType,
    SystemError,
    ValidationError,
    from_exception,
    map_exception,
)


class TestErrorClasses:
    """Test the error hierarchy."""

    def test_validation_error_field(self):
        error = ValidationError(ErrorCode.INVALID_FORMAT, "Not a number", field="amount")

        assert error.type == ErrorType.VALIDATION
        assert error.field == "amount"
        assert str(error) == "Not a number"

    def test_edit_range_error(self):
        """EditRangeError describes the offending selection."""
        error = EditRangeError(text_length=3, selection_start=2, selection_length=4)

        assert isinstance(error, ValidationError)
        assert error.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert error.severity == ErrorSeverity.HIGH
        assert "[2, 6)" in error.technical_message
        assert error.context == {"text_length": 3, "selection_start": 2, "selection_length": 4}

    def test_to_dict(self):
        error = ConfigError(ErrorCode.CONFIG_INVALID, "Bad mode", context={"mode": "hex"})

        data = error.to_dict()

        assert data["type"] == "config"
        assert data["code"] == "CONFIG_INVALID"
        assert data["context"] == {"mode": "hex"}

    def test_repr(self):
        error = ConfigError(ErrorCode.CONFIG_MISSING, "Missing")
        assert repr(error) == "ConfigError(type=config, code=CONFIG_MISSING, message='Missing')"


class TestMapException:
    """Test mapping built-in exceptions."""

    def test_value_error(self):
        app_error = map_exception(ValueError("nope"))

        assert isinstance(app_error, ValidationError)
        assert app_error.code == ErrorCode.INVALID_INPUT
        assert app_error.user_message == "nope"

    def test_default_message_when_empty(self):
        app_error = map_exception(IndexError())

        assert app_error.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert app_error.user_message == "Position out of range"

    def test_key_error_is_config(self):
        assert isinstance(map_exception(KeyError("log_level")), ConfigError)

    def test_app_error_passthrough(self):
        error = EditRangeError(text_length=0, selection_start=1, selection_length=0)
        assert map_exception(error) is error

    def test_unknown_exception(self):
        class CustomError(Exception):
            pass

        app_error = from_exception(CustomError("odd"), {"source": "test"})

        assert isinstance(app_error, SystemError)
        assert isinstance(app_error, BaseAppError)
        assert app_error.code == ErrorCode.UNKNOWN
        assert app_error.context == {"source": "test"}

    def test_type_error_is_format_error(self):
        app_error = map_exception(TypeError("expected str"))

        assert isinstance(app_error, ValidationError)
        assert app_error.code == ErrorCode.INVALID_FORMAT

    def test_os_error_is_system_error(self):
        """Log directory failures map to a high-severity system error."""
        app_error = map_exception(OSError("read-only file system"))

        assert isinstance(app_error, SystemError)
        assert app_error.code == ErrorCode.OS_ERROR
        assert app_error.severity == ErrorSeverity.HIGH
