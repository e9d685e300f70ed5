"""
Centralized error handling and logging infrastructure.

This module provides a singleton ErrorHandler that captures, logs, and translates
exceptions into user-friendly messages while keeping diagnostic information.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import traceback
from pathlib import Path
from typing import Any, ClassVar

from PySide6.QtCore import QObject, QStandardPaths, Signal

from .config import APP_NAME, APP_ORGANIZATION
from .errors import BaseAppError, from_exception

ERROR_LOGGER_NAME = "numeric_input.errors"


class ErrorHandler(QObject):
    """
    Centralized error handler with logging and user message translation.

    Exceptions escaping a widget hook (for example an edit whose offsets
    do not fit the field text) are normalized into BaseAppError, written to a
    rotating log file and announced through errorOccurred.
    """

    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._original_excepthook = sys.excepthook

        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Capture and normalize an exception into a BaseAppError.

        Args:
            exception: The exception to capture
            context: Optional context information

        Returns:
            BaseAppError with normalized metadata
        """
        app_error = from_exception(exception, dict(context or {}))

        if not app_error.technical_message:
            app_error.technical_message = f"{type(exception).__name__}: {exception}"

        if "traceback" not in app_error.context:
            tb_str = traceback.format_exc()
            if tb_str == "NoneType: None\n":
                # Not in exception context
                tb_str = f"{type(exception).__name__}: {exception}\n"
            app_error.context["traceback"] = tb_str

        return app_error

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Handle an exception by capturing, logging, and emitting signals.

        Args:
            exception: The exception to handle
            context: Optional context information

        Returns:
            BaseAppError for further processing
        """
        if isinstance(exception, SystemExit | KeyboardInterrupt):
            raise exception

        app_error = self.capture(exception, context)

        if self._logger:
            self._logger.error(
                f"[{app_error.code.value}] {app_error.user_message}",
                extra={
                    "app_code": app_error.code.value,
                    "error_type": app_error.type.value,
                    "severity": app_error.severity.value,
                },
                exc_info=exception,
            )

        self.errorOccurred.emit(app_error)

        return app_error

    def to_user_message(self, app_error: BaseAppError) -> str:
        """Return the concise, user-facing message for an error."""
        return app_error.user_message

    def _setup_logging(self) -> None:
        """Set up rotating file logging in the app data directory."""
        try:
            app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)

            if not app_data_location:
                app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
                app_data_path = Path(app_data_location) / APP_ORGANIZATION / APP_NAME
            else:
                app_data_path = Path(app_data_location)

            logs_dir = app_data_path / "logs"
            logs_dir.mkdir(parents=True, exist_ok=True)

            ErrorHandler._logger = logging.getLogger(ERROR_LOGGER_NAME)
            ErrorHandler._logger.setLevel(logging.DEBUG)
            ErrorHandler._logger.propagate = False

            # Avoid duplicate handlers
            if not ErrorHandler._logger.handlers:
                file_handler = logging.handlers.RotatingFileHandler(
                    logs_dir / "app.log",
                    maxBytes=5_242_880,  # 5MB
                    backupCount=5,
                    encoding="utf-8",
                )

                formatter = logging.Formatter(
                    "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler.setFormatter(formatter)
                ErrorHandler._logger.addHandler(file_handler)

                if __debug__:
                    console_handler = logging.StreamHandler()
                    console_handler.setFormatter(formatter)
                    console_handler.setLevel(logging.WARNING)
                    ErrorHandler._logger.addHandler(console_handler)

        except OSError as e:
            # Fallback to basic logging if the log directory is unusable
            logging.basicConfig(level=logging.ERROR)
            logging.error(f"Failed to setup error logging: {e}")

    def install_hooks(self) -> None:
        """Install sys.excepthook so unhandled exceptions are logged."""

        def exception_hook(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Any) -> None:
            if not isinstance(exc_value, Exception):
                self._original_excepthook(exc_type, exc_value, exc_traceback)
                return
            self.handle(exc_value, {"source": "sys.excepthook"})

        sys.excepthook = exception_hook

    def restore_hooks(self) -> None:
        """Restore the original exception hook."""
        sys.excepthook = self._original_excepthook


def get_error_handler() -> ErrorHandler:
    """Get the global ErrorHandler instance."""
    return ErrorHandler()


def setup_error_handling() -> ErrorHandler:
    """
    Set up global error handling for the application.

    This should be called once during application startup.

    Returns:
        The configured ErrorHandler instance
    """
    handler = get_error_handler()
    handler.install_hooks()
    return handler


def init_logging(level: str = "INFO") -> None:
    """
    Initialize logging configuration.

    Args:
        level: Level name for the package loggers, e.g. "DEBUG"
    """
    get_error_handler()

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
