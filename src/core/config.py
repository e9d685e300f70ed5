"""
Configuration defaults for the numeric input filters.

This module provides application identifiers, default settings and
helpers for locating per-user application directories.
"""

from pathlib import Path
from typing import Any

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QSettings
APP_ORGANIZATION = "NumericInput"
APP_NAME = "Filters"

# Supported values for enumerated settings
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
INPUT_MODES = ("integer", "double")

# Default configuration with all supported keys and QSettings-friendly types
DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
    "log_rejected_edits": True,
    "default_mode": "double",  # Options: "integer", "double"
}


def get_app_config_dir() -> Path:
    """
    Get the application configuration directory using QStandardPaths.

    Returns:
        Path to the writable configuration directory for this application
    """
    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup to ensure
    QSettings uses the correct organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
