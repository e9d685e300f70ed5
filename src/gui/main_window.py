"""
Demo window for the numeric input filters.

This module contains the MainWindow class, which shows one integer field and
one decimal field together with the last rejected edit.
"""

import logging

from PySide6.QtWidgets import QFormLayout, QLabel, QMainWindow, QWidget

from core.config_manager import ConfigManager
from core.error_handler import get_error_handler
from core.errors import BaseAppError
from core.input_filter import InputFilter, InputMode
from gui.widgets.numeric_line_edit import NumericLineEdit

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window with an integer and a decimal field."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        super().__init__()

        self.config_manager = config_manager or ConfigManager()
        log_rejections = bool(self.config_manager.get("log_rejected_edits"))

        self.setWindowTitle("Numeric Input Filters")

        self.integer_edit = NumericLineEdit(InputFilter(InputMode.INTEGER, log_rejections))
        self.integer_edit.setPlaceholderText("e.g. 42")

        self.double_edit = NumericLineEdit(InputFilter(InputMode.DOUBLE, log_rejections))
        self.double_edit.setPlaceholderText("e.g. -0.5")

        self.status_label = QLabel("")

        # Field order follows the configured default mode
        fields = [("Integer", self.integer_edit), ("Decimal", self.double_edit)]
        if self.config_manager.get_input_mode() is InputMode.DOUBLE:
            fields.reverse()

        central = QWidget(self)
        layout = QFormLayout(central)
        for label, edit in fields:
            layout.addRow(label, edit)
            edit.editRejected.connect(self._on_edit_rejected)
        layout.addRow(self.status_label)
        self.setCentralWidget(central)

        get_error_handler().errorOccurred.connect(self._on_error)

    def _on_edit_rejected(self, prospective_text: str, source: str) -> None:
        self.status_label.setText(f"Rejected {source}: {prospective_text!r}")

    def _on_error(self, app_error: BaseAppError) -> None:
        self.status_label.setText(get_error_handler().to_user_message(app_error))
