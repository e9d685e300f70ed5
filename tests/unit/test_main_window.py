"""
Tests for the demo MainWindow.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from unittest.mock import Mock

import pytest

from core.error_handler import get_error_handler
from core.errors import EditRangeError
from core.input_filter import InputMode
from gui.main_window import MainWindow


@pytest.fixture
def config_manager():
    """ConfigManager stand-in with default settings."""
    manager = Mock()
    manager.get.return_value = True
    manager.get_input_mode.return_value = InputMode.DOUBLE
    return manager


@pytest.fixture
def window(qtbot, config_manager):
    win = MainWindow(config_manager)
    qtbot.addWidget(win)
    return win


class TestMainWindow:
    """Test the demo window wiring."""

    def test_fields_use_expected_modes(self, window):
        assert window.integer_edit.input_filter().mode is InputMode.INTEGER
        assert window.double_edit.input_filter().mode is InputMode.DOUBLE

    def test_rejection_logging_follows_config(self, qtbot, config_manager):
        config_manager.get.return_value = False
        win = MainWindow(config_manager)
        qtbot.addWidget(win)

        assert win.integer_edit.input_filter().log_rejections is False

    def test_rejected_edit_shown_in_status(self, qtbot, window):
        qtbot.keyClicks(window.integer_edit, "x")

        assert window.integer_edit.text() == ""
        assert window.status_label.text() == "Rejected typing: 'x'"

    def test_error_shown_in_status(self, window):
        handler = get_error_handler()
        handler.errorOccurred.emit(EditRangeError(text_length=0, selection_start=1, selection_length=0))

        assert window.status_label.text() == "Edit position is outside the field text"
