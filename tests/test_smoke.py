"""
Smoke tests for the PySide6 demo application.
These tests verify basic functionality and environment setup.
"""

import os
import sys

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def test_pyside6_imports():
    """Test that PySide6 can be imported successfully."""
    import PySide6  # noqa: F401
    from PySide6.QtWidgets import QApplication  # noqa: F401


def test_main_module_components():
    """Test that the entry point and widgets import and construct."""
    from PySide6.QtWidgets import QApplication

    from core.input_filter import InputFilter
    from gui import main
    from gui.widgets import NumericLineEdit

    app = QApplication.instance() or QApplication(sys.argv)  # noqa: F841

    assert hasattr(main, "main")
    assert callable(main.main)

    edit = NumericLineEdit(InputFilter.double())
    edit.setText("-1.5")
    assert edit.value() == -1.5
    edit.close()
