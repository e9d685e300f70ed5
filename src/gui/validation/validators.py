"""
QValidator adapters for incremental numeric input.

These validators expose the incremental integer and decimal rules to Qt's
own validation path (QLineEdit.setValidator, QSpinBox, delegates).
"""

from __future__ import annotations

from PySide6.QtGui import QValidator
from PySide6.QtWidgets import QWidget

from core.input_filter import InputMode
from core.number_validation import is_complete_double, is_int32, is_valid_double


class IncrementalIntValidator(QValidator):
    """
    Validator for 32-bit integer fields.

    Empty text and a lone sign are Intermediate so the user can keep typing.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

    def validate(self, input_text: str, pos: int) -> tuple[QValidator.State, str, int]:
        """Validate integer input."""
        if is_int32(input_text):
            return QValidator.State.Acceptable, input_text, pos

        if input_text in ("", "+", "-"):
            return QValidator.State.Intermediate, input_text, pos

        return QValidator.State.Invalid, input_text, pos

    def fixup(self, input_text: str) -> str:
        """Strip surrounding whitespace."""
        return input_text.strip()


class IncrementalDoubleValidator(QValidator):
    """
    Validator for dot-decimal fields.

    Complete numbers are Acceptable; partial forms such as "-", "." or "+."
    are Intermediate.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

    def validate(self, input_text: str, pos: int) -> tuple[QValidator.State, str, int]:
        """Validate decimal input."""
        if is_complete_double(input_text):
            return QValidator.State.Acceptable, input_text, pos

        if is_valid_double(input_text):
            return QValidator.State.Intermediate, input_text, pos

        return QValidator.State.Invalid, input_text, pos

    def fixup(self, input_text: str) -> str:
        """Strip surrounding whitespace."""
        return input_text.strip()


def validator_for_mode(mode: InputMode, parent: QWidget | None = None) -> QValidator:
    """
    Create the validator matching an input mode.

    Args:
        mode: Field input mode
        parent: Optional Qt parent

    Returns:
        A new QValidator instance
    """
    if mode is InputMode.INTEGER:
        return IncrementalIntValidator(parent)
    return IncrementalDoubleValidator(parent)
