"""
Edit gating for numeric text fields.

An InputFilter is handed to a text widget, which calls one of its hooks
before applying a typed or pasted edit. The hook rebuilds the prospective
text, classifies it for the filter's mode and returns whether the edit may
proceed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from .errors import ConfigError, ErrorCode
from .number_validation import is_valid_double, is_valid_integer
from .text_edit import TextEdit

logger = logging.getLogger(__name__)


class InputMode(Enum):
    """Kind of number a field accepts."""

    INTEGER = "integer"
    DOUBLE = "double"


class EditSource(Enum):
    """Origin of an edit."""

    TYPING = "typing"
    PASTE = "paste"


_CLASSIFIERS: dict[InputMode, Callable[[str], bool]] = {
    InputMode.INTEGER: is_valid_integer,
    InputMode.DOUBLE: is_valid_double,
}


class InputFilter:
    """
    Accept or reject edits of a numeric text field.

    Args:
        mode: Which numeric grammar the field follows
        log_rejections: Log rejected edits at DEBUG level
    """

    def __init__(self, mode: InputMode, log_rejections: bool = True):
        self.mode = mode
        self.log_rejections = log_rejections
        self._classify = _CLASSIFIERS[mode]

    @classmethod
    def integer(cls, log_rejections: bool = True) -> InputFilter:
        return cls(InputMode.INTEGER, log_rejections)

    @classmethod
    def double(cls, log_rejections: bool = True) -> InputFilter:
        return cls(InputMode.DOUBLE, log_rejections)

    @classmethod
    def from_name(cls, name: str, log_rejections: bool = True) -> InputFilter:
        """
        Create a filter from a mode name such as "integer" or "double".

        Raises:
            ConfigError: If the name is not a known mode
        """
        try:
            mode = InputMode(name.strip().lower())
        except ValueError as e:
            raise ConfigError(
                code=ErrorCode.CONFIG_INVALID,
                user_message=f"Unknown input mode '{name}'",
                technical_message=str(e),
                context={"mode": name},
            ) from e
        return cls(mode, log_rejections)

    def should_accept(self, prospective_text: str) -> bool:
        """Return True if the field may hold prospective_text."""
        return self._classify(prospective_text)

    def accepts_edit(self, edit: TextEdit, source: EditSource) -> bool:
        """
        Decide whether an edit may be applied.

        Edits that insert nothing (deletions, empty clipboard) always pass.

        Raises:
            EditRangeError: If the edit's selection lies outside its text
        """
        if not edit.inserted_text:
            return True

        prospective = edit.prospective_text()
        accepted = self.should_accept(prospective)

        if not accepted and self.log_rejections:
            logger.debug(
                "Rejected %s edit in %s field: %r",
                source.value,
                self.mode.value,
                prospective,
            )

        return accepted

    def before_text_change(self, edit: TextEdit) -> bool:
        """Hook called by the host before typed text is applied."""
        return self.accepts_edit(edit, EditSource.TYPING)

    def before_paste(self, edit: TextEdit) -> bool:
        """Hook called by the host before pasted text is committed."""
        return self.accepts_edit(edit, EditSource.PASTE)

    def __repr__(self) -> str:
        return f"InputFilter(mode={self.mode.value})"
