"""
Prospective text computation for single edits.

A text field only reports the fragment being typed or pasted. To validate the
result of an edit, the full text the field would hold afterwards has to be
rebuilt from its current text and selection.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import EditRangeError


def build_prospective_text(
    current_text: str,
    selection_start: int,
    selection_length: int,
    inserted_text: str,
) -> str:
    """
    Build the text a field would contain after an edit.

    With a selection, exactly the selected span is replaced by the inserted
    text. Without one, the inserted text goes in at the caret.

    Args:
        current_text: Text currently in the field
        selection_start: Selection start, or caret position when nothing is selected
        selection_length: Number of selected characters (0 for none)
        inserted_text: Text being typed or pasted

    Returns:
        The prospective full text

    Raises:
        EditRangeError: If the selection does not fit inside current_text
    """
    selection_end = selection_start + selection_length
    if selection_start < 0 or selection_length < 0 or selection_end > len(current_text):
        raise EditRangeError(len(current_text), selection_start, selection_length)

    return current_text[:selection_start] + inserted_text + current_text[selection_end:]


@dataclass(frozen=True)
class TextEdit:
    """One atomic edit of a text field."""

    text: str
    selection_start: int
    selection_length: int
    inserted_text: str

    @property
    def has_selection(self) -> bool:
        return self.selection_length > 0

    def prospective_text(self) -> str:
        """Return the field text after this edit is applied."""
        return build_prospective_text(self.text, self.selection_start, self.selection_length, self.inserted_text)
