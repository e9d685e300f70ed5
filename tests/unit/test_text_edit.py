"""
Tests for prospective text computation.
"""

import pytest

from core.errors import EditRangeError, ErrorCode, ValidationError
from core.text_edit import TextEdit, build_prospective_text


class TestBuildProspectiveText:
    """Test splicing an edit into the current text."""

    def test_insert_at_caret(self):
        """Without a selection the text is inserted at the caret."""
        assert build_prospective_text("1234", 2, 0, "X") == "12X34"

    def test_insert_at_start_and_end(self):
        """The caret may sit at either end of the text."""
        assert build_prospective_text("12", 0, 0, "-") == "-12"
        assert build_prospective_text("12", 2, 0, ".") == "12."

    def test_insert_into_empty_text(self):
        """An empty field receives the inserted text unchanged."""
        assert build_prospective_text("", 0, 0, "5") == "5"

    def test_replace_selection(self):
        """A selection is replaced by the inserted text."""
        assert build_prospective_text("12AB34", 2, 2, "X") == "12X34"

    def test_replace_selection_with_duplicate_earlier(self):
        """Only the selected span is replaced, not an earlier equal substring."""
        assert build_prospective_text("AB12AB", 4, 2, "X") == "AB12X"

    def test_replace_selection_with_nothing(self):
        """Replacing a selection with empty text deletes it."""
        assert build_prospective_text("1234", 1, 2, "") == "14"

    def test_replace_whole_text(self):
        """Selecting everything replaces everything."""
        assert build_prospective_text("999", 0, 3, "1") == "1"

    @pytest.mark.parametrize(
        "start, length",
        [(-1, 0), (5, 0), (3, 2), (0, -1)],
    )
    def test_out_of_range_offsets_raise(self, start, length):
        """Offsets outside the text fail fast."""
        with pytest.raises(EditRangeError) as exc_info:
            build_prospective_text("1234", start, length, "X")

        error = exc_info.value
        assert isinstance(error, ValidationError)
        assert error.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert error.context["text_length"] == 4


class TestTextEdit:
    """Test the edit descriptor."""

    def test_prospective_text_delegates(self):
        """TextEdit builds the same text as the function."""
        edit = TextEdit("12AB34", 2, 2, "X")
        assert edit.prospective_text() == "12X34"
        assert edit.has_selection is True

    def test_caret_edit_has_no_selection(self):
        edit = TextEdit("12", 1, 0, "3")
        assert edit.has_selection is False
        assert edit.prospective_text() == "132"

    def test_is_immutable(self):
        """Edits are frozen values."""
        edit = TextEdit("1", 0, 0, "2")
        with pytest.raises(AttributeError):
            edit.text = "3"
