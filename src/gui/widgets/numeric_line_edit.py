"""
Line edit restricted to integer or decimal input.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import (
    QAction,
    QClipboard,
    QContextMenuEvent,
    QGuiApplication,
    QInputMethodEvent,
    QKeyEvent,
    QKeySequence,
    QMouseEvent,
)
from PySide6.QtWidgets import QLineEdit, QMenu, QWidget

from core.input_filter import EditSource, InputFilter, InputMode
from core.number_validation import is_complete_double, is_int32
from core.text_edit import TextEdit

logger = logging.getLogger(__name__)


def code_point_offset(text: str, utf16_offset: int) -> int:
    """
    Convert a Qt position (UTF-16 code units) into a Python string index.

    Characters outside the Basic Multilingual Plane take two UTF-16 units
    but one Python code point.
    """
    units = 0
    for index, char in enumerate(text):
        if units >= utf16_offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(text)


class NumericLineEdit(QLineEdit):
    """
    QLineEdit whose typed and pasted input is gated by an InputFilter.

    The filter is injected through the constructor. Before a key's text, an
    input method commit or a clipboard payload is applied, the widget
    describes the edit as a TextEdit and asks the filter; rejected edits are
    dropped and announced through editRejected.

    In integer mode a lone "-" or "+" is not an integer, so a sign cannot be
    typed into an empty field; type the digits first and add the sign in
    front. IncrementalIntValidator still reports a lone sign as Intermediate
    because deleting the digits of "-5" leaves one behind.
    """

    # Signals
    editRejected = Signal(str, str)  # prospective text, edit source

    def __init__(self, input_filter: InputFilter, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._input_filter = input_filter

        # Drops would bypass the edit hooks
        self.setAcceptDrops(False)

        self.setAccessibleName(f"{input_filter.mode.value} input")

    def input_filter(self) -> InputFilter:
        return self._input_filter

    def set_input_filter(self, input_filter: InputFilter) -> None:
        """Replace the filter used for subsequent edits."""
        self._input_filter = input_filter
        self.setAccessibleName(f"{input_filter.mode.value} input")

    def current_edit(self, inserted_text: str) -> TextEdit:
        """
        Describe inserting text at the current caret or selection.

        Args:
            inserted_text: Text about to be typed or pasted

        Returns:
            TextEdit built from the widget's text and selection state,
            with positions in Python string indices
        """
        text = self.text()
        if self.hasSelectedText():
            start = code_point_offset(text, self.selectionStart())
            end = code_point_offset(text, self.selectionEnd())
        else:
            start = end = code_point_offset(text, self.cursorPosition())
        return TextEdit(text, start, end - start, inserted_text)

    def value(self) -> int | float | None:
        """
        Return the numeric value of the text.

        Returns:
            int or float for complete input, None while the text is empty
            or still incomplete (e.g. "-" or ".")
        """
        text = self.text()
        if self._input_filter.mode is InputMode.INTEGER:
            return int(text) if is_int32(text) else None
        return float(text) if is_complete_double(text) else None

    def _allow_edit(self, edit: TextEdit, source: EditSource) -> bool:
        if source is EditSource.PASTE:
            accepted = self._input_filter.before_paste(edit)
        else:
            accepted = self._input_filter.before_text_change(edit)

        if not accepted:
            self.editRejected.emit(edit.prospective_text(), source.value)
        return accepted

    def _allow(self, inserted_text: str, source: EditSource) -> bool:
        return self._allow_edit(self.current_edit(inserted_text), source)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Gate typed characters and the paste shortcut."""
        if event.matches(QKeySequence.StandardKey.Paste):
            self.paste()
            event.accept()
            return

        text = event.text()
        # Control keys (backspace, delete, navigation) insert nothing
        if text and text.isprintable() and not self._allow(text, EditSource.TYPING):
            event.accept()
            return

        super().keyPressEvent(event)

    def inputMethodEvent(self, event: QInputMethodEvent) -> None:
        """Gate text committed by an input method; preedit text passes."""
        commit = event.commitString()
        if commit and not self._allow(commit, EditSource.TYPING):
            # Keep the composition display, drop the commit
            super().inputMethodEvent(QInputMethodEvent(event.preeditString(), event.attributes()))
            event.accept()
            return

        super().inputMethodEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Gate middle-click paste from the selection clipboard."""
        if event.button() == Qt.MouseButton.MiddleButton and not self.isReadOnly():
            selection_text = QGuiApplication.clipboard().text(QClipboard.Mode.Selection)
            if selection_text:
                text = self.text()
                position = code_point_offset(text, self.cursorPositionAt(event.position().toPoint()))
                if not self._allow_edit(TextEdit(text, position, 0, selection_text), EditSource.PASTE):
                    event.accept()
                    return

        super().mouseReleaseEvent(event)

    def paste(self) -> None:
        """Paste clipboard text if the filter accepts the result."""
        clipboard_text = QGuiApplication.clipboard().text()
        if self._allow(clipboard_text, EditSource.PASTE):
            super().paste()

    def route_paste_action(self, menu: QMenu) -> QAction | None:
        """
        Reconnect the standard menu's Paste action to the filtered paste().

        Returns:
            The Paste action, or None if the menu has none
        """
        paste_shortcut = QKeySequence(QKeySequence.StandardKey.Paste).toString(QKeySequence.SequenceFormat.NativeText)
        for action in menu.actions():
            # Older Qt builds leave the standard actions unnamed
            if action.objectName() == "edit-paste" or (paste_shortcut and action.text().endswith(f"\t{paste_shortcut}")):
                action.triggered.disconnect()
                action.triggered.connect(lambda checked=False: self.paste())
                return action
        logger.warning("Standard context menu has no paste action")
        return None

    def contextMenuEvent(self, event: QContextMenuEvent) -> None:
        """Show the standard menu with Paste routed through the filter."""
        menu = self.createStandardContextMenu()
        self.route_paste_action(menu)
        menu.exec(event.globalPos())
        menu.deleteLater()
