"""Cursor, selection and key handling for an editable text field.

The state does not own the text. Each operation takes a ``TextBuffer``,
edits it in place and updates the cursor, the selection and the undo history.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .textedit_layout import (
    NEWLINE,
    NEWLINE_WIDTH,
    TextBuffer,
    find_charpos,
    locate_coord,
    move_word_left,
    move_word_right,
)
from .textedit_undo import UndoState


class Key(IntEnum):
    """Editing keys. Combine with ``Key.SHIFT`` (``Key.LEFT | Key.SHIFT``) to extend the selection."""

    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    PGUP = 5
    PGDOWN = 6
    LINESTART = 7
    LINEEND = 8
    TEXTSTART = 9
    TEXTEND = 10
    DELETE = 11
    BACKSPACE = 12
    UNDO = 13
    REDO = 14
    INSERT = 15
    WORDLEFT = 16
    WORDRIGHT = 17
    SHIFT = 0x10000


_UNSHIFTABLE = {Key.UNDO, Key.REDO, Key.INSERT}


class TextEditState:
    """Cursor position, selection, insert mode and undo history of one text field."""

    def __init__(self, single_line: bool = False) -> None:
        self.undo_state = UndoState()
        self.reset(single_line)

    def reset(self, single_line: bool = False) -> None:
        """Return to the initial state: cursor at 0, no selection, empty history."""
        self.undo_state.clear()
        self.cursor = 0
        self.select_start = 0
        self.select_end = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.single_line = bool(single_line)
        self.insert_mode = False
        self.row_count_per_page = 0
        self.initialized = True

    def has_selection(self) -> bool:
        """Whether a non-empty range of text is selected."""
        return self.select_start != self.select_end

    def clamp(self, buffer: TextBuffer) -> None:
        """Keep cursor and selection inside the buffer after it changed elsewhere."""
        n = len(buffer)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        self.cursor = min(self.cursor, n)

    def sort_selection(self) -> None:
        """Order the selection so that its start is not after its end."""
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def _delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        self.undo_state.make_undo_delete(buffer, where, length)
        buffer.delete(where, length)
        self.has_preferred_x = False

    def delete_selection(self, buffer: TextBuffer) -> None:
        """Remove the selected text, leaving the cursor where it began."""
        self.clamp(buffer)
        if not self.has_selection():
            return
        if self.select_start < self.select_end:
            self._delete(buffer, self.select_start, self.select_end - self.select_start)
            self.select_end = self.cursor = self.select_start
        else:
            self._delete(buffer, self.select_end, self.select_start - self.select_end)
            self.select_start = self.cursor = self.select_end
        self.has_preferred_x = False

    def _move_to_first(self) -> None:
        if self.has_selection():
            self.sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def _move_to_last(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self.sort_selection()
            self.clamp(buffer)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def _prep_selection_at_cursor(self) -> None:
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    def _first_row_y(self, buffer: TextBuffer, y: float) -> float:
        # Single-line fields ignore the vertical position so drags keep working off the text.
        return buffer.layout_row(0).ymin if self.single_line else y

    def click(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Place the cursor at the clicked point and clear the selection."""
        y = self._first_row_y(buffer, y)
        self.cursor = locate_coord(buffer, x, y)
        self.select_start = self.cursor
        self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Move the cursor and the selection end to the dragged point."""
        y = self._first_row_y(buffer, y)
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        p = locate_coord(buffer, x, y)
        self.cursor = self.select_end = p

    def cut(self, buffer: TextBuffer) -> bool:
        """Delete the selection; return whether there was one."""
        if self.has_selection():
            self.delete_selection(buffer)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, buffer: TextBuffer, text: str) -> bool:
        """Replace the selection (or insert at the cursor) with ``text``; return whether it fit.

        If the text does not fit, the selection stays deleted; an undo restores it.
        """
        self.clamp(buffer)
        self.delete_selection(buffer)
        if buffer.insert(self.cursor, text):
            self.undo_state.make_undo_insert(self.cursor, len(text))
            self.cursor += len(text)
            self.has_preferred_x = False
            return True
        return False

    def text(self, buffer: TextBuffer, text: str) -> None:
        """Type ``text`` at the cursor, honouring insert mode and the selection."""
        if text[:1] == NEWLINE and self.single_line:
            return

        if self.insert_mode and not self.has_selection() and self.cursor < len(buffer):
            self.undo_state.make_undo_replace(buffer, self.cursor, 1, 1)
            buffer.delete(self.cursor, 1)
            if buffer.insert(self.cursor, text):
                self.cursor += len(text)
                self.has_preferred_x = False
        else:
            self.delete_selection(buffer)
            if buffer.insert(self.cursor, text):
                self.undo_state.make_undo_insert(self.cursor, len(text))
                self.cursor += len(text)
                self.has_preferred_x = False

    def key(self, buffer: TextBuffer, key: Union[int, str]) -> None:
        """Process one key press; a string is typed as text."""
        if isinstance(key, str):
            if key:
                self.text(buffer, key)
            return

        shift = bool(key & Key.SHIFT)
        try:
            base = Key(key & ~Key.SHIFT)
        except ValueError:
            return
        if base is Key.SHIFT or (shift and base in _UNSHIFTABLE):
            return

        if base is Key.INSERT:
            self.insert_mode = not self.insert_mode
        elif base is Key.UNDO:
            cursor = self.undo_state.undo(buffer)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif base is Key.REDO:
            cursor = self.undo_state.redo(buffer)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif base is Key.LEFT:
            self._key_left(buffer, shift)
        elif base is Key.RIGHT:
            self._key_right(buffer, shift)
        elif base is Key.WORDLEFT:
            self._key_word(buffer, shift, move_word_left, forward=False)
        elif base is Key.WORDRIGHT:
            self._key_word(buffer, shift, move_word_right, forward=True)
        elif base in (Key.DOWN, Key.PGDOWN):
            self._key_down(buffer, shift, base is Key.PGDOWN)
        elif base in (Key.UP, Key.PGUP):
            self._key_up(buffer, shift, base is Key.PGUP)
        elif base is Key.DELETE:
            if self.has_selection():
                self.delete_selection(buffer)
            elif self.cursor < len(buffer):
                self._delete(
                    buffer, self.cursor, buffer.next_char_index(self.cursor) - self.cursor
                )
            self.has_preferred_x = False
        elif base is Key.BACKSPACE:
            if self.has_selection():
                self.delete_selection(buffer)
            else:
                self.clamp(buffer)
                if self.cursor > 0:
                    prev = buffer.prev_char_index(self.cursor)
                    self._delete(buffer, prev, self.cursor - prev)
                    self.cursor = prev
            self.has_preferred_x = False
        elif base is Key.TEXTSTART:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = 0
            else:
                self.cursor = self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base is Key.TEXTEND:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = len(buffer)
            else:
                self.cursor = len(buffer)
                self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base is Key.LINESTART:
            self.clamp(buffer)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = 0
            else:
                while self.cursor > 0 and buffer.char_at(self.cursor - 1) != NEWLINE:
                    self.cursor -= 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False
        elif base is Key.LINEEND:
            n = len(buffer)
            self.clamp(buffer)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = n
            else:
                while self.cursor < n and buffer.char_at(self.cursor) != NEWLINE:
                    self.cursor += 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False

    def _key_left(self, buffer: TextBuffer, shift: bool) -> None:
        if shift:
            self.clamp(buffer)
            self._prep_selection_at_cursor()
            if self.select_end > 0:
                self.select_end = buffer.prev_char_index(self.select_end)
            self.cursor = self.select_end
        elif self.has_selection():
            self._move_to_first()
        elif self.cursor > 0:
            self.cursor = buffer.prev_char_index(self.cursor)
        self.has_preferred_x = False

    def _key_right(self, buffer: TextBuffer, shift: bool) -> None:
        if shift:
            self._prep_selection_at_cursor()
            self.select_end = buffer.next_char_index(self.select_end)
            self.clamp(buffer)
            self.cursor = self.select_end
        else:
            if self.has_selection():
                self._move_to_last(buffer)
            else:
                self.cursor = buffer.next_char_index(self.cursor)
            self.clamp(buffer)
        self.has_preferred_x = False

    def _key_word(self, buffer: TextBuffer, shift: bool, move, forward: bool) -> None:
        if shift:
            if not self.has_selection():
                self._prep_selection_at_cursor()
            self.cursor = move(buffer, self.cursor)
            self.select_end = self.cursor
            self.clamp(buffer)
        elif self.has_selection():
            if forward:
                self._move_to_last(buffer)
            else:
                self._move_to_first()
        else:
            self.cursor = move(buffer, self.cursor)
            self.clamp(buffer)

    def _seek_column(self, buffer: TextBuffer, row_start: int, goal_x: float) -> None:
        self.cursor = row_start
        row = buffer.layout_row(row_start)
        x = row.x0
        for i in range(row.num_chars):
            dx = buffer.char_width(row_start, i)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            self.cursor = buffer.next_char_index(self.cursor)
        self.clamp(buffer)
        self._last_row_chars = row.num_chars

    def _key_down(self, buffer: TextBuffer, shift: bool, is_page: bool) -> None:
        if not is_page and self.single_line:
            self.key(buffer, Key.RIGHT | (Key.SHIFT if shift else 0))
            return

        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_last(buffer)

        self.clamp(buffer)
        find = find_charpos(buffer, self.cursor, self.single_line)
        row_count = self.row_count_per_page if is_page else 1

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            start = find.first_char + find.length
            if find.length == 0:
                break
            # Going down from the last line must not jump to that line's end.
            if buffer.char_at(find.first_char + find.length - 1) != NEWLINE:
                break

            self._seek_column(buffer, start, goal_x)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor

            find.first_char += find.length
            find.length = self._last_row_chars

    def _key_up(self, buffer: TextBuffer, shift: bool, is_page: bool) -> None:
        if not is_page and self.single_line:
            self.key(buffer, Key.LEFT | (Key.SHIFT if shift else 0))
            return

        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_first()

        self.clamp(buffer)
        find = find_charpos(buffer, self.cursor, self.single_line)
        row_count = self.row_count_per_page if is_page else 1

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if find.prev_first == find.first_char:
                break

            self._seek_column(buffer, find.prev_first, goal_x)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor

            prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
            while prev_scan > 0 and buffer.char_at(prev_scan - 1) != NEWLINE:
                prev_scan -= 1
            find.first_char = find.prev_first
            find.prev_first = prev_scan