"""Text buffers and the layout queries used by the text editing state.

A buffer is a sequence of characters that can lay itself out in rows. The
functions here walk that layout to map between character positions and
display coordinates, and to move between word boundaries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

NEWLINE = "\n"

#: Width reported for a newline character; it never occupies horizontal space.
NEWLINE_WIDTH = -1.0


@dataclass
class TextRow:
    """The shape of one laid-out row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


class TextBuffer(ABC):
    """A string being edited, able to report its own layout."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of characters in the buffer."""

    @abstractmethod
    def char_at(self, index: int) -> str:
        """The character at ``index``."""

    @abstractmethod
    def insert(self, index: int, text: str) -> bool:
        """Insert ``text`` at ``index``; return False if it does not fit."""

    @abstractmethod
    def delete(self, index: int, count: int) -> None:
        """Remove ``count`` characters starting at ``index``."""

    @abstractmethod
    def layout_row(self, start: int) -> TextRow:
        """Lay out the row of characters starting at ``start``."""

    @abstractmethod
    def char_width(self, line_start: int, index: int) -> float:
        """Horizontal advance of the ``index``-th character of the row at ``line_start``."""

    def next_char_index(self, index: int) -> int:
        """Position just after the character at ``index``."""
        return index + 1

    def prev_char_index(self, index: int) -> int:
        """Position of the character before ``index``."""
        return index - 1

    def is_space(self, ch: str) -> bool:
        """Whether ``ch`` separates words."""
        return ch.isspace()


class MonospaceBuffer(TextBuffer):
    """A buffer laid out in fixed-width glyphs, one row per line."""

    def __init__(
        self,
        text: str = "",
        glyph_width: float = 8.0,
        line_height: float = 16.0,
        max_length: Optional[int] = None,
    ) -> None:
        self._chars = list(text)
        self.glyph_width = glyph_width
        self.line_height = line_height
        self.max_length = max_length

    @property
    def text(self) -> str:
        """The buffer contents as a string."""
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def char_at(self, index: int) -> str:
        if not 0 <= index < len(self._chars):
            raise IndexError(f"character index {index} out of range")
        return self._chars[index]

    def insert(self, index: int, text: str) -> bool:
        if not 0 <= index <= len(self._chars):
            raise IndexError(f"insert position {index} out of range")
        if self.max_length is not None and len(self._chars) + len(text) > self.max_length:
            return False
        self._chars[index:index] = text
        return True

    def delete(self, index: int, count: int) -> None:
        if index < 0 or count < 0 or index + count > len(self._chars):
            raise IndexError(f"cannot delete {count} characters at {index}")
        del self._chars[index:index + count]

    def layout_row(self, start: int) -> TextRow:
        end = start
        while end < len(self._chars) and self._chars[end] != NEWLINE:
            end += 1
        visible = end - start
        if end < len(self._chars):
            end += 1  # the newline belongs to this row
        return TextRow(
            x0=0.0,
            x1=visible * self.glyph_width,
            baseline_y_delta=self.line_height,
            ymin=0.0,
            ymax=self.line_height,
            num_chars=end - start,
        )

    def char_width(self, line_start: int, index: int) -> float:
        if self.char_at(line_start + index) == NEWLINE:
            return NEWLINE_WIDTH
        return self.glyph_width


@dataclass
class FindState:
    """Where a character sits in the layout, plus the start of the row above it."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


def locate_coord(buffer: TextBuffer, x: float, y: float) -> int:
    """Return the character position nearest to the display point ``(x, y)``."""
    n = len(buffer)
    base_y = 0.0
    i = 0
    row = TextRow()

    while i < n:
        row = buffer.layout_row(i)
        if row.num_chars <= 0:
            return n
        if i == 0 and y < base_y + row.ymin:
            return 0
        if y < base_y + row.ymax:
            break
        i += row.num_chars
        base_y += row.baseline_y_delta

    if i >= n:
        return n

    if x < row.x0:
        return i

    if x < row.x1:
        prev_x = row.x0
        k = 0
        while k < row.num_chars:
            w = buffer.char_width(i, k)
            if x < prev_x + w:
                if x < prev_x + w / 2:
                    return k + i
                return buffer.next_char_index(i + k)
            prev_x += w
            k = buffer.next_char_index(i + k) - i

    if buffer.char_at(i + row.num_chars - 1) == NEWLINE:
        return i + row.num_chars - 1
    return i + row.num_chars


def find_charpos(buffer: TextBuffer, n: int, single_line: bool) -> FindState:
    """Locate character ``n`` in the layout, remembering the previous row's start."""
    z = len(buffer)
    find = FindState()

    if n == z and single_line:
        row = buffer.layout_row(0)
        find.y = 0.0
        find.first_char = 0
        find.length = z
        find.height = row.ymax - row.ymin
        find.x = row.x1
        return find

    prev_start = 0
    i = 0
    while True:
        row = buffer.layout_row(i)
        if n < i + row.num_chars:
            break
        if i + row.num_chars == z and z > 0 and buffer.char_at(z - 1) != NEWLINE:
            break
        prev_start = i
        i += row.num_chars
        find.y += row.baseline_y_delta
        if i == z:
            row.num_chars = 0
            break

    first = i
    find.first_char = first
    find.length = row.num_chars
    find.height = row.ymax - row.ymin
    find.prev_first = prev_start

    find.x = row.x0
    i = 0
    while first + i < n:
        find.x += buffer.char_width(first, i)
        i = buffer.next_char_index(first + i) - first
    return find


def is_word_boundary(buffer: TextBuffer, idx: int) -> bool:
    """Whether a word starts at ``idx`` (space before, non-space at it)."""
    if idx <= 0:
        return True
    return buffer.is_space(buffer.char_at(idx - 1)) and not buffer.is_space(buffer.char_at(idx))


def move_word_left(buffer: TextBuffer, c: int) -> int:
    """Return the start of the word before position ``c``, moving at least one character."""
    c -= 1
    while c >= 0 and not is_word_boundary(buffer, c):
        c -= 1
    return max(c, 0)


def move_word_right(buffer: TextBuffer, c: int) -> int:
    """Return the start of the next word after ``c``, or the end of the text."""
    length = len(buffer)
    c += 1
    while c < length and not is_word_boundary(buffer, c):
        c += 1
    return min(c, length)