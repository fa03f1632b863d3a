"""Bounded undo/redo history for text editing.

Undo and redo records share one pool of record slots and one pool of stored
characters. When a new edit needs room, the oldest undo records are dropped;
when an undo needs room to remember text for redoing, the oldest redo records
are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .textedit_layout import TextBuffer

#: Default number of undo and redo records kept together.
UNDO_STATE_COUNT = 99
#: Default number of characters stored across all records.
UNDO_CHAR_COUNT = 999


@dataclass
class UndoRecord:
    """One reversible edit.

    Applying the record deletes ``delete_length`` characters at ``where`` and
    then inserts ``insert_length`` characters taken from ``chars``. ``chars``
    is None when the record stores no text.
    """

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    chars: Optional[str] = None

    @property
    def stored_length(self) -> int:
        """Number of characters this record holds in the shared pool."""
        return self.insert_length if self.chars is not None else 0


def _slice(buffer: TextBuffer, where: int, length: int) -> str:
    return "".join(buffer.char_at(where + i) for i in range(length))


class UndoState:
    """Undo and redo stacks sharing fixed record and character budgets."""

    def __init__(
        self,
        state_capacity: int = UNDO_STATE_COUNT,
        char_capacity: int = UNDO_CHAR_COUNT,
    ) -> None:
        self.state_capacity = state_capacity
        self.char_capacity = char_capacity
        self.undo_records: list[UndoRecord] = []
        self.redo_records: list[UndoRecord] = []

    @property
    def undo_char_count(self) -> int:
        """Characters held by undo records."""
        return sum(r.stored_length for r in self.undo_records)

    @property
    def redo_char_count(self) -> int:
        """Characters held by redo records."""
        return sum(r.stored_length for r in self.redo_records)

    def clear(self) -> None:
        """Forget all history."""
        self.undo_records.clear()
        self.redo_records.clear()

    def flush_redo(self) -> None:
        """Drop every redo record."""
        self.redo_records.clear()

    def discard_undo(self) -> None:
        """Drop the oldest undo record, if any."""
        if self.undo_records:
            del self.undo_records[0]

    def discard_redo(self) -> None:
        """Drop the oldest redo record, if any."""
        if self.redo_records:
            del self.redo_records[0]

    def _create_record(self, numchars: int) -> Optional[UndoRecord]:
        self.flush_redo()

        if len(self.undo_records) == self.state_capacity:
            self.discard_undo()

        if numchars > self.char_capacity:
            self.undo_records.clear()
            return None

        while self.undo_char_count + numchars > self.char_capacity:
            self.discard_undo()

        record = UndoRecord()
        self.undo_records.append(record)
        return record

    def create_undo(self, pos: int, insert_len: int, delete_len: int) -> Optional[UndoRecord]:
        """Push a new undo record and discard the redo history.

        Returns the record, whose ``chars`` the caller fills with the
        ``insert_len`` characters to restore, or None when the text to store
        can never fit; in that case the whole undo history is dropped.
        """
        record = self._create_record(insert_len)
        if record is None:
            return None
        record.where = pos
        record.insert_length = insert_len
        record.delete_length = delete_len
        record.chars = "" if insert_len else None
        return record

    def make_undo_insert(self, where: int, length: int) -> None:
        """Record that ``length`` characters are being inserted at ``where``."""
        self.create_undo(where, 0, length)

    def make_undo_delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        """Record the ``length`` characters at ``where`` before they are deleted."""
        record = self.create_undo(where, length, 0)
        if record is not None and record.chars is not None:
            record.chars = _slice(buffer, where, length)

    def make_undo_replace(
        self, buffer: TextBuffer, where: int, old_length: int, new_length: int
    ) -> None:
        """Record ``old_length`` characters at ``where`` about to be replaced by ``new_length``."""
        record = self.create_undo(where, old_length, new_length)
        if record is not None and record.chars is not None:
            record.chars = _slice(buffer, where, old_length)

    def undo(self, buffer: TextBuffer) -> Optional[int]:
        """Revert the latest edit in ``buffer``; return the new cursor, or None if nothing to undo."""
        if not self.undo_records:
            return None

        u = self.undo_records[-1]
        r = UndoRecord(where=u.where, insert_length=u.delete_length, delete_length=u.insert_length)

        if u.delete_length:
            if self.undo_char_count + u.delete_length >= self.char_capacity:
                # No room to remember the text for redoing.
                r.insert_length = 0
            else:
                while (
                    self.undo_char_count + u.delete_length
                    > self.char_capacity - self.redo_char_count
                ):
                    if not self.redo_records:
                        return None
                    self.discard_redo()
                r.chars = _slice(buffer, u.where, u.delete_length)
            buffer.delete(u.where, u.delete_length)

        if u.insert_length:
            buffer.insert(u.where, u.chars or "")

        self.undo_records.pop()
        self.redo_records.append(r)
        return u.where + u.insert_length

    def redo(self, buffer: TextBuffer) -> Optional[int]:
        """Reapply the latest undone edit; return the new cursor, or None if nothing to redo."""
        if not self.redo_records:
            return None

        r = self.redo_records[-1]
        u = UndoRecord(where=r.where, insert_length=r.delete_length, delete_length=r.insert_length)

        if r.delete_length:
            if self.undo_char_count + u.insert_length > self.char_capacity - self.redo_char_count:
                u.insert_length = 0
                u.delete_length = 0
            else:
                u.chars = _slice(buffer, u.where, u.insert_length)
            buffer.delete(r.where, r.delete_length)

        if r.insert_length:
            buffer.insert(r.where, r.chars or "")

        self.redo_records.pop()
        self.undo_records.append(u)
        return r.where + r.insert_length