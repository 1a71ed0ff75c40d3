"""Editable note buffer combining a document with its cursor state.

Every public editing verb returns ``True`` when it changed something (content
for edits, position for movements) and ``False`` when the cursor sits on a
boundary the verb cannot cross. Boundary hits are ordinary user actions, so
they are never reported as errors.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from securepad.runtime import telemetry

from .document import NoteDocument
from .state import BufferState, Cursor
from .sync import BufferMirror, BufferValidationError
from .validation import clamp_column, ensure_cursor


class NoteBuffer:
    def __init__(
        self,
        *,
        name: str = "notes",
        document: Optional[NoteDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or NoteDocument()
        self.state = state or BufferState()
        ensure_cursor(self.document, self.state.cursor)

    @classmethod
    def from_text(cls, text: str, *, name: str = "notes") -> "NoteBuffer":
        return cls(name=name, document=NoteDocument.from_text(text))

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def lines(self):
        return self.document.snapshot()

    @property
    def dirty(self) -> bool:
        return self.document.dirty

    def text(self) -> str:
        return self.document.to_text()

    def mark_saved(self) -> None:
        self.document.mark_saved()

    def set_cursor(self, row: int, col: int) -> None:
        self.state.set_cursor(*ensure_cursor(self.document, (row, col)))

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            lines=self.document.snapshot(),
            cursor=self.state.cursor,
            dirty=self.document.dirty,
            version=self.document.version,
            attributes=dict(attributes or {}),
        )

    # -- edits -----------------------------------------------------------------

    def insert_char(self, char: str) -> bool:
        """Insert one character; line breaks go through :meth:`split_line`."""

        if len(char) != 1 or char in "\r\n":
            raise BufferValidationError(
                f"insert_char expects a single character, got {char!r}",
                cursor=self.state.cursor,
            )
        with Transaction(self, "insert_char"):
            row, col = self.state.cursor
            if row >= self.document.line_count:
                self.document.append_line()
                row = self.document.line_count - 1
            line = self.document.get_line(row)
            col = min(col, len(line))
            self.document.set_line(row, line[:col] + char + line[col:])
            self.state.set_cursor(row, col + 1)
        return True

    def backspace(self) -> bool:
        row, col = self.state.cursor
        if col == 0 and row == 0:
            return False
        with Transaction(self, "backspace"):
            if col > 0:
                line = self.document.get_line(row)
                self.document.set_line(row, line[: col - 1] + line[col:])
                self.state.set_cursor(row, col - 1)
            else:
                current = self.document.pop_line(row)
                previous = self.document.get_line(row - 1)
                self.document.set_line(row - 1, previous + current)
                self.state.set_cursor(row - 1, len(previous))
        return True

    def delete_forward(self) -> bool:
        row, col = self.state.cursor
        line = self.document.get_line(row)
        if col < len(line):
            with Transaction(self, "delete_forward"):
                self.document.set_line(row, line[:col] + line[col + 1 :])
            return True
        if row < self.document.line_count - 1:
            with Transaction(self, "delete_forward"):
                following = self.document.pop_line(row + 1)
                self.document.set_line(row, line + following)
            return True
        return False

    def split_line(self) -> bool:
        with Transaction(self, "split_line"):
            row, col = self.state.cursor
            line = self.document.get_line(row)
            self.document.set_line(row, line[:col])
            self.document.insert_line(row + 1, line[col:])
            self.state.set_cursor(row + 1, 0)
        return True

    # -- movement --------------------------------------------------------------

    def move_up(self) -> bool:
        row, col = self.state.cursor
        if row == 0:
            return False
        self.state.set_cursor(row - 1, clamp_column(self.document, row - 1, col))
        return True

    def move_down(self) -> bool:
        row, col = self.state.cursor
        if row >= self.document.line_count - 1:
            return False
        self.state.set_cursor(row + 1, clamp_column(self.document, row + 1, col))
        return True

    def move_left(self) -> bool:
        row, col = self.state.cursor
        if col > 0:
            self.state.set_cursor(row, col - 1)
            return True
        if row > 0:
            self.state.set_cursor(row - 1, len(self.document.get_line(row - 1)))
            return True
        return False

    def move_right(self) -> bool:
        row, col = self.state.cursor
        if col < len(self.document.get_line(row)):
            self.state.set_cursor(row, col + 1)
            return True
        if row < self.document.line_count - 1:
            self.state.set_cursor(row + 1, 0)
            return True
        return False


class Transaction(AbstractContextManager["Transaction"]):
    """Wrap a content edit in a telemetry span tagged with the buffer name."""

    def __init__(self, buffer: NoteBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
