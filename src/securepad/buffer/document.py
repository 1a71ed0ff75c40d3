"""Core document data structures for securepad buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass(slots=True)
class NoteDocument:
    """Mutable list-of-lines storage for a single note.

    The document always holds at least one line; an empty note is a single
    empty line. ``dirty`` is raised by every mutation and only lowered by
    :meth:`mark_saved`.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_text(cls, text: str) -> "NoteDocument":
        """Split persisted text into lines.

        Splitting on ``"\\n"`` is the exact inverse of :meth:`to_text`, so a
        trailing newline becomes a trailing empty line.
        """

        normalized = text.replace("\r\n", "\n")
        return cls(_lines=normalized.split("\n"), version=0, dirty=False)

    def to_text(self) -> str:
        return "\n".join(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def set_line(self, index: int, text: str) -> None:
        self._lines[index] = text
        self._touch()

    def insert_line(self, index: int, text: str) -> None:
        self._lines.insert(index, text)
        self._touch()

    def append_line(self, text: str = "") -> None:
        self._lines.append(text)
        self._touch()

    def pop_line(self, index: int) -> str:
        if len(self._lines) == 1:
            raise IndexError("cannot remove the only line of a document")
        removed = self._lines.pop(index)
        self._touch()
        return removed

    def mark_saved(self) -> None:
        self.dirty = False

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True
