"""Boundary types shared between buffers and terminal hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    lines: Sequence[str]
    cursor: Cursor
    dirty: bool
    version: int
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferValidationError(RuntimeError):
    """Raised when a caller provides out-of-bounds cursor info."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
