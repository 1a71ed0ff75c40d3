"""Note buffer, cursor state, and validation helpers."""

from .buffer import NoteBuffer, Transaction
from .document import NoteDocument
from .state import BufferState, Cursor
from .sync import BufferMirror, BufferValidationError
from .validation import clamp_column, ensure_cursor

__all__ = [
    "NoteBuffer",
    "NoteDocument",
    "BufferState",
    "Cursor",
    "BufferMirror",
    "BufferValidationError",
    "Transaction",
    "clamp_column",
    "ensure_cursor",
]
