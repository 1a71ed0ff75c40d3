"""Flat-file persistence for note text."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from securepad.runtime import telemetry

DEFAULT_NOTES_FILE = "notes.txt"


class StorageError(RuntimeError):
    """Raised when a persisted file cannot be read or written."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def write_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` in one step.

    The content goes to a temporary sibling first and is moved over the target
    with ``os.replace``, so readers see either the old or the new file.
    """

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class NoteStore:
    """Load and save the whole note as a single UTF-8 text file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_NOTES_FILE) -> None:
        self.path = Path(path)

    def load_notes(self) -> str:
        """Return the stored text, or ``""`` when no note has been saved yet."""

        if not self.path.exists():
            return ""
        try:
            with self.path.open("r", encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(
                f"Failed to load notes from {self.path}: {exc}", path=self.path
            ) from exc

    def save_notes(self, text: str) -> None:
        with telemetry.span(
            "storage::save_notes",
            component="storage",
            metadata={"path": str(self.path), "chars": len(text)},
        ):
            try:
                write_atomic(self.path, text)
            except OSError as exc:
                raise StorageError(
                    f"Failed to save notes: {exc}", path=self.path
                ) from exc


__all__ = ["NoteStore", "StorageError", "write_atomic", "DEFAULT_NOTES_FILE"]
