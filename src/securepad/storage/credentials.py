"""Storage for the master password hash."""

from __future__ import annotations

import os
from pathlib import Path

from .notes import StorageError, write_atomic

DEFAULT_PASSWORD_FILE = ".securepad_pass"


class CredentialStore:
    """Keeps a single hex digest in a small dot-file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PASSWORD_FILE) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load_hash(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(
                f"Failed to load password hash: {exc}", path=self.path
            ) from exc

    def save_hash(self, digest: str) -> None:
        try:
            write_atomic(self.path, digest)
            os.chmod(self.path, 0o600)
        except OSError as exc:
            raise StorageError(
                f"Failed to save password hash: {exc}", path=self.path
            ) from exc


__all__ = ["CredentialStore", "DEFAULT_PASSWORD_FILE"]
