"""Persistence gateway for note text and the password hash."""

from .credentials import DEFAULT_PASSWORD_FILE, CredentialStore
from .notes import DEFAULT_NOTES_FILE, NoteStore, StorageError, write_atomic

__all__ = [
    "NoteStore",
    "CredentialStore",
    "StorageError",
    "write_atomic",
    "DEFAULT_NOTES_FILE",
    "DEFAULT_PASSWORD_FILE",
]
