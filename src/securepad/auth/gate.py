"""One-time password setup and verification run before the editor starts."""

from __future__ import annotations

import getpass
import hashlib
import hmac
from typing import Callable, Optional

from securepad.runtime import telemetry
from securepad.storage import CredentialStore, StorageError

Prompt = Callable[[str], str]
Echo = Callable[[str], None]


class CredentialError(RuntimeError):
    """Raised when the password gate cannot complete."""


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class CredentialGate:
    """Decides whether the editor may start.

    On first run the user picks a master password (entered twice); afterwards
    the password is asked once and compared against the stored digest.
    """

    def __init__(
        self,
        store: CredentialStore,
        *,
        prompt: Prompt = getpass.getpass,
        echo: Echo = print,
        max_setup_attempts: Optional[int] = None,
    ) -> None:
        self.store = store
        self._prompt = prompt
        self._echo = echo
        self._max_setup_attempts = max_setup_attempts

    def run(self) -> bool:
        if not self.store.exists():
            self.setup()
            return True
        return self.verify()

    def setup(self) -> None:
        self._echo("First time setup - Create a master password")
        attempts = 0
        while True:
            attempts += 1
            limit = self._max_setup_attempts
            if limit is not None and attempts > limit:
                raise CredentialError("Too many attempts to create a password")

            password = self._read("Enter new password: ")
            if not password.strip():
                self._echo("Password cannot be empty. Please try again.")
                continue
            confirm = self._read("Confirm password: ")
            if password != confirm:
                self._echo("Passwords do not match. Please try again.")
                continue
            break

        try:
            self.store.save_hash(hash_password(password))
        except StorageError as exc:
            raise CredentialError(f"Failed to save password: {exc}") from exc
        telemetry.record_event("credential.setup", data={"path": str(self.store.path)})
        self._echo("Password created successfully!")

    def verify(self) -> bool:
        password = self._read("Enter password to unlock your notes: ")
        try:
            stored = self.store.load_hash()
        except StorageError as exc:
            self._echo(f"Error loading password: {exc}")
            telemetry.record_event(
                "credential.verify", level="error", data={"reason": "unreadable"}
            )
            return False

        accepted = hmac.compare_digest(
            hash_password(password).encode("ascii"), stored.encode("utf-8")
        )
        telemetry.record_event(
            "credential.verify",
            level="info" if accepted else "warning",
            data={"accepted": accepted},
        )
        return accepted

    def _read(self, message: str) -> str:
        try:
            return self._prompt(message)
        except (EOFError, KeyboardInterrupt) as exc:
            raise CredentialError("Password entry aborted") from exc


__all__ = ["CredentialGate", "CredentialError", "hash_password"]
