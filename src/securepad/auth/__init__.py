"""Password gate guarding access to the notes."""

from .gate import CredentialError, CredentialGate, hash_password

__all__ = ["CredentialGate", "CredentialError", "hash_password"]
