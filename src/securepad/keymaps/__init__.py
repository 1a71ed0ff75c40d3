"""Declarative keymap registry.

Default bindings live in :mod:`securepad.keymaps.defaults`, which is imported
explicitly because it pulls in the action handlers.
"""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
]
