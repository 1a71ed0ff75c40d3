"""Key event and dispatch outcome types shared by hosts and actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from securepad.keymaps.models import normalize_modifiers, stroke_token


@dataclass(slots=True)
class KeyInput:
    """Normalized key event produced by a terminal host.

    Special keys use upper-case names (``ENTER``, ``BACKSPACE``, ``UP`` ...).
    Printable keys use the character itself and carry it in ``text``.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        self.modifiers = normalize_modifiers(self.modifiers)

    @property
    def token(self) -> str:
        return stroke_token(self.key, self.modifiers)

    @property
    def ctrl(self) -> bool:
        return "ctrl" in self.modifiers

    @classmethod
    def char(cls, value: str) -> "KeyInput":
        return cls(key=value, text=value)


class Command(str, Enum):
    """Editor-level commands that do not touch the buffer."""

    SAVE = "save"
    QUIT = "quit"


@dataclass(slots=True)
class DispatchResult:
    """Outcome of dispatching one key event."""

    action_id: Optional[str] = None
    mutated: bool = False
    command: Optional[Command] = None

    @property
    def handled(self) -> bool:
        return self.action_id is not None


__all__ = ["KeyInput", "Command", "DispatchResult"]
