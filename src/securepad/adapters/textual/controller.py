"""Bridges Textual key events and timers onto the editor loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from securepad.actions import KeyInput
from securepad.render import Frame
from securepad.runtime.loop import EditorLoop, LoopState


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


_NAMED_KEYS: Dict[str, str] = {
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "escape": "ESC",
    "tab": "TAB",
}


def normalize_textual_key(key: str, character: Optional[str] = None) -> KeyInput:
    """Translate a Textual key name (``"ctrl+s"``, ``"enter"``, ``"a"``)."""

    parts = key.split("+")
    name = parts[-1]
    modifiers = tuple(part for part in parts[:-1] if part)
    has_control = any(mod in {"ctrl", "alt", "meta"} for mod in modifiers)
    if (
        not has_control
        and character
        and len(character) == 1
        and character.isprintable()
    ):
        return KeyInput(key=character, text=character)
    return KeyInput(key=_NAMED_KEYS.get(name, name), modifiers=modifiers)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update the Textual app."""

    paint: Callable[[Frame], None]
    size: Callable[[], Tuple[int, int]]
    exit: Callable[[], None] = _noop
    # Optional debug callback a host may use to surface adapter activity
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Drives an :class:`EditorLoop` from Textual callbacks."""

    def __init__(self, loop: EditorLoop, hooks: TextualUIHooks) -> None:
        self.loop = loop
        self.hooks = hooks
        self._closed = False
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> LoopState:
        key_input = normalize_textual_key(key, character)
        self.hooks.log(f"key -> {key_input.token!r} cursor={self.loop.buffer.cursor}")
        state = self.loop.handle_key(key_input)
        if state is LoopState.TERMINATING:
            self.close()
        else:
            self.refresh()
        return state

    def process_tick(self) -> bool:
        """Timer callback standing in for the loop's bounded input wait."""

        attempted = self.loop.tick()
        if attempted:
            self.hooks.log(f"autosave dirty={self.loop.dirty}")
            self.refresh()
        return attempted

    def refresh(self) -> None:
        width, height = self.hooks.size()
        self.hooks.paint(self.loop.render(width, height))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.loop.shutdown()
        self.hooks.exit()


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_textual_key"]
