"""Map key events onto buffer operations and editor commands."""

from __future__ import annotations

from typing import Optional

from securepad.actions import Command, DispatchResult, KeyInput
from securepad.buffer import NoteBuffer
from securepad.keymaps import KeymapRegistry
from securepad.keymaps.defaults import EDIT_MODE, load_default_keymaps
from securepad.runtime import telemetry

INSERT_ACTION_ID = "edit.insert_char"


def is_quit(key: KeyInput) -> bool:
    return key.ctrl and key.key.lower() == "q"


def is_printable(key: KeyInput) -> bool:
    if key.ctrl or "alt" in key.modifiers:
        return False
    text = key.text
    return bool(text) and len(text) == 1 and text.isprintable()


class InputDispatcher:
    """Resolve one key event to exactly one action.

    Lookup order: quit, then the keymap registry, then plain character
    insertion. Anything left over is a no-op.
    """

    def __init__(
        self,
        registry: Optional[KeymapRegistry] = None,
        *,
        mode: str = EDIT_MODE,
    ) -> None:
        if registry is None:
            registry = KeymapRegistry(logger_name="securepad.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self.mode = mode

    def dispatch(self, buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
        if is_quit(key):
            return DispatchResult(action_id="command.quit", command=Command.QUIT)

        binding = self.registry.lookup(self.mode, key.token)
        if binding is None and key.ctrl:
            binding = self.registry.lookup(
                self.mode, KeyInput(key.key.lower(), key.modifiers).token
            )
        if binding is not None:
            action = self.registry.get_action(binding.action_id)
            with telemetry.span(
                "dispatch::execute",
                component="dispatch",
                metadata={"binding_id": binding.id, "action": action.id},
            ):
                outcome = action(buffer, key)
            if isinstance(outcome, DispatchResult):
                return outcome
            return DispatchResult(action_id=action.id)

        if is_printable(key):
            action = self.registry.get_action(INSERT_ACTION_ID)
            outcome = action(buffer, key)
            if isinstance(outcome, DispatchResult):
                return outcome
            return DispatchResult(action_id=action.id, mutated=True)

        return DispatchResult()


__all__ = ["InputDispatcher", "is_quit", "is_printable"]
