"""Built-in keymap seeding the editor with its default bindings."""

from __future__ import annotations

from securepad import actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

EDIT_MODE = "edit"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.insert_char",
        handler=actions.insert_char,
        description="Insert the typed character",
    ),
    ActionRef(
        id="edit.backspace",
        handler=actions.backspace,
        description="Delete left of the cursor, joining lines at column 0",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=actions.delete_forward,
        description="Delete under the cursor, joining lines at end of line",
    ),
    ActionRef(
        id="edit.split_line",
        handler=actions.split_line,
        description="Split the line at the cursor",
    ),
    ActionRef(id="cursor.up", handler=actions.move_up, description="Cursor up"),
    ActionRef(id="cursor.down", handler=actions.move_down, description="Cursor down"),
    ActionRef(id="cursor.left", handler=actions.move_left, description="Cursor left"),
    ActionRef(
        id="cursor.right", handler=actions.move_right, description="Cursor right"
    ),
    ActionRef(
        id="command.save", handler=actions.request_save, description="Save notes"
    ),
    ActionRef(
        id="command.quit", handler=actions.request_quit, description="Save and quit"
    ),
)


def _binding(binding_id: str, spec: str, action_id: str, description: str) -> Binding:
    return Binding(
        id=binding_id,
        mode=EDIT_MODE,
        stroke=KeyStroke.parse(spec),
        action_id=action_id,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _binding("edit.backspace", "BACKSPACE", "edit.backspace", "Backspace"),
    _binding("edit.delete", "DELETE", "edit.delete_forward", "Delete"),
    _binding("edit.enter", "ENTER", "edit.split_line", "New line"),
    _binding("cursor.up", "UP", "cursor.up", "Cursor up"),
    _binding("cursor.down", "DOWN", "cursor.down", "Cursor down"),
    _binding("cursor.left", "LEFT", "cursor.left", "Cursor left"),
    _binding("cursor.right", "RIGHT", "cursor.right", "Cursor right"),
    _binding("command.save", "ctrl+s", "command.save", "Save"),
    _binding("command.quit", "ctrl+q", "command.quit", "Quit"),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register the built-in actions and the edit-mode bindings."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "EDIT_MODE"]
