"""Buffer editing verbs bound to keys."""

from __future__ import annotations

from securepad.buffer import NoteBuffer

from .base import DispatchResult, KeyInput


def insert_char(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    text = key.text if key.text is not None else key.key
    mutated = buffer.insert_char(text)
    return DispatchResult(action_id="edit.insert_char", mutated=mutated)


def backspace(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del key
    return DispatchResult(action_id="edit.backspace", mutated=buffer.backspace())


def delete_forward(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del key
    mutated = buffer.delete_forward()
    return DispatchResult(action_id="edit.delete_forward", mutated=mutated)


def split_line(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del key
    return DispatchResult(action_id="edit.split_line", mutated=buffer.split_line())


# Movement never changes content, so ``mutated`` stays False.


def move_up(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del key
    buffer.move_up()
    return DispatchResult(action_id="cursor.up")


def move_down(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del key
    buffer.move_down()
    return DispatchResult(action_id="cursor.down")


def move_left(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del key
    buffer.move_left()
    return DispatchResult(action_id="cursor.left")


def move_right(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del key
    buffer.move_right()
    return DispatchResult(action_id="cursor.right")


__all__ = [
    "insert_char",
    "backspace",
    "delete_forward",
    "split_line",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
]
