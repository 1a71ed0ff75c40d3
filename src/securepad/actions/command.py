"""Editor commands: the loop performs them, actions only request them."""

from __future__ import annotations

from securepad.buffer import NoteBuffer

from .base import Command, DispatchResult, KeyInput


def request_save(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del buffer, key
    return DispatchResult(action_id="command.save", command=Command.SAVE)


def request_quit(buffer: NoteBuffer, key: KeyInput) -> DispatchResult:
    del buffer, key
    return DispatchResult(action_id="command.quit", command=Command.QUIT)


__all__ = ["request_save", "request_quit"]
