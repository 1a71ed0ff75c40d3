"""Editing verbs and command requests reachable from key bindings."""

from .base import Command, DispatchResult, KeyInput
from .command import request_quit, request_save
from .edit import (
    backspace,
    delete_forward,
    insert_char,
    move_down,
    move_left,
    move_right,
    move_up,
    split_line,
)

__all__ = [
    "KeyInput",
    "Command",
    "DispatchResult",
    "insert_char",
    "backspace",
    "delete_forward",
    "split_line",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "request_save",
    "request_quit",
]
