"""Synchronous curses surface for :meth:`EditorLoop.run`."""

from __future__ import annotations

import curses
from typing import Dict, Optional, Tuple

from securepad.actions import KeyInput
from securepad.render import Frame, RowStyle, clip_cells
from securepad.runtime.surface import SurfaceError

_SPECIAL_KEYS: Dict[int, str] = {
    curses.KEY_UP: "UP",
    curses.KEY_DOWN: "DOWN",
    curses.KEY_LEFT: "LEFT",
    curses.KEY_RIGHT: "RIGHT",
    curses.KEY_BACKSPACE: "BACKSPACE",
    curses.KEY_DC: "DELETE",
    curses.KEY_ENTER: "ENTER",
    curses.KEY_RESIZE: "RESIZE",
}

_CONTROL_CHARS: Dict[str, str] = {
    "\n": "ENTER",
    "\r": "ENTER",
    "\x7f": "BACKSPACE",
    "\x08": "BACKSPACE",
    "\x1b": "ESC",
    "\t": "TAB",
}


def decode_key(ch: str | int) -> Optional[KeyInput]:
    """Turn a ``get_wch`` result into a KeyInput (raw mode, so Ctrl+S arrives)."""

    if isinstance(ch, int):
        name = _SPECIAL_KEYS.get(ch)
        return KeyInput(key=name) if name else None
    if ch in _CONTROL_CHARS:
        return KeyInput(key=_CONTROL_CHARS[ch])
    code = ord(ch)
    if code < 32:
        return KeyInput(key=chr(code + 96), modifiers=("ctrl",))
    return KeyInput.char(ch)


class CursesSurface:
    """Acquires the terminal on ``__enter__`` and always restores it on exit."""

    def __init__(self) -> None:
        self._screen = None
        self._attrs: Dict[RowStyle, int] = dict.fromkeys(RowStyle, curses.A_NORMAL)

    def __enter__(self) -> "CursesSurface":
        try:
            self._screen = curses.initscr()
            curses.raw()
            curses.noecho()
            self._screen.keypad(True)
            self._init_styles()
        except curses.error as exc:
            self._restore()
            raise SurfaceError(f"Failed to initialise terminal: {exc}") from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._restore()

    def size(self) -> Tuple[int, int]:
        height, width = self._require_screen().getmaxyx()
        return width, height

    def poll(self, timeout: float) -> Optional[KeyInput]:
        screen = self._require_screen()
        screen.timeout(max(0, int(timeout * 1000)))
        try:
            ch = screen.get_wch()
        except curses.error:
            return None
        return decode_key(ch)

    def draw(self, frame: Frame) -> None:
        screen = self._require_screen()
        try:
            screen.erase()
            for y, row in enumerate(frame.rows):
                text = row.text
                if y == frame.height - 1:
                    # curses refuses to write the bottom-right cell
                    text = clip_cells(text, max(0, frame.width - 1))
                if text:
                    screen.addstr(y, 0, text, self._attrs[row.style])
            cursor_x, cursor_y = frame.cursor
            if frame.height and frame.width:
                screen.move(cursor_y, cursor_x)
            screen.refresh()
        except curses.error as exc:
            raise SurfaceError(f"Failed to draw screen: {exc}") from exc

    def _init_styles(self) -> None:
        accent = curses.A_NORMAL
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_CYAN, -1)
            accent = curses.color_pair(1)
        self._attrs[RowStyle.TITLE] = accent | curses.A_BOLD
        self._attrs[RowStyle.RULE] = accent
        self._attrs[RowStyle.STATUS] = curses.A_DIM

    def _require_screen(self):
        if self._screen is None:
            raise SurfaceError("Terminal surface used outside its context")
        return self._screen

    def _restore(self) -> None:
        if self._screen is None:
            return
        self._screen.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()
        self._screen = None


__all__ = ["CursesSurface", "decode_key"]
