"""Curses host driving the synchronous editor loop."""

from .surface import CursesSurface, decode_key

__all__ = ["CursesSurface", "decode_key"]
