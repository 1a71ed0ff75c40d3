"""Contract between the render loop and a terminal host."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from securepad.actions import KeyInput
from securepad.render import Frame


class SurfaceError(RuntimeError):
    """Raised when the terminal cannot be acquired or drawn to."""


class TerminalSurface(Protocol):
    """Scoped terminal: entering acquires raw mode + alternate screen.

    ``__exit__`` must restore the terminal on every path, including when the
    loop body raised.
    """

    def __enter__(self) -> "TerminalSurface":
        ...

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        ...

    def size(self) -> Tuple[int, int]:
        """Return ``(width, height)`` in cells."""
        ...

    def poll(self, timeout: float) -> Optional[KeyInput]:
        """Wait at most ``timeout`` seconds for one key event."""
        ...

    def draw(self, frame: Frame) -> None:
        ...


__all__ = ["SurfaceError", "TerminalSurface"]
