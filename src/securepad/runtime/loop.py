"""Single-threaded poll/dispatch/draw loop with time-based autosave."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from securepad.actions import Command, KeyInput
from securepad.buffer import NoteBuffer
from securepad.dispatch import InputDispatcher, is_quit
from securepad.render import TITLE, Frame, build_frame
from securepad.storage import StorageError

from . import telemetry
from .autosave import AutosaveTimer
from .surface import TerminalSurface

DEFAULT_POLL_INTERVAL = 0.1


class NotesGateway(Protocol):
    def load_notes(self) -> str:
        ...

    def save_notes(self, text: str) -> None:
        ...


class LoopState(str, Enum):
    RUNNING = "running"
    TERMINATING = "terminating"


class EditorLoop:
    """Owns the buffer, dirty flag, and autosave timer for one session.

    :meth:`run` drives the whole cycle against a synchronous
    :class:`TerminalSurface`. Event-driven hosts call the individual steps
    instead: :meth:`tick` on a timer, :meth:`handle_key` per key event,
    :meth:`render` to redraw, and :meth:`shutdown` on exit.
    """

    def __init__(
        self,
        buffer: NoteBuffer,
        store: NotesGateway,
        *,
        dispatcher: Optional[InputDispatcher] = None,
        timer: Optional[AutosaveTimer] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        title: str = TITLE,
    ) -> None:
        self.buffer = buffer
        self.store = store
        self.dispatcher = dispatcher or InputDispatcher()
        self.timer = timer or AutosaveTimer()
        self.poll_interval = poll_interval
        self.title = title
        self.state = LoopState.RUNNING
        self.message: Optional[str] = None
        self.top = 0
        self._shut_down = False

    @classmethod
    def open(cls, store: NotesGateway, **kwargs) -> "EditorLoop":
        """Load the stored note; an unreadable note starts an empty document."""

        try:
            text = store.load_notes()
        except StorageError as exc:
            telemetry.record_event(
                "notes.load_failed", level="error", data={"reason": str(exc)}
            )
            text = ""
        buffer = NoteBuffer.from_text(text)
        telemetry.record_event("notes.load", data={"lines": buffer.document.line_count})
        return cls(buffer, store, **kwargs)

    @property
    def dirty(self) -> bool:
        return self.buffer.dirty

    def save(self, *, reason: str = "manual") -> bool:
        try:
            self.store.save_notes(self.buffer.text())
        except StorageError as exc:
            self.message = f"Save failed: {exc}"
            telemetry.record_event(
                "notes.save_failed",
                level="error",
                data={"reason": reason, "error": str(exc)},
            )
            return False
        self.buffer.mark_saved()
        self.timer.reset()
        if reason == "manual":
            self.message = "Saved"
        telemetry.record_event(
            "notes.save",
            data={"reason": reason, "lines": self.buffer.document.line_count},
        )
        return True

    def tick(self) -> bool:
        """Autosave when dirty and the interval has elapsed.

        Returns ``True`` when a save was attempted. A failed save leaves the
        buffer dirty, so the next tick tries again.
        """

        if self.state is not LoopState.RUNNING:
            return False
        if not (self.buffer.dirty and self.timer.due()):
            return False
        self.save(reason="autosave")
        return True

    def handle_key(self, key: KeyInput) -> LoopState:
        if self.state is not LoopState.RUNNING:
            return self.state
        self.message = None
        if is_quit(key):
            self.state = LoopState.TERMINATING
            return self.state

        result = self.dispatcher.dispatch(self.buffer, key)
        if result.command is Command.SAVE:
            self.save(reason="manual")
        elif result.command is Command.QUIT:
            self.state = LoopState.TERMINATING
        return self.state

    def render(self, width: int, height: int) -> Frame:
        frame = build_frame(
            self.buffer.mirror(),
            width,
            height,
            top=self.top,
            title=self.title,
            message=self.message,
        )
        self.top = frame.top
        return frame

    def shutdown(self) -> None:
        """Enter Terminating and flush unsaved text once (best-effort)."""

        if self._shut_down:
            return
        self._shut_down = True
        self.state = LoopState.TERMINATING
        if self.buffer.dirty:
            self.save(reason="exit")
        telemetry.record_event("editor.quit", data={"dirty": self.buffer.dirty})

    def run(self, surface: TerminalSurface) -> None:
        with surface:
            try:
                self._draw(surface)
                while self.state is LoopState.RUNNING:
                    if self.tick():
                        self._draw(surface)
                    key = surface.poll(self.poll_interval)
                    if key is None:
                        continue
                    if self.handle_key(key) is LoopState.TERMINATING:
                        break
                    self._draw(surface)
            finally:
                self.shutdown()

    def _draw(self, surface: TerminalSurface) -> None:
        width, height = surface.size()
        surface.draw(self.render(width, height))


__all__ = ["EditorLoop", "LoopState", "NotesGateway", "DEFAULT_POLL_INTERVAL"]
