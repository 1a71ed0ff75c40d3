"""Textual application hosting the note editor."""

from __future__ import annotations

from typing import Optional, Tuple

from rich.text import Text

try:
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use securepad.adapters.textual.app"
    ) from exc

from securepad.render import Frame, RowStyle, char_offset
from securepad.runtime import telemetry
from securepad.runtime.loop import EditorLoop

from .controller import TextualEditorAdapter, TextualUIHooks

ROW_STYLES = {
    RowStyle.TITLE: "bold dark_cyan",
    RowStyle.TEXT: "",
    RowStyle.RULE: "dark_cyan",
    RowStyle.STATUS: "grey50",
}


def frame_to_text(frame: Frame) -> Text:
    """Paint a frame as one styled ``Text`` with the cursor cell reversed."""

    text = Text(no_wrap=True, overflow="crop")
    cursor_x, cursor_y = frame.cursor
    for index, row in enumerate(frame.rows):
        line = row.text
        offset = char_offset(line, cursor_x) if index == cursor_y else 0
        if index == cursor_y and offset >= len(line):
            line = line.ljust(offset + 1)
        start = len(text)
        text.append(line, style=ROW_STYLES[row.style] or None)
        if index == cursor_y:
            text.stylize("reverse", start + offset, start + offset + 1)
        if index < len(frame.rows) - 1:
            text.append("\n")
    return text


class SecurePadApp(App[None]):
    """Full-screen editor; Textual owns raw mode and the alternate screen."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #editor {
        width: 1fr;
        height: 1fr;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, loop: EditorLoop) -> None:
        super().__init__()
        self.loop = loop
        self.adapter: TextualEditorAdapter | None = None
        self._editor: Static | None = None
        self._logger = telemetry.get_logger("securepad.adapters.textual")

    def compose(self) -> ComposeResult:
        self._editor = Static("", id="editor")
        yield self._editor

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            paint=self._paint,
            size=self._screen_size,
            exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.loop, hooks)
        self.set_interval(self.loop.poll_interval, self._process_tick)

    def on_unmount(self) -> None:
        self.loop.shutdown()

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self.adapter:
            self.adapter.refresh()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    async def action_quit(self) -> None:
        # Ctrl+Q is a priority binding in Textual, so it may never reach on_key.
        if self.adapter:
            self.adapter.close()
        else:
            self.exit()

    def _process_tick(self) -> None:
        if self.adapter:
            self.adapter.process_tick()

    def _paint(self, frame: Frame) -> None:
        if self._editor:
            self._editor.update(frame_to_text(frame))

    def _screen_size(self) -> Tuple[int, int]:
        size = self.size
        return size.width, size.height

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def run_textual(loop: EditorLoop) -> Optional[int]:
    app = SecurePadApp(loop)
    try:
        app.run()
    finally:
        loop.shutdown()
    return app.return_code


__all__ = ["SecurePadApp", "frame_to_text", "run_textual"]
