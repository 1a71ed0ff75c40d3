"""Full-screen frame composition from buffer state.

A :class:`Frame` is a host-independent picture of one redraw: a title bar,
the visible slice of the note, a separator rule, and a status bar, plus the
screen position of the terminal cursor. Hosts paint it verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from rich.cells import cell_len

from securepad.buffer import BufferMirror

TITLE = " securepad "
HEADER_ROWS = 1
FOOTER_ROWS = 2
KEY_HINT = "[Ctrl+Q] Quit | [Ctrl+S] Save"


class RowStyle(str, Enum):
    TITLE = "title"
    TEXT = "text"
    RULE = "rule"
    STATUS = "status"


@dataclass(frozen=True, slots=True)
class FrameRow:
    text: str
    style: RowStyle


@dataclass(frozen=True, slots=True)
class Frame:
    width: int
    height: int
    rows: Tuple[FrameRow, ...]
    cursor: Tuple[int, int]  # (x, y) in screen cells
    top: int

    def lines(self) -> list[str]:
        return [row.text for row in self.rows]


def clip_cells(text: str, width: int) -> str:
    """Cut ``text`` so it occupies at most ``width`` terminal cells."""

    if cell_len(text) <= width:
        return text
    used = 0
    for index, char in enumerate(text):
        used += cell_len(char)
        if used > width:
            return text[:index]
    return text


def char_offset(text: str, cells: int) -> int:
    """Index of the character drawn at screen column ``cells`` of ``text``."""

    used = 0
    for index, char in enumerate(text):
        if used >= cells:
            return index
        used += cell_len(char)
    return len(text) + max(0, cells - used)


def content_height(height: int) -> int:
    return max(0, height - HEADER_ROWS - FOOTER_ROWS)


def scroll_top(top: int, cursor_row: int, visible: int) -> int:
    """Return the first visible buffer row so that ``cursor_row`` is on screen."""

    if visible <= 0:
        return cursor_row
    if cursor_row < top:
        return cursor_row
    if cursor_row >= top + visible:
        return cursor_row - visible + 1
    return max(0, top)


def title_bar(width: int, title: str = TITLE) -> str:
    size = cell_len(title)
    if width <= size:
        return clip_cells(title, width)
    left = (width - size) // 2
    return "=" * left + title + "=" * (width - left - size)


def status_line(
    row: int, col: int, line_count: int, *, message: Optional[str] = None
) -> str:
    status = f"Line: {row + 1}/{line_count} | Col: {col + 1} | {KEY_HINT}"
    if message:
        status = f"{status} | {message}"
    return status


def visible_rows(lines: Sequence[str], top: int, count: int, width: int) -> list[str]:
    rows = []
    for line in lines[top : top + count]:
        # blank placeholder keeps an empty cursor row addressable
        rows.append(clip_cells(line, width) if line else " "[:width])
    return rows


def build_frame(
    mirror: BufferMirror,
    width: int,
    height: int,
    *,
    top: int = 0,
    title: str = TITLE,
    message: Optional[str] = None,
) -> Frame:
    width = max(0, width)
    height = max(0, height)
    row, col = mirror.cursor
    visible = content_height(height)
    top = scroll_top(top, row, visible)

    rows: list[FrameRow] = [FrameRow(title_bar(width, title), RowStyle.TITLE)]
    rows.extend(
        FrameRow(text, RowStyle.TEXT)
        for text in visible_rows(mirror.lines, top, visible, width)
    )
    rows.extend(
        FrameRow("", RowStyle.TEXT) for _ in range(visible - (len(rows) - 1))
    )
    rows.append(FrameRow("=" * width, RowStyle.RULE))
    status = status_line(row, col, len(mirror.lines), message=message)
    rows.append(FrameRow(clip_cells(status, width), RowStyle.STATUS))
    rows = rows[:height]

    line = mirror.lines[row] if row < len(mirror.lines) else ""
    cursor_x = min(cell_len(line[:col]), max(0, width - 1))
    cursor_y = min(HEADER_ROWS + row - top, max(0, height - 1))
    return Frame(
        width=width,
        height=height,
        rows=tuple(rows),
        cursor=(cursor_x, cursor_y),
        top=top,
    )


__all__ = [
    "Frame",
    "FrameRow",
    "RowStyle",
    "build_frame",
    "char_offset",
    "clip_cells",
    "content_height",
    "scroll_top",
    "status_line",
    "title_bar",
    "TITLE",
    "HEADER_ROWS",
]
