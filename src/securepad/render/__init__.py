"""Screen composition shared by every terminal host."""

from .frame import (
    HEADER_ROWS,
    TITLE,
    Frame,
    FrameRow,
    RowStyle,
    build_frame,
    char_offset,
    clip_cells,
    content_height,
    scroll_top,
    status_line,
    title_bar,
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
