from __future__ import annotations

from securepad.buffer import NoteBuffer
from rich.cells import cell_len

from securepad.render import (
    RowStyle,
    build_frame,
    char_offset,
    clip_cells,
    content_height,
    scroll_top,
    status_line,
    title_bar,
)


def make_buffer(text: str, cursor: tuple[int, int] = (0, 0)) -> NoteBuffer:
    buffer = NoteBuffer.from_text(text)
    buffer.set_cursor(*cursor)
    return buffer


def test_title_bar_is_centered() -> None:
    bar = title_bar(21, " pad ")

    assert bar == "======== pad ========"
    assert len(bar) == 21


def test_title_bar_truncates_on_narrow_screens() -> None:
    assert title_bar(4, " securepad ") == " sec"


def test_status_line_is_one_based() -> None:
    assert status_line(0, 0, 3) == (
        "Line: 1/3 | Col: 1 | [Ctrl+Q] Quit | [Ctrl+S] Save"
    )
    assert status_line(2, 4, 3, message="Saved").endswith("| Saved")


def test_frame_layout_and_cursor_position() -> None:
    buffer = make_buffer("first\n\nthird", cursor=(2, 3))

    frame = build_frame(buffer.mirror(), 40, 8)

    styles = [row.style for row in frame.rows]
    assert len(frame.rows) == 8
    assert styles[0] is RowStyle.TITLE
    assert styles[-2] is RowStyle.RULE
    assert styles[-1] is RowStyle.STATUS
    assert frame.lines()[1:4] == ["first", " ", "third"]
    assert frame.lines()[-1].startswith("Line: 3/3 | Col: 4")
    assert frame.cursor == (3, 3)


def test_long_lines_are_clipped_to_width() -> None:
    buffer = make_buffer("x" * 50)

    frame = build_frame(buffer.mirror(), 10, 5)

    assert all(len(line) <= 10 for line in frame.lines())


def test_viewport_scrolls_to_keep_cursor_visible() -> None:
    text = "\n".join(f"line {i}" for i in range(20))
    buffer = make_buffer(text, cursor=(12, 0))

    frame = build_frame(buffer.mirror(), 30, 8)

    visible = content_height(8)
    assert frame.top == 12 - visible + 1
    assert frame.lines()[1 + 12 - frame.top] == "line 12"
    assert frame.cursor == (0, 1 + 12 - frame.top)


def test_scroll_top_moves_up_when_cursor_above_viewport() -> None:
    assert scroll_top(10, 4, 5) == 4
    assert scroll_top(2, 4, 5) == 2
    assert scroll_top(0, 9, 5) == 5


def test_tiny_terminal_still_produces_frame() -> None:
    buffer = make_buffer("abc", cursor=(0, 2))

    frame = build_frame(buffer.mirror(), 2, 2)

    assert len(frame.rows) == 2
    assert frame.cursor == (1, 1)


def test_clip_cells_counts_wide_characters_twice() -> None:
    assert clip_cells("中文abc", 5) == "中文a"
    assert clip_cells("中文", 3) == "中"
    assert clip_cells("abc", 10) == "abc"


def test_char_offset_maps_screen_columns_to_characters() -> None:
    assert char_offset("中文a", 0) == 0
    assert char_offset("中文a", 2) == 1
    assert char_offset("中文a", 4) == 2
    assert char_offset("ab", 4) == 4


def test_wide_lines_fit_the_screen_and_cursor_uses_cells() -> None:
    buffer = make_buffer("中文字符" * 10 + "\n😀😀😀", cursor=(0, 3))
    message = "Save failed: 目录不存在" * 3

    frame = build_frame(buffer.mirror(), 10, 6, message=message)

    assert all(cell_len(line) <= 10 for line in frame.lines())
    assert frame.cursor == (6, 1)


def test_cursor_past_wide_text_is_clamped_to_last_cell() -> None:
    buffer = make_buffer("中文字符中文字符", cursor=(0, 8))

    frame = build_frame(buffer.mirror(), 10, 5)

    assert frame.cursor == (9, 1)


def test_title_bar_centers_by_cell_width() -> None:
    bar = title_bar(10, "中文")

    assert bar == "===中文==="
    assert cell_len(bar) == 10
