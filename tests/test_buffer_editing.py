from __future__ import annotations

import random

import pytest

from securepad.buffer import BufferValidationError, NoteBuffer


def make_buffer(text: str = "", cursor: tuple[int, int] = (0, 0)) -> NoteBuffer:
    buffer = NoteBuffer.from_text(text)
    buffer.set_cursor(*cursor)
    return buffer


def type_text(buffer: NoteBuffer, text: str) -> None:
    for char in text:
        buffer.insert_char(char)


def assert_invariants(buffer: NoteBuffer) -> None:
    row, col = buffer.cursor
    assert buffer.document.line_count >= 1
    assert 0 <= row < buffer.document.line_count
    assert 0 <= col <= len(buffer.document.get_line(row))


def test_insert_into_empty_document() -> None:
    buffer = NoteBuffer()

    assert buffer.insert_char("x") is True

    assert list(buffer.lines) == ["x"]
    assert buffer.cursor == (0, 1)
    assert buffer.dirty is True


def test_typing_across_enter_builds_two_lines() -> None:
    buffer = NoteBuffer()

    type_text(buffer, "ab")
    buffer.split_line()
    type_text(buffer, "cd")

    assert list(buffer.lines) == ["ab", "cd"]
    assert buffer.cursor == (1, 2)


def test_insert_in_middle_of_line() -> None:
    buffer = make_buffer("held", cursor=(0, 2))

    buffer.insert_char("l")

    assert list(buffer.lines) == ["helld"]
    assert buffer.cursor == (0, 3)


def test_insert_appends_line_when_row_is_past_end() -> None:
    buffer = NoteBuffer()
    buffer.state.set_cursor(1, 0)

    buffer.insert_char("z")

    assert list(buffer.lines) == ["", "z"]
    assert buffer.cursor == (1, 1)


def test_backspace_removes_character_left_of_cursor() -> None:
    buffer = make_buffer("abc", cursor=(0, 2))

    assert buffer.backspace() is True

    assert list(buffer.lines) == ["ac"]
    assert buffer.cursor == (0, 1)


def test_backspace_at_column_zero_joins_previous_line() -> None:
    buffer = make_buffer("foo\nbar", cursor=(1, 0))

    assert buffer.backspace() is True

    assert list(buffer.lines) == ["foobar"]
    assert buffer.cursor == (0, 3)


def test_backspace_at_document_start_is_noop() -> None:
    buffer = make_buffer("abc\ndef")
    before = (list(buffer.lines), buffer.cursor, buffer.document.version)

    assert buffer.backspace() is False

    assert (list(buffer.lines), buffer.cursor, buffer.document.version) == before
    assert buffer.dirty is False


def test_delete_forward_removes_character_under_cursor() -> None:
    buffer = make_buffer("abc", cursor=(0, 1))

    assert buffer.delete_forward() is True

    assert list(buffer.lines) == ["ac"]
    assert buffer.cursor == (0, 1)


def test_delete_forward_at_end_of_line_joins_next_line() -> None:
    buffer = make_buffer("foo\nbar\nbaz", cursor=(0, 3))

    assert buffer.delete_forward() is True

    assert list(buffer.lines) == ["foobar", "baz"]
    assert buffer.cursor == (0, 3)


def test_delete_forward_at_document_end_is_noop() -> None:
    buffer = make_buffer("foo\nbar", cursor=(1, 3))

    assert buffer.delete_forward() is False

    assert list(buffer.lines) == ["foo", "bar"]
    assert buffer.dirty is False


def test_split_line_moves_tail_to_new_line() -> None:
    buffer = make_buffer("hello world", cursor=(0, 5))

    assert buffer.split_line() is True

    assert list(buffer.lines) == ["hello", " world"]
    assert buffer.cursor == (1, 0)


def test_split_at_end_of_line_inserts_empty_line() -> None:
    buffer = make_buffer("one\ntwo", cursor=(0, 3))

    buffer.split_line()

    assert list(buffer.lines) == ["one", "", "two"]
    assert buffer.cursor == (1, 0)


@pytest.mark.parametrize(
    ("text", "cursor"),
    [("hello", (0, 0)), ("hello", (0, 2)), ("hello", (0, 5)), ("a\nbc\n", (1, 1))],
)
def test_split_then_backspace_restores_line_and_cursor(
    text: str, cursor: tuple[int, int]
) -> None:
    buffer = make_buffer(text, cursor=cursor)
    original = list(buffer.lines)

    buffer.split_line()
    buffer.backspace()

    assert list(buffer.lines) == original
    assert buffer.cursor == cursor


def test_vertical_moves_clamp_column() -> None:
    buffer = make_buffer("long line\nab\nanother", cursor=(0, 8))

    assert buffer.move_down() is True
    assert buffer.cursor == (1, 2)
    assert buffer.move_down() is True
    assert buffer.cursor == (2, 2)
    assert buffer.move_up() is True
    assert buffer.cursor == (1, 2)


def test_vertical_moves_stop_at_edges() -> None:
    buffer = make_buffer("a\nb", cursor=(0, 1))

    assert buffer.move_up() is False
    buffer.set_cursor(1, 0)
    assert buffer.move_down() is False
    assert buffer.cursor == (1, 0)


def test_move_left_wraps_to_end_of_previous_line() -> None:
    buffer = make_buffer("abc\nde", cursor=(1, 0))

    assert buffer.move_left() is True

    assert buffer.cursor == (0, 3)


def test_move_right_wraps_to_start_of_next_line() -> None:
    buffer = make_buffer("abc\nde", cursor=(0, 3))

    assert buffer.move_right() is True

    assert buffer.cursor == (1, 0)


def test_horizontal_moves_stop_at_document_edges() -> None:
    buffer = make_buffer("abc\nde")

    assert buffer.move_left() is False
    assert buffer.cursor == (0, 0)

    buffer.set_cursor(1, 2)
    assert buffer.move_right() is False
    assert buffer.cursor == (1, 2)


def test_movement_does_not_mark_dirty() -> None:
    buffer = make_buffer("abc\nde")

    buffer.move_right()
    buffer.move_down()

    assert buffer.dirty is False


def test_set_cursor_rejects_out_of_range_positions() -> None:
    buffer = make_buffer("abc")

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.set_cursor(0, 4)

    assert excinfo.value.cursor == (0, 4)
    with pytest.raises(BufferValidationError):
        buffer.set_cursor(1, 0)


def test_mark_saved_clears_dirty_flag() -> None:
    buffer = NoteBuffer()
    buffer.insert_char("a")

    buffer.mark_saved()

    assert buffer.dirty is False


def test_random_edit_sequences_preserve_invariants() -> None:
    rng = random.Random(1234)
    buffer = make_buffer("alpha\n\nbeta gamma\nz")
    operations = [
        lambda: buffer.insert_char(rng.choice("xy ")),
        buffer.backspace,
        buffer.delete_forward,
        buffer.split_line,
        buffer.move_up,
        buffer.move_down,
        buffer.move_left,
        buffer.move_right,
    ]

    for _ in range(2000):
        rng.choice(operations)()
        assert_invariants(buffer)


def test_mirror_reports_current_state() -> None:
    buffer = make_buffer("ab\ncd", cursor=(1, 1))

    mirror = buffer.mirror(attributes={"host": "test"})

    assert mirror.text == "ab\ncd"
    assert mirror.cursor == (1, 1)
    assert mirror.dirty is False
    assert mirror.attributes == {"host": "test"}


@pytest.mark.parametrize("text", ["", "ab", "\n", "\r"])
def test_insert_char_rejects_anything_but_one_character(text: str) -> None:
    buffer = make_buffer("abc", cursor=(0, 1))

    with pytest.raises(BufferValidationError):
        buffer.insert_char(text)

    assert list(buffer.lines) == ["abc"]
    assert buffer.cursor == (0, 1)
    assert buffer.dirty is False
