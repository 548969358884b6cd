from __future__ import annotations

from lined.buffer import Buffer, RegisterShape, SelectionRange, SelectionShape
from lined.operators import (
    change,
    delete,
    delete_char,
    indent_line,
    indent_rows,
    paste,
    unindent_line,
    unindent_rows,
    yank,
)


def make_buffer(*lines: str, cursor: tuple[int, int] = (0, 0)) -> Buffer:
    buffer = Buffer.from_lines(lines or ("",))
    buffer.move_cursor(cursor)
    return buffer


def make_selection(
    anchor: tuple[int, int], cursor: tuple[int, int], shape: SelectionShape
) -> SelectionRange:
    return SelectionRange.between(anchor, cursor, shape)


def test_yank_pushes_history_without_mutating() -> None:
    buffer = make_buffer("keep me")

    value = yank(buffer)

    assert value.lines == ("keep me",)
    assert value.shape is RegisterShape.WHOLE_LINES
    assert buffer.history.undo_depth == 1
    # the no-op entry is what a following undo consumes
    assert buffer.undo() is True
    assert buffer.lines == ("keep me",)


def test_yank_then_paste_duplicates_line_below() -> None:
    buffer = make_buffer("first", "second")

    yank(buffer)
    assert paste(buffer) is True

    assert buffer.lines == ("first", "first", "second")
    assert buffer.state.cursor == (1, 0)


def test_char_yank_takes_inclusive_columns_per_row() -> None:
    buffer = make_buffer("abcdef", "ghijkl")

    value = yank(buffer, make_selection((0, 1), (1, 3), SelectionShape.CHAR))

    assert value.lines == ("bcd", "hij")
    assert value.shape is RegisterShape.CHAR_RANGE


def test_line_yank_copies_whole_rows() -> None:
    buffer = make_buffer("a", "b", "c")

    value = yank(buffer, make_selection((2, 0), (1, 0), SelectionShape.LINE))

    assert value.lines == ("b", "c")
    assert value.shape is RegisterShape.WHOLE_LINES


def test_delete_current_line_moves_cursor_to_column_zero() -> None:
    buffer = make_buffer("one", "two", "three", cursor=(2, 3))

    delete(buffer)

    assert buffer.lines == ("one", "two")
    assert buffer.state.cursor == (1, 0)
    assert buffer.clipboard.get().lines == ("three",)


def test_delete_only_line_leaves_single_empty_line() -> None:
    buffer = make_buffer("solo")

    delete(buffer)

    assert buffer.lines == ("",)
    assert buffer.state.cursor == (0, 0)


def test_line_delete_removes_selected_rows() -> None:
    buffer = make_buffer("a", "b", "c", "d")

    delete(buffer, make_selection((1, 0), (2, 0), SelectionShape.LINE))

    assert buffer.lines == ("a", "d")
    assert buffer.state.cursor == (1, 0)


def test_block_delete_erases_column_window() -> None:
    buffer = make_buffer("abcdef", "ab", "uvwxyz")

    value = delete(buffer, make_selection((0, 1), (2, 3), SelectionShape.BLOCK))

    assert value.lines == ("bcd", "b", "vwx")
    assert value.shape is RegisterShape.BLOCK
    assert buffer.lines == ("aef", "a", "uyz")
    assert buffer.state.cursor == (0, 1)


def test_change_deletes_like_delete() -> None:
    buffer = make_buffer("x", "y")

    change(buffer)

    assert buffer.lines == ("y",)
    assert buffer.clipboard.get().lines == ("x",)


def test_delete_char_fills_clipboard() -> None:
    buffer = make_buffer("abc", cursor=(0, 1))

    value = delete_char(buffer)

    assert value is not None
    assert value.lines == ("b",)
    assert buffer.lines == ("ac",)


def test_delete_char_past_end_is_noop() -> None:
    buffer = make_buffer("abc", cursor=(0, 3))

    assert delete_char(buffer) is None
    assert buffer.history.undo_depth == 0


def test_paste_empty_clipboard_skips_history() -> None:
    buffer = make_buffer("abc")

    assert paste(buffer) is False
    assert buffer.history.undo_depth == 0


def test_char_paste_inserts_at_cursor() -> None:
    buffer = make_buffer("abc", cursor=(0, 1))
    buffer.clipboard.store(["XY"], RegisterShape.CHAR_RANGE)

    paste(buffer)

    assert buffer.lines == ("aXYbc",)
    assert buffer.state.cursor == (0, 3)


def test_multi_row_char_paste_overwrites_rows_from_cursor_column() -> None:
    buffer = make_buffer("abc", "de", cursor=(0, 1))
    buffer.clipboard.store(["12", "34", "56"], RegisterShape.CHAR_RANGE)

    paste(buffer)

    assert buffer.lines == ("a12", "d34")
    assert buffer.line_count == 2


def test_block_paste_pads_and_stops_at_buffer_end() -> None:
    buffer = make_buffer("abcdef", "a", cursor=(0, 2))
    buffer.clipboard.store(["XY", "ZW", "Q"], RegisterShape.BLOCK)

    paste(buffer)

    assert buffer.lines == ("abXYef", "a ZW")
    assert buffer.line_count == 2


def test_indent_and_unindent_adjust_column() -> None:
    buffer = make_buffer("code", cursor=(0, 2))

    indent_line(buffer)
    assert buffer.lines == ("    code",)
    assert buffer.state.cursor == (0, 6)

    assert unindent_line(buffer) is True
    assert buffer.lines == ("code",)
    assert buffer.state.cursor == (0, 2)


def test_unindent_without_indent_is_noop() -> None:
    buffer = make_buffer("  two spaces")

    assert unindent_line(buffer) is False
    assert buffer.lines == ("  two spaces",)


def test_visual_indent_undoes_one_row_at_a_time() -> None:
    buffer = make_buffer("a", "b", "c")
    selection = make_selection((0, 0), (2, 0), SelectionShape.LINE)

    indent_rows(buffer, selection)
    assert buffer.lines == ("    a", "    b", "    c")
    assert buffer.history.undo_depth == 3

    buffer.undo()
    assert buffer.lines == ("    a", "    b", "c")


def test_unindent_rows_counts_changed_rows() -> None:
    buffer = make_buffer("    a", "b", "    c")
    selection = make_selection((0, 0), (2, 0), SelectionShape.LINE)

    assert unindent_rows(buffer, selection) == 2
    assert buffer.lines == ("a", "b", "c")
