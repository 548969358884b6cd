from __future__ import annotations

from lined.buffer import Buffer, SelectionShape
from lined.runtime.config import EditorConfig
from lined.session import EditorSession, to_key_input


def make_session(text: str = "", *, rows: int = 22) -> EditorSession:
    return EditorSession(Buffer.from_text(text), config=EditorConfig(visible_rows=rows))


def assert_cursor_in_bounds(session: EditorSession) -> None:
    row, col = session.buffer.state.cursor
    assert 0 <= row < session.buffer.line_count
    assert 0 <= col <= len(session.buffer.line(row))


def test_to_key_input_handles_chars_and_named_keys() -> None:
    char = to_key_input("x")
    assert (char.key, char.text) == ("x", "x")

    escape = to_key_input("ESC")
    assert escape.key == "ESC"
    assert escape.text is None

    block = to_key_input("ctrl+v")
    assert (block.key, block.modifiers) == ("v", ("ctrl",))


def test_count_prefix_deletes_characters() -> None:
    session = make_session("abcdef")

    view = session.feed("3x")

    assert view.lines == ("def",)
    assert view.mode == "normal"


def test_dd_removes_current_line() -> None:
    session = make_session("one\ntwo\nthree")

    session.feed("jdd")

    assert session.buffer.lines == ("one", "three")
    assert session.buffer.state.cursor == (1, 0)


def test_document_jumps() -> None:
    session = make_session("first\nmiddle\nlast line")

    assert session.feed("G").cursor == (2, 9)
    assert session.feed("gg").cursor == (0, 0)


def test_viewport_tracks_cursor() -> None:
    session = make_session("\n".join(f"row {n}" for n in range(20)), rows=5)

    view = session.feed("G")

    assert view.offset == 15
    assert view.visible_lines() == tuple(f"row {n}" for n in range(15, 20))


def test_resize_reserves_chrome_rows() -> None:
    session = make_session("a")

    session.resize(12, 80)

    assert session.view().visible_rows == 10
    assert session.columns == 80


def test_visual_char_yank_sets_notice() -> None:
    session = make_session("alpha")

    session.feed("vl")
    selection = session.view().selection
    assert selection is not None
    assert selection.shape is SelectionShape.CHAR

    view = session.feed("y")

    assert view.mode == "normal"
    assert view.status == "Text yanked."
    assert view.selection is None
    assert session.buffer.clipboard.get().text == "al"


def test_visual_line_delete() -> None:
    session = make_session("a\nb\nc")

    session.feed("Vjd")

    assert session.buffer.lines == ("c",)
    assert session.mode == "normal"


def test_visual_block_yank_via_ctrl_v() -> None:
    session = make_session("abcd\nefgh")

    session.step("ctrl+v")
    assert session.mode == "visual_block"
    session.feed("jly")

    assert session.buffer.clipboard.get().lines == ("ab", "ef")


def test_visual_indent_each_row() -> None:
    session = make_session("a\nb\nc")

    session.feed("Vj>")

    assert session.buffer.lines == ("    a", "    b", "c")
    assert session.buffer.history.undo_depth == 2


def test_escape_leaves_visual_mode() -> None:
    session = make_session("alpha")

    session.feed("v")
    view = session.step("ESC")

    assert view.mode == "normal"
    assert session.buffer.state.anchor is None


def test_insert_typing_and_enter() -> None:
    session = make_session("world")

    session.feed("ihello")
    session.step("ENTER")
    view = session.step("ESC")

    assert view.lines == ("hello", "world")
    assert view.mode == "normal"
    assert view.cursor == (1, 0)


def test_append_at_line_end() -> None:
    session = make_session("ab")

    session.feed("Ac")
    view = session.step("ESC")

    assert view.lines == ("abc",)
    assert view.cursor == (0, 2)


def test_insert_backspace_joins_lines() -> None:
    session = make_session("ab\ncd")

    session.feed("ji")
    session.step("BACKSPACE")

    assert session.buffer.lines == ("abcd",)
    assert session.buffer.state.cursor == (0, 2)


def test_search_key_reports_unsupported() -> None:
    session = make_session("abc")

    view = session.step("/")

    assert view.status == "Search not implemented yet."
    assert view.mode == "normal"
    assert session.step("l").status is None


def test_yank_line_then_paste() -> None:
    session = make_session("keep\nnext")

    session.feed("yyp")

    assert session.buffer.lines == ("keep", "keep", "next")
    assert session.buffer.state.cursor == (1, 0)


def test_charwise_yank_across_rows_pastes_without_new_rows() -> None:
    session = make_session("abcd\nefgh\nijkl")

    session.feed("vjlyG0lp")

    assert session.buffer.lines == ("abcd", "efgh", "iabl")


def test_undo_and_redo_keys() -> None:
    session = make_session("abc")

    session.feed("x")
    session.feed("u")
    assert session.buffer.lines == ("abc",)

    session.step("ctrl+r")
    assert session.buffer.lines == ("bc",)


def test_bracket_jump_key() -> None:
    session = make_session("foo(bar(baz))")

    session.feed("lll%")

    assert session.buffer.state.cursor == (0, 12)


def test_command_text_visible_while_typing() -> None:
    session = make_session("abc")

    view = session.feed(":wq")

    assert view.mode == "command"
    assert view.command_text == "wq"


def test_quit_stops_session_and_ignores_keys() -> None:
    session = make_session("abc")

    session.feed(":q")
    view = session.step("ENTER")

    assert view.running is False
    assert session.step("x").lines == ("abc",)


def test_cursor_stays_in_bounds_after_edits() -> None:
    session = make_session("longest line here\nshort\n")

    for keys in ("$", "j", "dd", "G", "x", "k", "$", "p", "u", "u", "w", "b"):
        session.feed(keys)
        assert_cursor_in_bounds(session)
