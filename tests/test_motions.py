from __future__ import annotations

from lined.motions import (
    MOTIONS,
    document_end,
    document_start,
    line_end,
    line_start,
    match_bracket,
    move_down,
    move_left,
    move_right,
    move_up,
    next_word,
    previous_word,
)

LINES = ("alpha beta", "", "gamma  delta epsilon")


def test_left_wraps_to_previous_line_end() -> None:
    assert move_left(LINES, (2, 0)) == (1, 0)
    assert move_left(LINES, (1, 0)) == (0, 10)
    assert move_left(LINES, (0, 0)) == (0, 0)


def test_right_wraps_to_next_line_start() -> None:
    assert move_right(LINES, (0, 10)) == (1, 0)
    assert move_right(LINES, (2, 20)) == (2, 20)
    assert move_right(LINES, (0, 3)) == (0, 4)


def test_vertical_motion_clamps_column() -> None:
    assert move_down(LINES, (0, 8)) == (1, 0)
    assert move_up(LINES, (2, 15)) == (1, 0)
    assert move_up(LINES, (0, 4)) == (0, 4)
    assert move_down(LINES, (2, 4)) == (2, 4)


def test_line_and_document_bounds() -> None:
    assert line_start(LINES, (2, 9)) == (2, 0)
    assert line_end(LINES, (2, 0)) == (2, 20)
    assert document_start(LINES, (2, 9)) == (0, 0)
    assert document_end(LINES, (0, 0)) == (2, 20)


def test_next_word_skips_word_then_spaces() -> None:
    assert next_word(LINES, (2, 0)) == (2, 7)
    assert next_word(LINES, (2, 2)) == (2, 7)
    assert next_word(LINES, (2, 13)) == (2, 20)
    assert next_word(LINES, (2, 20)) == (2, 20)


def test_previous_word_stops_at_word_start() -> None:
    assert previous_word(LINES, (2, 9)) == (2, 7)
    assert previous_word(LINES, (2, 7)) == (2, 0)
    assert previous_word(LINES, (0, 0)) == (0, 0)


def test_previous_word_crosses_blank_lines() -> None:
    assert previous_word(LINES, (2, 0)) == (0, 6)


def test_bracket_match_round_trip() -> None:
    lines = ("foo(bar(baz))",)

    forward = match_bracket(lines, (0, 3))
    assert forward == (0, 12)
    assert match_bracket(lines, forward) == (0, 3)


def test_bracket_match_nested_inner_pair() -> None:
    lines = ("foo(bar(baz))",)

    assert match_bracket(lines, (0, 7)) == (0, 11)


def test_bracket_match_spans_lines() -> None:
    lines = ("def f() {", "  if (x) { y(); }", "}")

    assert match_bracket(lines, (0, 8)) == (2, 0)
    assert match_bracket(lines, (2, 0)) == (0, 8)


def test_bracket_match_noop_off_bracket_or_unbalanced() -> None:
    assert match_bracket(("abc",), (0, 1)) == (0, 1)
    assert match_bracket(("(abc",), (0, 0)) == (0, 0)
    assert match_bracket(("abc",), (0, 3)) == (0, 3)


def test_motion_table_is_complete() -> None:
    assert set(MOTIONS) == {
        "left",
        "right",
        "up",
        "down",
        "line_start",
        "line_end",
        "document_start",
        "document_end",
        "next_word",
        "previous_word",
        "match_bracket",
    }
