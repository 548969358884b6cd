"""Whitespace-delimited word motions."""

from __future__ import annotations

from typing import Sequence

from lined.buffer.state import Cursor

from .basic import move_left


def next_word(lines: Sequence[str], cursor: Cursor) -> Cursor:
    """Skip the rest of the current word, then the whitespace after it.

    Stays on the current line; at end of line this is a no-op.
    """

    row, col = cursor
    line = lines[row]
    while col < len(line) and not line[col].isspace():
        col += 1
    while col < len(line) and line[col].isspace():
        col += 1
    return (row, col)


def previous_word(lines: Sequence[str], cursor: Cursor) -> Cursor:
    """Step back once, then keep going while the unit behind is non-space."""

    row, col = cursor
    while row > 0 or col > 0:
        row, col = move_left(lines, (row, col))
        if col > 0 and not lines[row][col - 1].isspace():
            while col > 0 and not lines[row][col - 1].isspace():
                col -= 1
            break
    return (row, col)


__all__ = ["next_word", "previous_word"]
