"""Character, line, and document motions.

Every motion is saturating: a request that would leave the buffer returns
the nearest valid position instead.
"""

from __future__ import annotations

from typing import Sequence

from lined.buffer.state import Cursor


def _clamp_col(lines: Sequence[str], row: int, col: int) -> int:
    return max(0, min(col, len(lines[row])))


def move_left(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    if col > 0:
        return (row, col - 1)
    if row > 0:
        return (row - 1, len(lines[row - 1]))
    return (row, col)


def move_right(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    if col < len(lines[row]):
        return (row, col + 1)
    if row < len(lines) - 1:
        return (row + 1, 0)
    return (row, col)


def move_up(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    if row == 0:
        return (row, col)
    return (row - 1, _clamp_col(lines, row - 1, col))


def move_down(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    if row >= len(lines) - 1:
        return (row, col)
    return (row + 1, _clamp_col(lines, row + 1, col))


def line_start(lines: Sequence[str], cursor: Cursor) -> Cursor:
    del lines
    return (cursor[0], 0)


def line_end(lines: Sequence[str], cursor: Cursor) -> Cursor:
    return (cursor[0], len(lines[cursor[0]]))


def document_start(lines: Sequence[str], cursor: Cursor) -> Cursor:
    del lines, cursor
    return (0, 0)


def document_end(lines: Sequence[str], cursor: Cursor) -> Cursor:
    del cursor
    last = len(lines) - 1
    return (last, len(lines[last]))


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "line_start",
    "line_end",
    "document_start",
    "document_end",
]
