"""Bracket matching (``%``)."""

from __future__ import annotations

from typing import Sequence

from lined.buffer.state import Cursor

OPENERS = {"(": ")", "{": "}", "[": "]"}
CLOSERS = {close: open_ for open_, close in OPENERS.items()}


def match_bracket(lines: Sequence[str], cursor: Cursor) -> Cursor:
    """Jump to the bracket pairing the one under the cursor.

    Non-bracket units and unbalanced brackets leave the cursor where it is.
    """

    row, col = cursor
    line = lines[row]
    if col >= len(line):
        return cursor
    current = line[col]
    if current in OPENERS:
        return _scan_forward(lines, row, col, current, OPENERS[current]) or cursor
    if current in CLOSERS:
        return _scan_backward(lines, row, col, current, CLOSERS[current]) or cursor
    return cursor


def _scan_forward(
    lines: Sequence[str], row: int, col: int, same: str, pair: str
) -> Cursor | None:
    depth = 1
    for y in range(row, len(lines)):
        start = col + 1 if y == row else 0
        for x in range(start, len(lines[y])):
            unit = lines[y][x]
            if unit == same:
                depth += 1
            elif unit == pair:
                depth -= 1
            if depth == 0:
                return (y, x)
    return None


def _scan_backward(
    lines: Sequence[str], row: int, col: int, same: str, pair: str
) -> Cursor | None:
    depth = 1
    for y in range(row, -1, -1):
        start = col - 1 if y == row else len(lines[y]) - 1
        for x in range(start, -1, -1):
            unit = lines[y][x]
            if unit == same:
                depth += 1
            elif unit == pair:
                depth -= 1
            if depth == 0:
                return (y, x)
    return None


__all__ = ["match_bracket"]
