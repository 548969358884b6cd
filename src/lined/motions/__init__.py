"""Pure cursor motions: ``(lines, cursor) -> cursor``."""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from lined.buffer.state import Cursor

from .basic import (
    document_end,
    document_start,
    line_end,
    line_start,
    move_down,
    move_left,
    move_right,
    move_up,
)
from .brackets import match_bracket
from .words import next_word, previous_word

Motion = Callable[[Sequence[str], Cursor], Cursor]

MOTIONS: Dict[str, Motion] = {
    "left": move_left,
    "right": move_right,
    "up": move_up,
    "down": move_down,
    "line_start": line_start,
    "line_end": line_end,
    "document_start": document_start,
    "document_end": document_end,
    "next_word": next_word,
    "previous_word": previous_word,
    "match_bracket": match_bracket,
}

__all__ = [
    "Motion",
    "MOTIONS",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "line_start",
    "line_end",
    "document_start",
    "document_end",
    "next_word",
    "previous_word",
    "match_bracket",
]
