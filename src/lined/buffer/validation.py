"""Clamping helpers shared across buffer services."""

from __future__ import annotations

from .document import LineDocument
from .state import Cursor


def clamp_cursor(document: LineDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    row = max(0, min(row, document.line_count - 1))
    col = max(0, min(col, document.line_length(row)))
    return (row, col)
