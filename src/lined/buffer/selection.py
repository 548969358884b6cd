"""Selection normalisation for the three visual shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .state import Cursor


class SelectionShape(str, Enum):
    CHAR = "char"
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Inclusive rectangle derived from an anchor and the live cursor.

    Column bounds are ignored for ``LINE`` selections.
    """

    row_lo: int
    row_hi: int
    col_lo: int
    col_hi: int
    shape: SelectionShape

    @classmethod
    def between(
        cls, anchor: Cursor, cursor: Cursor, shape: SelectionShape
    ) -> "SelectionRange":
        (a_row, a_col), (c_row, c_col) = anchor, cursor
        return cls(
            row_lo=min(a_row, c_row),
            row_hi=max(a_row, c_row),
            col_lo=min(a_col, c_col),
            col_hi=max(a_col, c_col),
            shape=shape,
        )

    def rows(self) -> Iterator[int]:
        return iter(range(self.row_lo, self.row_hi + 1))

    @property
    def height(self) -> int:
        return self.row_hi - self.row_lo + 1

    def column_span(self, line_length: int) -> tuple[int, int]:
        """Half-open ``[start, end)`` of the selected columns clipped to a line."""

        start = min(self.col_lo, line_length)
        end = min(self.col_hi + 1, line_length)
        return start, end

    def contains(self, row: int, col: int) -> bool:
        if not self.row_lo <= row <= self.row_hi:
            return False
        if self.shape is SelectionShape.LINE:
            return True
        return self.col_lo <= col <= self.col_hi


__all__ = ["SelectionShape", "SelectionRange"]
