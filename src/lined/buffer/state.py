"""Cursor, viewport, and selection-anchor state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + viewport info tied to a LineDocument version."""

    cursor: Cursor = (0, 0)
    anchor: Optional[Cursor] = None
    offset: int = 0
    visible_rows: int = 22

    @property
    def row(self) -> int:
        return self.cursor[0]

    @property
    def col(self) -> int:
        return self.cursor[1]

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def set_anchor(self, anchor: Cursor) -> None:
        self.anchor = anchor

    def clear_anchor(self) -> None:
        self.anchor = None

    def scroll_to_cursor(self, line_count: int) -> None:
        """Keep ``offset`` valid and the cursor row inside the visible window."""

        rows = max(1, self.visible_rows)
        row = self.cursor[0]
        if row < self.offset:
            self.offset = row
        elif row >= self.offset + rows:
            self.offset = row - rows + 1
        self.offset = max(0, min(self.offset, max(0, line_count - rows)))
