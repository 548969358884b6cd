"""Adapter boundary types for syncing buffers with host surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .selection import SelectionRange
from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing what the render surface should draw."""

    lines: Sequence[str]
    cursor: Cursor
    offset: int
    selection: Optional[SelectionRange]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

