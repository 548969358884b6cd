"""Snapshot-based linear undo/redo history."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

Snapshot = Tuple[str, ...]


class SnapshotHistory:
    """Two LIFO stacks of full-buffer snapshots.

    ``checkpoint`` records the pre-mutation lines and invalidates redo.
    ``undo``/``redo`` take the *current* lines, park them on the opposite
    stack and hand back the snapshot to install.
    """

    def __init__(self) -> None:
        self._undo: List[Snapshot] = []
        self._redo: List[Snapshot] = []

    def checkpoint(self, lines: Sequence[str]) -> None:
        self._undo.append(tuple(lines))
        self._redo.clear()

    def undo(self, current: Sequence[str]) -> Optional[Snapshot]:
        if not self._undo:
            return None
        self._redo.append(tuple(current))
        return self._undo.pop()

    def redo(self, current: Sequence[str]) -> Optional[Snapshot]:
        if not self._redo:
            return None
        self._undo.append(tuple(current))
        return self._redo.pop()

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)
