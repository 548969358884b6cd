"""High-level buffer façade combining document, state, clipboard, and history."""

from __future__ import annotations

from contextlib import AbstractContextManager, ExitStack
from typing import Iterable, Optional, Sequence

from lined.runtime import telemetry

from .document import LineDocument
from .registers import ClipboardRegister
from .selection import SelectionRange, SelectionShape
from .state import BufferState, Cursor
from .sync import BufferMirror
from .undo import SnapshotHistory
from .validation import clamp_cursor


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[LineDocument] = None,
        state: Optional[BufferState] = None,
        clipboard: Optional[ClipboardRegister] = None,
        history: Optional[SnapshotHistory] = None,
    ) -> None:
        self.name = name
        self.document = document or LineDocument()
        self.state = state or BufferState()
        self.clipboard = clipboard or ClipboardRegister()
        self.history = history or SnapshotHistory()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=LineDocument.from_text(text))

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, name: str = "default") -> "Buffer":
        return cls(name=name, document=LineDocument.from_lines(lines))

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def line(self, row: Optional[int] = None) -> str:
        return self.document.get_line(self.state.row if row is None else row)

    def mirror(self, *, shape: Optional[SelectionShape] = None) -> BufferMirror:
        return BufferMirror(
            lines=self.document.snapshot(),
            cursor=self.state.cursor,
            offset=self.state.offset,
            selection=self.selection(shape) if shape else None,
        )

    def selection(self, shape: SelectionShape) -> Optional[SelectionRange]:
        anchor = self.state.anchor
        if anchor is None:
            return None
        return SelectionRange.between(anchor, self.state.cursor, shape)

    # -- cursor ---------------------------------------------------------------

    def move_cursor(self, cursor: Cursor) -> Cursor:
        self.state.set_cursor(*clamp_cursor(self.document, cursor))
        self.state.scroll_to_cursor(self.line_count)
        return self.state.cursor

    def clamp(self) -> Cursor:
        return self.move_cursor(self.state.cursor)

    def set_visible_rows(self, rows: int) -> None:
        self.state.visible_rows = max(1, rows)
        self.state.scroll_to_cursor(self.line_count)

    # -- mutation -------------------------------------------------------------

    def edit(self, label: str, *, record: bool = True) -> "Transaction":
        return Transaction(self, label, record=record)

    def checkpoint(self) -> None:
        """Push the current lines onto the undo stack and drop redo history."""

        self.history.checkpoint(self.document.snapshot())

    def set_lines(self, lines: Iterable[str]) -> None:
        self.document = self.document.replace(lines=lines, dirty=True)

    def splice(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        self.document = self.document.update_lines(start, end, new_lines)

    def set_line(self, row: int, text: str) -> None:
        self.document = self.document.set_line(row, text)

    def insert_text(self, text: str, *, record: bool = True) -> Cursor:
        """Insert ``text`` (no newlines) at the cursor and step past it."""

        row, col = self.state.cursor
        with self.edit("insert_text", record=record):
            line = self.line(row)
            self.set_line(row, line[:col] + text + line[col:])
            self.state.set_cursor(row, col + len(text))
        return self.state.cursor

    def split_line(self) -> Cursor:
        row, col = self.state.cursor
        with self.edit("split_line"):
            line = self.line(row)
            self.splice(row, row + 1, [line[:col], line[col:]])
            self.state.set_cursor(row + 1, 0)
        return self.state.cursor

    def erase_backward(self) -> Cursor:
        """Remove the unit behind the cursor or merge with the previous line.

        Not recorded in history.
        """

        row, col = self.state.cursor
        if col == 0 and row == 0:
            return self.state.cursor
        with self.edit("erase_backward", record=False):
            line = self.line(row)
            if col > 0:
                self.set_line(row, line[: col - 1] + line[col:])
                self.state.set_cursor(row, col - 1)
            else:
                previous = self.line(row - 1)
                self.splice(row - 1, row + 1, [previous + line])
                self.state.set_cursor(row - 1, len(previous))
        return self.state.cursor

    # -- history --------------------------------------------------------------

    def undo(self) -> bool:
        restored = self.history.undo(self.document.snapshot())
        if restored is None:
            return False
        self.set_lines(restored)
        self.clamp()
        telemetry.record_event(
            "history.undo",
            data={"buffer": self.name, "depth": self.history.undo_depth},
        )
        return True

    def redo(self) -> bool:
        restored = self.history.redo(self.document.snapshot())
        if restored is None:
            return False
        self.set_lines(restored)
        self.clamp()
        telemetry.record_event(
            "history.redo",
            data={"buffer": self.name, "depth": self.history.redo_depth},
        )
        return True


class Transaction(AbstractContextManager["Transaction"]):
    """Snapshot-then-mutate scope; re-clamps the cursor on exit."""

    def __init__(self, buffer: Buffer, label: str, *, record: bool = True) -> None:
        self.buffer = buffer
        self.label = label
        self.record = record
        self._scope = ExitStack()
        self._span: Optional[telemetry.Span] = None

    def __enter__(self) -> "Transaction":
        with ExitStack() as stack:
            self._span = stack.enter_context(
                telemetry.span(
                    name=f"buffer::{self.label}",
                    component=True,
                    metadata={"buffer": self.buffer.name},
                )
            )
            if self.record:
                self.buffer.checkpoint()
            self._scope = stack.pop_all()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                self.buffer.clamp()
                if self._span is not None:
                    self._span.add_metadata("version", self.buffer.document.version)
        finally:
            suppressed = self._scope.__exit__(exc_type, exc, tb)
        return bool(suppressed)
