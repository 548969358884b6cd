"""Yank, delete, change, paste, and indent operators.

Operators take the target as an optional :class:`SelectionRange`; ``None``
means the implicit single-line target of the Normal-mode chords (``yy``,
``dd``, ``cc``, ``>>``, ``<<``). Every buffer mutation goes through a
``Buffer.edit`` transaction, which checkpoints history before mutating.
"""

from __future__ import annotations

from typing import List, Optional

from lined.buffer import (
    Buffer,
    RegisterShape,
    RegisterValue,
    SelectionRange,
    SelectionShape,
)
from lined.runtime.config import INDENT

_SHAPES = {
    SelectionShape.CHAR: RegisterShape.CHAR_RANGE,
    SelectionShape.LINE: RegisterShape.WHOLE_LINES,
    SelectionShape.BLOCK: RegisterShape.BLOCK,
}


def _fragments(buffer: Buffer, selection: SelectionRange) -> List[str]:
    fragments: List[str] = []
    for row in selection.rows():
        line = buffer.line(row)
        start, end = selection.column_span(len(line))
        fragments.append(line[start:end])
    return fragments


def _collect(buffer: Buffer, selection: Optional[SelectionRange]) -> RegisterValue:
    if selection is None:
        return RegisterValue((buffer.line(),), RegisterShape.WHOLE_LINES)
    if selection.shape is SelectionShape.LINE:
        rows = buffer.lines[selection.row_lo : selection.row_hi + 1]
        return RegisterValue(tuple(rows), RegisterShape.WHOLE_LINES)
    return RegisterValue(tuple(_fragments(buffer, selection)), _SHAPES[selection.shape])


def yank(buffer: Buffer, selection: Optional[SelectionRange] = None) -> RegisterValue:
    """Copy the target into the clipboard.

    A history checkpoint is pushed even though nothing is mutated, so a
    following ``undo`` consumes that no-op entry first.
    """

    buffer.checkpoint()
    value = _collect(buffer, selection)
    buffer.clipboard.set(value)
    return value


def delete(buffer: Buffer, selection: Optional[SelectionRange] = None) -> RegisterValue:
    value = _collect(buffer, selection)
    with buffer.edit("delete"):
        if selection is None:
            _remove_rows(buffer, buffer.state.row, buffer.state.row)
        elif selection.shape is SelectionShape.LINE:
            _remove_rows(buffer, selection.row_lo, selection.row_hi)
        else:
            for row in selection.rows():
                line = buffer.line(row)
                start, end = selection.column_span(len(line))
                buffer.set_line(row, line[:start] + line[end:])
            buffer.state.set_cursor(selection.row_lo, selection.col_lo)
    buffer.clipboard.set(value)
    return value


def _remove_rows(buffer: Buffer, row_lo: int, row_hi: int) -> None:
    buffer.splice(row_lo, row_hi + 1, [])
    buffer.state.set_cursor(min(row_lo, buffer.line_count - 1), 0)


def delete_char(buffer: Buffer) -> Optional[RegisterValue]:
    """``x``: remove the unit under the cursor; no-op past end of line."""

    row, col = buffer.state.cursor
    line = buffer.line(row)
    if col >= len(line):
        return None
    with buffer.edit("delete_char"):
        buffer.set_line(row, line[:col] + line[col + 1 :])
    return buffer.clipboard.store((line[col],), RegisterShape.CHAR_RANGE)


def change(buffer: Buffer, selection: Optional[SelectionRange] = None) -> RegisterValue:
    """Delete the target; the caller then switches to Insert mode."""

    return delete(buffer, selection)


def paste(buffer: Buffer) -> bool:
    """Insert the clipboard at the cursor.

    A charwise payload spanning several rows is laid down like a block.
    """

    value = buffer.clipboard.get()
    if value.is_empty:
        return False
    with buffer.edit("paste"):
        if value.shape is RegisterShape.WHOLE_LINES:
            _paste_lines(buffer, value)
        elif value.shape is RegisterShape.BLOCK or len(value.lines) > 1:
            _paste_block(buffer, value)
        else:
            _paste_chars(buffer, value)
    return True


def _paste_lines(buffer: Buffer, value: RegisterValue) -> None:
    row = buffer.state.row
    buffer.splice(row + 1, row + 1, value.lines)
    buffer.state.set_cursor(row + len(value.lines), 0)


def _paste_chars(buffer: Buffer, value: RegisterValue) -> None:
    row, col = buffer.state.cursor
    line = buffer.line(row)
    text = value.lines[0]
    buffer.set_line(row, line[:col] + text + line[col:])
    buffer.state.set_cursor(row, col + len(text))


def _paste_block(buffer: Buffer, value: RegisterValue) -> None:
    row, col = buffer.state.cursor
    for offset, fragment in enumerate(value.lines):
        target = row + offset
        if target >= buffer.line_count:
            break
        line = buffer.line(target)
        if col + len(fragment) > len(line):
            line = line.ljust(col + len(fragment))
        buffer.set_line(target, line[:col] + fragment + line[col + len(fragment) :])


def indent_line(buffer: Buffer, *, indent: str = INDENT) -> None:
    row, col = buffer.state.cursor
    with buffer.edit("indent"):
        buffer.set_line(row, indent + buffer.line(row))
        buffer.state.set_cursor(row, col + len(indent))


def unindent_line(buffer: Buffer, *, indent: str = INDENT) -> bool:
    row, col = buffer.state.cursor
    with buffer.edit("unindent"):
        line = buffer.line(row)
        if not line.startswith(indent):
            return False
        buffer.set_line(row, line[len(indent) :])
        buffer.state.set_cursor(row, max(0, col - len(indent)))
    return True


def indent_rows(
    buffer: Buffer, selection: SelectionRange, *, indent: str = INDENT
) -> None:
    """Indent every selected row; each row is its own undo step."""

    for row in selection.rows():
        with buffer.edit("indent"):
            buffer.set_line(row, indent + buffer.line(row))


def unindent_rows(
    buffer: Buffer, selection: SelectionRange, *, indent: str = INDENT
) -> int:
    """Unindent every selected row; each row is its own undo step."""

    changed = 0
    for row in selection.rows():
        with buffer.edit("unindent"):
            line = buffer.line(row)
            if line.startswith(indent):
                buffer.set_line(row, line[len(indent) :])
                changed += 1
    return changed


__all__ = [
    "yank",
    "delete",
    "delete_char",
    "change",
    "paste",
    "indent_line",
    "unindent_line",
    "indent_rows",
    "unindent_rows",
]
