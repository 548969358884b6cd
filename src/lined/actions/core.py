"""Core action implementations shared across modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lined.modes.base_mode import EditorMode, ModeContext, ModeResult

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch

SEARCH_UNSUPPORTED = "Search not implemented yet."


def _switch(mode: EditorMode, message: str) -> ModeResult:
    return ModeResult(consumed=True, switch_to=mode, message=message)


def enter_insert_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return _switch(EditorMode.INSERT, "enter_insert")


def insert_at_line_start(
    context: ModeContext, match: "ResolutionMatch"
) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.move_cursor((buffer.state.row, 0))
    return _switch(EditorMode.INSERT, "enter_insert")


def append_after_cursor(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    buffer = context.buffer
    row, col = buffer.state.cursor
    if col < len(buffer.line(row)):
        buffer.move_cursor((row, col + 1))
    return _switch(EditorMode.INSERT, "enter_insert")


def append_at_line_end(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    buffer = context.buffer
    row = buffer.state.row
    buffer.move_cursor((row, len(buffer.line(row))))
    return _switch(EditorMode.INSERT, "enter_insert")


def exit_to_normal_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return _switch(EditorMode.NORMAL, "exit_to_normal")


def exit_insert_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    """Leave Insert mode, stepping the cursor back one column when possible."""

    del match
    buffer = context.buffer
    row, col = buffer.state.cursor
    if col > 0:
        buffer.move_cursor((row, col - 1))
    return _switch(EditorMode.NORMAL, "exit_insert")


def enter_visual_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return _switch(EditorMode.VISUAL, "enter_visual")


def enter_visual_line_mode(
    context: ModeContext, match: "ResolutionMatch"
) -> ModeResult:
    del context, match
    return _switch(EditorMode.VISUAL_LINE, "enter_visual")


def enter_visual_block_mode(
    context: ModeContext, match: "ResolutionMatch"
) -> ModeResult:
    del context, match
    return _switch(EditorMode.VISUAL_BLOCK, "enter_visual")


def enter_command_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return _switch(EditorMode.COMMAND, "enter_command")


def search_unsupported(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.bus.emit("search.unsupported", None)
    return ModeResult(
        consumed=True, status="search_unsupported", notice=SEARCH_UNSUPPORTED
    )


def noop_action(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "enter_insert_mode",
    "insert_at_line_start",
    "append_after_cursor",
    "append_at_line_end",
    "exit_to_normal_mode",
    "exit_insert_mode",
    "enter_visual_mode",
    "enter_visual_line_mode",
    "enter_visual_block_mode",
    "enter_command_mode",
    "search_unsupported",
    "noop_action",
    "SEARCH_UNSUPPORTED",
]
