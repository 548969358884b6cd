"""Normal- and Insert-mode editing verbs backed by the operator engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lined import operators
from lined.modes.base_mode import EditorMode, ModeContext, ModeResult

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch

YANKED = "Text yanked."


def delete_char(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    removed = operators.delete_char(context.buffer)
    if removed is None:
        return ModeResult(consumed=True, status="noop", message="end_of_line")
    return ModeResult(consumed=True, status="delete_char", message=removed.text)


def delete_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    removed = operators.delete(context.buffer)
    context.bus.emit("operator.delete", {"text": removed.text, "shape": removed.shape})
    return ModeResult(consumed=True, status="delete_line", message=removed.text)


def yank_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    value = operators.yank(context.buffer)
    context.bus.emit("operator.yank", {"text": value.text, "shape": value.shape})
    return ModeResult(consumed=True, status="yank_line", notice=YANKED)


def change_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    removed = operators.change(context.buffer)
    context.bus.emit("operator.change", {"text": removed.text, "shape": removed.shape})
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.INSERT,
        status="change_line",
        message=removed.text,
    )


def paste(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    if not operators.paste(context.buffer):
        return ModeResult(consumed=True, status="noop", message="clipboard_empty")
    return ModeResult(consumed=True, status="paste")


def undo(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    if not context.buffer.undo():
        return ModeResult(consumed=True, status="noop", message="history_empty")
    return ModeResult(consumed=True, status="undo")


def redo(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    if not context.buffer.redo():
        return ModeResult(consumed=True, status="noop", message="history_empty")
    return ModeResult(consumed=True, status="redo")


def indent_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    operators.indent_line(context.buffer, indent=context.config.indent)
    return ModeResult(consumed=True, status="indent")


def unindent_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    if not operators.unindent_line(context.buffer, indent=context.config.indent):
        return ModeResult(consumed=True, status="noop", message="not_indented")
    return ModeResult(consumed=True, status="unindent")


def split_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.buffer.split_line()
    return ModeResult(consumed=True, status="split_line")


def erase_backward(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.buffer.erase_backward()
    return ModeResult(consumed=True, status="erase_backward")


__all__ = [
    "delete_char",
    "delete_line",
    "yank_line",
    "change_line",
    "paste",
    "undo",
    "redo",
    "indent_line",
    "unindent_line",
    "split_line",
    "erase_backward",
    "YANKED",
]
