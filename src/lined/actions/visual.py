"""Actions dedicated to Visual mode selection management."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, cast

from lined import operators
from lined.buffer import SelectionRange, SelectionShape
from lined.modes.base_mode import EditorMode, ModeContext, ModeResult

from .editing import YANKED

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch


def _selection(context: ModeContext) -> Optional[SelectionRange]:
    state = cast(Mapping[str, object], context.extras.get("visual_state") or {})
    shape = state.get("shape", SelectionShape.CHAR)
    return context.buffer.selection(SelectionShape(shape))


def _no_selection() -> ModeResult:
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, status="no_selection"
    )


def yank_selection(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    selection = _selection(context)
    if selection is None:
        return _no_selection()
    value = operators.yank(context.buffer, selection)
    context.bus.emit(
        "visual.yank",
        {"text": value.text, "shape": value.shape, "rows": selection.height},
    )
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="visual_yank",
        notice=YANKED,
    )


def delete_selection(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    selection = _selection(context)
    if selection is None:
        return _no_selection()
    value = operators.delete(context.buffer, selection)
    context.bus.emit(
        "visual.delete",
        {"label": "visual_delete", "text": value.text, "shape": value.shape},
    )
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="visual_delete",
        message=value.text,
    )


def change_selection(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    selection = _selection(context)
    if selection is None:
        return _no_selection()
    value = operators.change(context.buffer, selection)
    context.bus.emit(
        "visual.delete",
        {"label": "visual_change", "text": value.text, "shape": value.shape},
    )
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.INSERT,
        status="visual_change",
        message=value.text,
    )


def indent_selection(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    selection = _selection(context)
    if selection is None:
        return _no_selection()
    operators.indent_rows(context.buffer, selection, indent=context.config.indent)
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="visual_indent",
        message=str(selection.height),
    )


def unindent_selection(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    selection = _selection(context)
    if selection is None:
        return _no_selection()
    changed = operators.unindent_rows(
        context.buffer, selection, indent=context.config.indent
    )
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="visual_unindent",
        message=str(changed),
    )


__all__ = [
    "yank_selection",
    "delete_selection",
    "change_selection",
    "indent_selection",
    "unindent_selection",
]
