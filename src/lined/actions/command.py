"""Actions that evaluate Ex-style command lines.

Commands are looked up by exact string equality; anything else is ignored
and the editor returns to Normal mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, MutableMapping, cast

from lined.modes.base_mode import EditorMode, ModeContext, ModeResult
from lined.runtime import telemetry
from lined.storage import StorageError

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch

CommandHandler = Callable[[ModeContext], ModeResult]

SAVED = "File saved successfully."
SAVE_FAILED = "Error saving file!"


def _command_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("command_state", {})
    )
    state.setdefault("text", "")
    state.setdefault("history", [])
    return state


def submit_command_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    state = _command_state(context)
    text = str(state.get("text", ""))
    context.bus.emit("command.submit", text)
    history = state.get("history")
    if isinstance(history, list) and text:
        history.append(text)
    state["text"] = ""
    handler = COMMAND_HANDLERS.get(text)
    if handler is None:
        return _unknown_command(context, text)
    return handler(context)


def _unknown_command(context: ModeContext, command: str) -> ModeResult:
    context.bus.emit("command.unknown", command)
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_unknown",
        message=command,
    )


def _write(context: ModeContext) -> bool:
    store = context.store
    lines = context.buffer.lines
    if store is None:
        telemetry.record_event(
            "storage.save_failed", level="error", data={"reason": "no backing file"}
        )
        return False
    try:
        store.save(lines)
    except StorageError:
        return False
    context.buffer.document.dirty = False
    context.bus.emit("command.write", {"path": store.name, "lines": len(lines)})
    return True


def _quit(context: ModeContext, *, force: bool, status: str) -> ModeResult:
    context.bus.emit("command.quit", {"force": force})
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status=status,
        quit=True,
    )


def _handle_write(context: ModeContext) -> ModeResult:
    saved = _write(context)
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_write" if saved else "command_write_failed",
        notice=SAVED if saved else SAVE_FAILED,
    )


def _handle_quit(context: ModeContext) -> ModeResult:
    return _quit(context, force=False, status="command_quit")


def _handle_force_quit(context: ModeContext) -> ModeResult:
    return _quit(context, force=True, status="command_quit_force")


def _handle_wq(context: ModeContext) -> ModeResult:
    if not _write(context):
        return ModeResult(
            consumed=True,
            switch_to=EditorMode.NORMAL,
            status="command_write_failed",
            notice=SAVE_FAILED,
        )
    result = _quit(context, force=False, status="command_wq")
    result.notice = SAVED
    return result


def _handle_undo(context: ModeContext) -> ModeResult:
    undone = context.buffer.undo()
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_undo" if undone else "noop",
    )


def _handle_redo(context: ModeContext) -> ModeResult:
    redone = context.buffer.redo()
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_redo" if redone else "noop",
    )


COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "w": _handle_write,
    "q": _handle_quit,
    "wq": _handle_wq,
    "q!": _handle_force_quit,
    "u": _handle_undo,
    "redo": _handle_redo,
}


__all__ = ["submit_command_line", "COMMAND_HANDLERS", "SAVED", "SAVE_FAILED"]
