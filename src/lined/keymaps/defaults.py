"""Built-in keymaps that seed each mode with sensible defaults."""

from __future__ import annotations

from typing import Callable, Iterable

from lined.actions import command as command_actions
from lined.actions import core as core_actions
from lined.actions import editing as editing_actions
from lined.actions import visual as visual_actions
from lined.actions.motion import MOTION_ACTIONS

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

VISUAL_MODES = ("visual", "visual_line", "visual_block")

_ACTION_TABLE: tuple[tuple[str, Callable[..., object], str], ...] = (
    ("core.enter_insert", core_actions.enter_insert_mode, "Enter insert mode"),
    ("core.insert_line_start", core_actions.insert_at_line_start, "Insert at start"),
    ("core.append", core_actions.append_after_cursor, "Append after the cursor"),
    ("core.append_line_end", core_actions.append_at_line_end, "Append at line end"),
    ("core.exit_to_normal", core_actions.exit_to_normal_mode, "Return to normal mode"),
    ("core.exit_insert", core_actions.exit_insert_mode, "Leave insert mode"),
    ("core.enter_visual", core_actions.enter_visual_mode, "Select characters"),
    ("core.enter_visual_line", core_actions.enter_visual_line_mode, "Select lines"),
    ("core.enter_visual_block", core_actions.enter_visual_block_mode, "Select a block"),
    ("core.enter_command", core_actions.enter_command_mode, "Open the command line"),
    ("core.search", core_actions.search_unsupported, "Search (not supported)"),
    ("core.noop", core_actions.noop_action, "Do nothing"),
    ("edit.delete_char", editing_actions.delete_char, "Delete character"),
    ("edit.delete_line", editing_actions.delete_line, "Delete line"),
    ("edit.yank_line", editing_actions.yank_line, "Yank line"),
    ("edit.change_line", editing_actions.change_line, "Replace line"),
    ("edit.paste", editing_actions.paste, "Paste the clipboard"),
    ("edit.undo", editing_actions.undo, "Undo"),
    ("edit.redo", editing_actions.redo, "Redo"),
    ("edit.indent_line", editing_actions.indent_line, "Indent line"),
    ("edit.unindent_line", editing_actions.unindent_line, "Unindent line"),
    ("edit.split_line", editing_actions.split_line, "Split line at the cursor"),
    ("edit.erase_backward", editing_actions.erase_backward, "Erase backward"),
    ("visual.yank_selection", visual_actions.yank_selection, "Yank selection"),
    ("visual.delete_selection", visual_actions.delete_selection, "Delete selection"),
    ("visual.change_selection", visual_actions.change_selection, "Replace selection"),
    ("visual.indent_selection", visual_actions.indent_selection, "Indent rows"),
    ("visual.unindent_selection", visual_actions.unindent_selection, "Unindent rows"),
    ("command.submit_line", command_actions.submit_command_line, "Run command line"),
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    *(ActionRef(action_id, fn, text) for action_id, fn, text in _ACTION_TABLE),
    *(
        ActionRef(f"motion.{name}", handler, f"Move: {name.replace('_', ' ')}")
        for name, handler in MOTION_ACTIONS.items()
    ),
)

# (binding suffix, keys, action id)
_MOTION_KEYS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("left", ("h",), "motion.left"),
    ("right", ("l",), "motion.right"),
    ("up", ("k",), "motion.up"),
    ("down", ("j",), "motion.down"),
    ("arrow_left", ("LEFT",), "motion.left"),
    ("arrow_right", ("RIGHT",), "motion.right"),
    ("arrow_up", ("UP",), "motion.up"),
    ("arrow_down", ("DOWN",), "motion.down"),
    ("line_start", ("0",), "motion.line_start"),
    ("line_end", ("$",), "motion.line_end"),
    ("next_word", ("w",), "motion.next_word"),
    ("previous_word", ("b",), "motion.previous_word"),
    ("document_start", ("g", "g"), "motion.document_start"),
    ("document_end", ("G",), "motion.document_end"),
    ("match_bracket", ("%",), "motion.match_bracket"),
)

_NORMAL_KEYS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("enter_insert", ("i",), "core.enter_insert"),
    ("insert_line_start", ("I",), "core.insert_line_start"),
    ("append", ("a",), "core.append"),
    ("append_line_end", ("A",), "core.append_line_end"),
    ("enter_visual", ("v",), "core.enter_visual"),
    ("enter_visual_line", ("V",), "core.enter_visual_line"),
    ("enter_visual_block", ("ctrl+v",), "core.enter_visual_block"),
    ("enter_command", (":",), "core.enter_command"),
    ("search", ("/",), "core.search"),
    ("escape", ("ESC",), "core.noop"),
    ("delete_char", ("x",), "edit.delete_char"),
    ("delete_line", ("d", "d"), "edit.delete_line"),
    ("yank_line", ("y", "y"), "edit.yank_line"),
    ("change_line", ("c", "c"), "edit.change_line"),
    ("paste", ("p",), "edit.paste"),
    ("undo", ("u",), "edit.undo"),
    ("redo", ("ctrl+r",), "edit.redo"),
    ("indent_line", (">", ">"), "edit.indent_line"),
    ("unindent_line", ("<", "<"), "edit.unindent_line"),
)

_INSERT_KEYS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("exit_escape", ("ESC",), "core.exit_insert"),
    ("split_line", ("ENTER",), "edit.split_line"),
    ("erase_backward", ("BACKSPACE",), "edit.erase_backward"),
    ("arrow_left", ("LEFT",), "motion.left"),
    ("arrow_right", ("RIGHT",), "motion.right"),
    ("arrow_up", ("UP",), "motion.up"),
    ("arrow_down", ("DOWN",), "motion.down"),
)

_VISUAL_KEYS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("exit_escape", ("ESC",), "core.exit_to_normal"),
    ("yank_selection", ("y",), "visual.yank_selection"),
    ("delete_selection", ("d",), "visual.delete_selection"),
    ("change_selection", ("c",), "visual.change_selection"),
    ("indent_selection", (">",), "visual.indent_selection"),
    ("unindent_selection", ("<",), "visual.unindent_selection"),
)

_COMMAND_KEYS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("exit_escape", ("ESC",), "core.exit_to_normal"),
    ("submit_enter", ("ENTER",), "command.submit_line"),
)


def _bindings(
    mode: str, table: Iterable[tuple[str, tuple[str, ...], str]]
) -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=f"{mode}.{suffix}",
            mode=mode,
            sequence=KeySequence.from_strings(*keys),
            action_id=action_id,
            description=action_id,
        )
        for suffix, keys, action_id in table
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *_bindings("normal", _NORMAL_KEYS + _MOTION_KEYS),
    *_bindings("insert", _INSERT_KEYS),
    *(
        binding
        for mode in VISUAL_MODES
        for binding in _bindings(mode, _VISUAL_KEYS + _MOTION_KEYS)
    ),
    *_bindings("command", _COMMAND_KEYS),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    overrides: Iterable[Binding] = (),
) -> None:
    """Register the built-in actions and bindings.

    ``overrides`` are registered last with ``replace=True`` so they evict
    any default bound to the same keys.
    """

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=replace)
    for binding in overrides:
        registry.register_binding(binding, replace=True)


__all__ = [
    "load_default_keymaps",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "VISUAL_MODES",
]
