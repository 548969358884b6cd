"""High-level editing verbs reused across modes."""

from .core import (
    SEARCH_UNSUPPORTED,
    append_after_cursor,
    append_at_line_end,
    enter_command_mode,
    enter_insert_mode,
    enter_visual_block_mode,
    enter_visual_line_mode,
    enter_visual_mode,
    exit_insert_mode,
    exit_to_normal_mode,
    insert_at_line_start,
    noop_action,
    search_unsupported,
)
from .editing import (
    YANKED,
    change_line,
    delete_char,
    delete_line,
    erase_backward,
    indent_line,
    paste,
    redo,
    split_line,
    undo,
    unindent_line,
    yank_line,
)
from .motion import MOTION_ACTIONS, apply_motion, motion_action
from .visual import (
    change_selection,
    delete_selection,
    indent_selection,
    unindent_selection,
    yank_selection,
)
from .command import SAVE_FAILED, SAVED, submit_command_line

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
    "MOTION_ACTIONS",
    "apply_motion",
    "motion_action",
    "yank_selection",
    "delete_selection",
    "change_selection",
    "indent_selection",
    "unindent_selection",
    "submit_command_line",
    "SAVED",
    "SAVE_FAILED",
    "SEARCH_UNSUPPORTED",
    "YANKED",
]
