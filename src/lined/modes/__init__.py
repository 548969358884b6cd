"""Editor modes, the repeat counter, and key normalisation."""

from .base_mode import EditorMode, KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .keymap_mode import KeymapMode
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualBlockMode, VisualLineMode, VisualMode
from .command_mode import CommandMode
from .repeat_count import RepeatCount

__all__ = [
    "EditorMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "KeymapMode",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "VisualLineMode",
    "VisualBlockMode",
    "CommandMode",
    "RepeatCount",
]
