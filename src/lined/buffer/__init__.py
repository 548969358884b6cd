"""Buffer abstractions and undo/redo data structures."""

from .buffer import Buffer, Transaction
from .document import LineDocument
from .registers import ClipboardRegister, RegisterShape, RegisterValue
from .selection import SelectionRange, SelectionShape
from .state import BufferState, Cursor
from .sync import BufferMirror
from .undo import SnapshotHistory
from .validation import clamp_cursor

__all__ = [
    "LineDocument",
    "BufferState",
    "Cursor",
    "ClipboardRegister",
    "RegisterShape",
    "RegisterValue",
    "SelectionRange",
    "SelectionShape",
    "SnapshotHistory",
    "Buffer",
    "Transaction",
    "BufferMirror",
    "clamp_cursor",
]
