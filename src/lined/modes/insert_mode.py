"""Insert mode: bound editing keys plus literal text entry."""

from __future__ import annotations

from .base_mode import EditorMode, KeyInput, ModeResult
from .keymap_mode import KeymapMode


def _insertable(key: KeyInput) -> bool:
    if {m.lower() for m in key.modifiers} - {"shift"}:
        return False
    text = key.text
    if not text or len(text) != 1:
        return False
    return text == "\t" or text.isprintable()


class InsertMode(KeymapMode):
    """Unbound printable keys are typed into the buffer at the cursor."""

    name = EditorMode.INSERT.value

    def _unbound(self, key: KeyInput) -> ModeResult:
        if not _insertable(key):
            return super()._unbound(key)
        self.context.buffer.insert_text(key.text or "")
        return ModeResult(consumed=True, status="insert_text")


__all__ = ["InsertMode"]
