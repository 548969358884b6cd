"""Visual modes: an anchor plus the live cursor define the selection."""

from __future__ import annotations

from typing import MutableMapping, cast

from lined.buffer import SelectionShape

from .base_mode import EditorMode
from .keymap_mode import KeymapMode


class VisualMode(KeymapMode):
    """Character-range selection; subclasses change only name and shape.

    Entering drops the anchor at the cursor; motions then move only the
    cursor. Leaving clears the anchor.
    """

    name = EditorMode.VISUAL.value
    shape = SelectionShape.CHAR

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._pending.clear()
        anchor = self.context.buffer.state.cursor
        self.context.buffer.state.set_anchor(anchor)
        state = self._visual_state()
        state["anchor"] = anchor
        state["shape"] = self.shape
        self.context.bus.emit(
            "visual.selection",
            {"anchor": anchor, "cursor": anchor, "shape": self.shape.value},
        )

    def on_exit(self, next_mode: str | None) -> None:
        super().on_exit(next_mode)
        state = self._visual_state()
        state.pop("anchor", None)
        state.pop("shape", None)
        self.context.buffer.state.clear_anchor()

    def _visual_state(self) -> MutableMapping[str, object]:
        return cast(
            MutableMapping[str, object],
            self.context.extras.setdefault("visual_state", {}),
        )


class VisualLineMode(VisualMode):
    name = EditorMode.VISUAL_LINE.value
    shape = SelectionShape.LINE


class VisualBlockMode(VisualMode):
    name = EditorMode.VISUAL_BLOCK.value
    shape = SelectionShape.BLOCK


__all__ = ["VisualMode", "VisualLineMode", "VisualBlockMode"]
