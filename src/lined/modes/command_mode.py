"""Command-line mode: collects ``:`` text until it is submitted or abandoned."""

from __future__ import annotations

from typing import List, MutableMapping, cast

from .base_mode import EditorMode, KeyInput, ModeContext, ModeResult
from .keymap_helpers import key_to_token
from .keymap_mode import KeymapMode


class CommandMode(KeymapMode):
    """``ENTER`` and ``ESC`` are ordinary bindings.

    Every other key that carries printable text is appended to the line and
    ``BACKSPACE`` removes the last character. The text is mirrored into
    ``extras["command_state"]`` where the submit action and hosts read it.
    """

    name = EditorMode.COMMAND.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._typed: List[str] = []

    @property
    def current_command(self) -> str:
        return "".join(self._typed)

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._typed.clear()
        self.context.bus.emit("command.start", None)
        self._publish()

    def on_exit(self, next_mode: str | None) -> None:
        super().on_exit(next_mode)
        self.context.bus.emit("command.end", self.current_command)
        self._typed.clear()
        self._publish()

    def _unbound(self, key: KeyInput) -> ModeResult:
        if key_to_token(key) == "BACKSPACE":
            if self._typed:
                self._typed.pop()
                self._publish()
            return ModeResult(consumed=True, status="editing")
        if key.text and len(key.text) == 1 and key.text.isprintable():
            self._typed.append(key.text)
            self._publish()
            return ModeResult(consumed=True, status="editing")
        return super()._unbound(key)

    def _publish(self) -> None:
        state = cast(
            MutableMapping[str, object],
            self.context.extras.setdefault("command_state", {}),
        )
        state["text"] = self.current_command


__all__ = ["CommandMode"]
