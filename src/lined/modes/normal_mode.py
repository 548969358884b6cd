"""Normal mode: repeat counts in front of keymap dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base_mode import EditorMode, KeyInput, ModeContext, ModeResult
from .keymap_helpers import key_to_token
from .keymap_mode import KeymapMode
from .repeat_count import RepeatCount

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch


class NormalMode(KeymapMode):
    """Digits build a repeat count while no chord is pending.

    A chord prefix (``g``, ``d``, ``y``, ``c``, ``>``, ``<``) waits for the
    next key with no deadline; if that key does not complete a binding the
    whole chord and any count are dropped.
    """

    name = EditorMode.NORMAL.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.count = RepeatCount()

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._pending.clear()
        self.count.reset()

    def on_exit(self, next_mode: str | None) -> None:
        super().on_exit(next_mode)
        self.count.reset()

    def handle_key(self, key: KeyInput) -> ModeResult:
        if not self._pending and self.count.feed(key_to_token(key)):
            return ModeResult(
                consumed=True, status="count", message=str(self.count.value)
            )
        return super().handle_key(key)

    def _run(self, match: "ResolutionMatch") -> ModeResult:
        outcome = ModeResult(consumed=True)
        for _ in range(self.count.take()):
            outcome = self._execute_match(match)
        return outcome

    def _drop_chord(self, typed: tuple[str, ...]) -> ModeResult:
        self.count.reset()
        return super()._drop_chord(typed)

    def _unbound(self, key: KeyInput) -> ModeResult:
        self.count.reset()
        return super()._unbound(key)


__all__ = ["NormalMode"]
