"""Shared key loop for modes driven by the keymap resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from lined.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch


class KeymapMode(Mode):
    """Resolve each key against this mode's bindings.

    Tokens accumulate while they form the prefix of a chord. A full match
    runs the bound action; anything else goes to :meth:`_unbound`, which by
    default drops a broken chord and ignores a lone unbound key.
    """

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._logger_name = f"lined.modes.{self.name}"
        self._resolver = require_keymap_resolver(context)
        self._pending: List[str] = []

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._pending)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        self._pending.append(token)
        result = self._resolver.resolve(self.name, tuple(self._pending))
        if result.is_match and result.match is not None:
            self._pending.clear()
            return self._run(result.match)
        if result.status == "pending":
            return ModeResult(consumed=True, status="pending", message="awaiting_chord")

        typed = tuple(self._pending)
        self._pending.clear()
        if len(typed) > 1:
            return self._drop_chord(typed)
        return self._unbound(key)

    def _run(self, match: "ResolutionMatch") -> ModeResult:
        return self._execute_match(match)

    def _drop_chord(self, typed: tuple[str, ...]) -> ModeResult:
        telemetry.record_event(
            "keymaps.chord_dropped",
            level="debug",
            data={"mode": self.name, "keys": " ".join(typed)},
            logger_name=self._logger_name,
        )
        return ModeResult(consumed=True, status="noop", message="chord_dropped")

    def _unbound(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="noop", message="unbound")


__all__ = ["KeymapMode"]
