"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from lined.buffer import Buffer
from lined.runtime import telemetry
from lined.runtime.config import EditorConfig

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch
    from lined.storage import LineFile


class EditorMode(str, Enum):
    """Closed set of modes; exactly one is active at a time."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"
    VISUAL = "visual"
    VISUAL_LINE = "visual_line"
    VISUAL_BLOCK = "visual_block"

    @property
    def is_visual(self) -> bool:
        return self in _VISUAL_MODES


_VISUAL_MODES = frozenset(
    {EditorMode.VISUAL, EditorMode.VISUAL_LINE, EditorMode.VISUAL_BLOCK}
)


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def from_char(cls, char: str) -> "KeyInput":
        """Build the event a terminal delivers for a single typed character."""

        return cls(key=char, text=char)


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``.

    ``notice`` is a transient status line for the host; ``quit`` asks the
    session to stop.
    """

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None
    notice: Optional[str] = None
    quit: bool = False


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    buffer: Buffer
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)
    config: EditorConfig = field(default_factory=EditorConfig)
    store: Optional["LineFile"] = None


Listener = Callable[[object], None]


class ModeBus:
    """Synchronous publish/subscribe channel between modes, actions and hosts.

    Listeners run in subscription order on the emitting call stack.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, event: str, callback: Listener) -> Callable[[], None]:
        """Add ``callback`` for ``event``; the returned callable removes it."""

        listeners = self._listeners[event]
        listeners.append(callback)

        def unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in tuple(self._listeners.get(event, ())):
            callback(payload)


class Mode:
    """One state of the editor. Subclasses set ``name`` and handle keys."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        """Called after the manager makes this mode active."""

    def on_exit(self, next_mode: Optional[str]) -> None:
        """Called before the manager leaves this mode."""

    def handle_key(self, key: KeyInput) -> ModeResult:
        raise NotImplementedError(f"{type(self).__name__} does not handle keys")

    def _execute_match(self, match: "ResolutionMatch") -> ModeResult:
        """Run the bound action; a handler returning nothing counts as consumed."""

        metadata = {"binding_id": match.binding.id, "action": match.action.id}
        with telemetry.span("keymaps::execute", component="keymaps", metadata=metadata):
            outcome = match.action(self.context, match)
        return outcome if isinstance(outcome, ModeResult) else ModeResult(consumed=True)


__all__ = [
    "EditorMode",
    "KeyInput",
    "ModeResult",
    "ModeContext",
    "ModeBus",
    "Mode",
]
