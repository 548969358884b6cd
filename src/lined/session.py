"""The editing session: one buffer, its history and clipboard, and the modes.

Hosts drive a session one key at a time with :meth:`EditorSession.step` and
render the returned :class:`SessionView`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence, Union, cast

from lined.buffer import Buffer, BufferMirror, Cursor, SelectionRange, SelectionShape
from lined.keymaps import KeyStroke
from lined.modes import EditorMode, KeyInput, ModeBus, ModeContext, ModeResult
from lined.modes.mode_manager import ModeManager, create_default_manager
from lined.runtime import telemetry
from lined.runtime.config import EditorConfig
from lined.storage import LineFile

KeyLike = Union[KeyInput, str]


@dataclass(frozen=True, slots=True)
class SessionView:
    """Everything a render surface needs after a step."""

    mode: str
    lines: Sequence[str]
    cursor: Cursor
    offset: int
    visible_rows: int
    selection: Optional[SelectionRange]
    status: Optional[str]
    command_text: str
    file_name: str
    running: bool

    def visible_lines(self) -> Sequence[str]:
        return self.lines[self.offset : self.offset + self.visible_rows]


def to_key_input(key: KeyLike) -> KeyInput:
    """Accept a ready ``KeyInput``, a typed character, or a named token.

    Named tokens such as ``"ESC"`` or ``"ctrl+v"`` carry no text.
    """

    if isinstance(key, KeyInput):
        return key
    if len(key) == 1:
        return KeyInput.from_char(key)
    stroke = KeyStroke.parse(key)
    return KeyInput(key=stroke.key, modifiers=stroke.modifiers)


class EditorSession:
    """Owned aggregate of buffer, history, clipboard, and mode state."""

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        store: Optional[LineFile] = None,
        config: Optional[EditorConfig] = None,
        bus: Optional[ModeBus] = None,
    ) -> None:
        self.config = config or EditorConfig.from_env()
        self.buffer = buffer or Buffer()
        self.buffer.set_visible_rows(self.config.visible_rows)
        self.store = store
        self.bus = bus or ModeBus()
        self.context = ModeContext(
            buffer=self.buffer, bus=self.bus, config=self.config, store=store
        )
        self.manager: ModeManager = create_default_manager(self.context)
        self.running = True
        self.status: Optional[str] = None
        self.last_result: Optional[ModeResult] = None
        self.columns = 0

    @classmethod
    def open(
        cls, path: str | os.PathLike[str], *, config: Optional[EditorConfig] = None
    ) -> "EditorSession":
        store = LineFile(path)
        buffer = Buffer.from_lines(store.load(), name=store.name)
        return cls(buffer, store=store, config=config)

    @property
    def mode(self) -> str:
        return self.manager.active_name

    def step(self, key: KeyLike) -> SessionView:
        """Process exactly one key event and return the resulting state."""

        if not self.running:
            return self.view()
        result = self.manager.handle_key(to_key_input(key))
        self.last_result = result
        self.status = result.notice
        if result.quit:
            self.running = False
            telemetry.record_event(
                "session.stop",
                data={"file": self.buffer.name, "status": result.status},
            )
        return self.view()

    def feed(self, keys: Iterable[KeyLike]) -> SessionView:
        """Step through ``keys``; a plain string is fed one character at a time."""

        for key in keys:
            self.step(key)
        return self.view()

    def resize(self, rows: int, cols: int) -> None:
        """Adopt the host's terminal size; chrome rows are not text rows."""

        self.columns = max(0, cols)
        self.buffer.set_visible_rows(self.config.text_rows(rows))

    def selection(self) -> Optional[SelectionRange]:
        if not EditorMode(self.mode).is_visual:
            return None
        state = self._extras_map("visual_state")
        shape = SelectionShape(state.get("shape", SelectionShape.CHAR))
        return self.buffer.selection(shape)

    def command_text(self) -> str:
        if self.mode != EditorMode.COMMAND.value:
            return ""
        state = self._extras_map("command_state")
        return str(state.get("text", ""))

    def _extras_map(self, key: str) -> Mapping[str, object]:
        return cast(Mapping[str, object], self.context.extras.get(key) or {})

    def view(self) -> SessionView:
        state = self.buffer.state
        return SessionView(
            mode=self.mode,
            lines=self.buffer.lines,
            cursor=state.cursor,
            offset=state.offset,
            visible_rows=state.visible_rows,
            selection=self.selection(),
            status=self.status,
            command_text=self.command_text(),
            file_name=self.buffer.name,
            running=self.running,
        )

    def pull_buffer(self) -> BufferMirror:
        selection = self.selection()
        return self.buffer.mirror(shape=selection.shape if selection else None)


__all__ = ["EditorSession", "SessionView", "to_key_input", "KeyLike"]
