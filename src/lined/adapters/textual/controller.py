"""Textual-facing controller that wires an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from lined.buffer import BufferMirror
from lined.modes import KeyInput
from lined.runtime import telemetry
from lined.session import EditorSession, SessionView


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names that differ from the editor's key tokens.
TEXTUAL_KEYS: Dict[str, str] = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "tab": "\t",
}

BUS_EVENTS = (
    "visual.selection",
    "visual.yank",
    "visual.delete",
    "operator.yank",
    "operator.delete",
    "operator.change",
    "command.start",
    "command.end",
    "command.submit",
    "command.unknown",
    "command.write",
    "command.quit",
    "search.unsupported",
)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_command: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    on_quit: Callable[[], None] = _noop


def key_input_from_textual(
    key: str, *, character: Optional[str] = None, modifiers: Iterable[str] = ()
) -> KeyInput:
    """Translate a Textual key name/character pair into a ``KeyInput``.

    Textual reports chorded keys as ``"ctrl+v"``; those are split into the
    key and its modifiers. Printable characters keep their text.
    """

    mods = tuple(str(mod).lower() for mod in modifiers)
    named = TEXTUAL_KEYS.get(key)
    if named == "\t":
        return KeyInput(key="\t", text="\t", modifiers=mods)
    if named is not None:
        return KeyInput(key=named, modifiers=mods)
    if "+" in key and len(key) > 1:
        *prefix, base = key.split("+")
        return KeyInput(key=base, modifiers=mods + tuple(prefix))
    if character and len(character) == 1 and character.isprintable():
        return KeyInput(key=character, text=character, modifiers=mods)
    return KeyInput(key=key.upper(), modifiers=mods)


class TextualEditorAdapter:
    """Bridges an EditorSession and its bus events to a Textual surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_command_line()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> SessionView:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        event = key_input_from_textual(key, character=text, modifiers=modifiers)
        view = self.session.step(event)
        self._after_step(view)
        return view

    def _after_step(self, view: SessionView) -> None:
        self.hooks.update_status(view.status or "")
        self._refresh_buffer()
        self._refresh_command_line()
        if not view.running:
            telemetry.record_event(
                "adapter.quit",
                data={"file": view.file_name},
                logger_name="lined.adapters.textual",
            )
            self.hooks.on_quit()

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in BUS_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.handle_event(name, payload)
        if name.startswith("command"):
            self._refresh_command_line()
        if name.startswith("visual"):
            self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.pull_buffer())

    def _refresh_command_line(self) -> None:
        self.hooks.show_command(self.session.command_text())


__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "key_input_from_textual",
    "TEXTUAL_KEYS",
]
