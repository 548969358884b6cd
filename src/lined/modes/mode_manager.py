"""Mode manager: the state machine that routes keys to the active mode."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type, Union

from lined.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from lined.runtime import telemetry

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .normal_mode import NormalMode
from .visual_mode import VisualBlockMode, VisualLineMode, VisualMode

DEFAULT_MODES: tuple[Type[Mode], ...] = (
    NormalMode,
    InsertMode,
    CommandMode,
    VisualMode,
    VisualLineMode,
    VisualBlockMode,
)


class ModeManager:
    """Holds one instance per mode and exactly one active name.

    The first registered mode becomes active. A handler asks for a
    transition through ``ModeResult.switch_to``; the manager performs it
    after the handler returns and then re-clamps the cursor and viewport.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._logger_name = "lined.modes"
        self._modes: Dict[str, Mode] = {}
        self._current: Optional[Mode] = None

        registry = keymap_registry
        if registry is None:
            registry = KeymapRegistry(logger_name="lined.keymaps")
            if load_defaults:
                load_default_keymaps(registry)
        self.keymap_registry = registry
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            registry, logger_name="lined.keymaps"
        )

        shared = {
            "keymap_registry": self.keymap_registry,
            "keymap_resolver": self.keymap_resolver,
            "mode_manager": self,
        }
        for key, value in shared.items():
            context.extras.setdefault(key, value)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._current

    @property
    def active_name(self) -> str:
        return self._require_current().name

    def get_mode(self, name: Union[str, EditorMode]) -> Mode:
        key = name.value if isinstance(name, EditorMode) else name
        mode = self._modes.get(key)
        if mode is None:
            raise KeyError(f"Unknown mode '{key}'")
        return mode

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._current is None:
            self._current = mode
            mode.on_enter(None)
        return mode

    def register_modes(self, mode_classes: Iterable[Type[Mode]]) -> None:
        for mode_cls in mode_classes:
            self.register_mode(mode_cls)

    def switch_mode(self, name: Union[str, EditorMode]) -> None:
        target = self.get_mode(name)
        source = self._current
        if source is target:
            return
        source_name = source.name if source is not None else None
        if source is not None:
            source.on_exit(target.name)
        self._current = target
        target.on_enter(source_name)
        telemetry.record_event(
            "mode.switch",
            data={"mode": target.name, "previous": source_name},
            logger_name=self._logger_name,
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self._require_current()
        with telemetry.span(
            name=f"mode::{mode.name}",
            logger_name=self._logger_name,
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        self.context.buffer.clamp()
        return result

    def _require_current(self) -> Mode:
        if self._current is None:
            raise RuntimeError("No mode registered")
        return self._current


def create_default_manager(context: ModeContext) -> ModeManager:
    """Manager with every editor mode and the default keymaps; starts in normal."""

    manager = ModeManager(context)
    manager.register_modes(DEFAULT_MODES)
    return manager


__all__ = ["ModeManager", "DEFAULT_MODES", "create_default_manager", "EditorMode"]
