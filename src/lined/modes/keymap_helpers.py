"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base_mode import KeyInput, ModeContext

if TYPE_CHECKING:
    from lined.keymaps import KeymapResolver

KEY_ALIASES = {
    "<Esc>": "ESC",
    "\x1b": "ESC",
    "escape": "ESC",
    "RETURN": "ENTER",
    "\n": "ENTER",
    "\r": "ENTER",
    "enter": "ENTER",
    "\x7f": "BACKSPACE",
    "\b": "BACKSPACE",
    "backspace": "BACKSPACE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
}


def normalize_key(key: str) -> str:
    return KEY_ALIASES.get(key, key)


def key_to_token(key: KeyInput) -> str:
    name = normalize_key(key.key)
    modifiers = sorted({m.strip().lower() for m in key.modifiers if m.strip()})
    if modifiers:
        modifier = "+".join(modifiers)
        return f"{modifier}+{name}"
    return name


def require_keymap_resolver(context: ModeContext) -> "KeymapResolver":
    from lined.keymaps.resolver import KeymapResolver

    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


__all__ = [
    "KEY_ALIASES",
    "normalize_key",
    "key_to_token",
    "require_keymap_resolver",
]
