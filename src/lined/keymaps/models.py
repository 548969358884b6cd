"""Key strokes, chords, and the bindings that map them to actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

MODIFIERS = frozenset({"ctrl", "alt", "shift", "meta"})


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    cleaned = {m.strip().lower() for m in modifiers if m.strip()}
    return tuple(sorted(cleaned))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One key press. Its ``token`` is what the resolver matches on."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Split ``"ctrl+v"`` into key and modifiers; ``"+"`` alone is a key."""

        *head, key = token.split("+")
        if head and key and all(part.lower() in MODIFIERS for part in head):
            return cls(key, tuple(head))
        return cls(token)

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))


@dataclass(frozen=True, slots=True)
class KeySequence:
    """One stroke, or a chord of several pressed in order."""

    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tuple(KeyStroke.parse(key) for key in keys if key))

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    @property
    def is_chord(self) -> bool:
        return len(self.strokes) > 1

    def overlaps(self, other: "KeySequence") -> bool:
        """True when one sequence equals or is a prefix of the other."""

        mine, theirs = self.tokens, other.tokens
        size = min(len(mine), len(theirs))
        return mine[:size] == theirs[:size]


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named action handler: ``handler(context, match) -> ModeResult``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """A key sequence bound to an action in one mode."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        for name in ("id", "mode", "action_id"):
            if not getattr(self, name):
                raise ValueError(f"binding {name} cannot be empty")

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)

    def shadows(self, other: "Binding") -> bool:
        """Same mode, and one sequence equals or prefixes the other."""

        return self.mode == other.mode and self.sequence.overlaps(other.sequence)


__all__ = [
    "KeyStroke",
    "KeySequence",
    "ActionRef",
    "Binding",
    "normalize_modifiers",
]
