"""Single-slot clipboard register."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class RegisterShape(str, Enum):
    CHAR_RANGE = "char_range"
    WHOLE_LINES = "whole_lines"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class RegisterValue:
    lines: Tuple[str, ...] = ()
    shape: RegisterShape = RegisterShape.CHAR_RANGE

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ClipboardRegister:
    """Holds the last yanked or deleted payload; every store overwrites it."""

    def __init__(self) -> None:
        self._value = RegisterValue()

    def get(self) -> RegisterValue:
        return self._value

    def set(self, value: RegisterValue) -> None:
        self._value = value

    def store(self, lines: Iterable[str], shape: RegisterShape) -> RegisterValue:
        self._value = RegisterValue(lines=tuple(lines), shape=shape)
        return self._value

    @property
    def is_empty(self) -> bool:
        return self._value.is_empty
