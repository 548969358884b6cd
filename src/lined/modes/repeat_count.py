"""Numeric prefix accumulated in Normal mode."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class RepeatCount:
    """Decimal count built from consecutive digit keys.

    ``0`` only extends a count already in progress; on its own it is the
    line-start motion and ``feed`` refuses it.
    """

    value: int = 0

    def feed(self, token: str) -> bool:
        if len(token) != 1 or token not in "0123456789":
            return False
        if token == "0" and self.value == 0:
            return False
        self.value = self.value * 10 + int(token)
        return True

    def take(self) -> int:
        """Return ``max(1, value)`` and reset."""

        times = max(1, self.value)
        self.value = 0
        return times

    def reset(self) -> None:
        self.value = 0

    @property
    def pending(self) -> bool:
        return self.value > 0


__all__ = ["RepeatCount"]
