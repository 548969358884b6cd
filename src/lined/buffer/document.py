"""Core document data structures for lined buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineDocument:
    """Ordered, never-empty list of text lines.

    Mutating helpers return a new document with a bumped version so the
    previous instance can double as a history snapshot.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineDocument":
        return cls(_lines=list(lines), version=0, dirty=False)

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        """Split ``text`` on newlines; a trailing terminator ends the last record."""

        if not text:
            return cls()
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        return cls.from_lines(lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(
        self, *, lines: Iterable[str], dirty: bool | None = None
    ) -> "LineDocument":
        """Return a new document with the provided lines and bumped version."""

        updated = LineDocument(_lines=list(lines), version=self.version + 1)
        updated.dirty = bool(dirty if dirty is not None else self.dirty)
        return updated

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "LineDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return LineDocument(_lines=lines, version=self.version + 1, dirty=True)

    def set_line(self, index: int, text: str) -> "LineDocument":
        return self.update_lines(index, index + 1, [text])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self._lines[index])
