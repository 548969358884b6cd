"""Editor configuration resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .telemetry import ENV_PREFIX

INDENT = "    "


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(slots=True)
class EditorConfig:
    """Knobs shared by the session and its host.

    ``visible_rows`` is the number of text rows the render surface shows;
    ``chrome_rows`` are the rows reserved for the status and command lines.
    """

    visible_rows: int = 22
    chrome_rows: int = 2
    indent: str = INDENT

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            visible_rows=max(1, _env_int("VISIBLE_ROWS", 22)),
            chrome_rows=max(0, _env_int("CHROME_ROWS", 2)),
        )

    def text_rows(self, terminal_rows: int) -> int:
        return max(1, terminal_rows - self.chrome_rows)


__all__ = ["EditorConfig", "INDENT"]
