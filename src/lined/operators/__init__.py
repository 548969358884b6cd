"""Operator engine: buffer/clipboard mutations with history discipline."""

from .engine import (
    change,
    delete,
    delete_char,
    indent_line,
    indent_rows,
    paste,
    unindent_line,
    unindent_rows,
    yank,
)

__all__ = [
    "yank",
    "delete",
    "delete_char",
    "change",
    "paste",
    "indent_line",
    "unindent_line",
    "indent_rows",
    "unindent_rows",
]
