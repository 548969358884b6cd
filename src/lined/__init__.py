"""Modal plain-text line editor engine."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "modes",
    "motions",
    "operators",
    "runtime",
    "session",
    "storage",
]

__version__ = "0.1.0"
