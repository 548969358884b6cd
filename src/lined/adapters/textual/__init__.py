"""Textual host: key translation, UI hooks, and the full-screen app."""

from .controller import TextualEditorAdapter, TextualUIHooks, key_input_from_textual

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "key_input_from_textual"]
