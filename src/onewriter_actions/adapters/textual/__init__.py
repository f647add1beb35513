"""Textual host: a TextArea-backed editor and the demo app."""

from .controller import TextAreaEditor

__all__ = ["TextAreaEditor"]
