"""Buffer value types, selection state and range validation."""

from .document import BufferEdit, TextBuffer, replace_range
from .state import Range, Selection
from .sync import BufferMirror, BufferValidationError
from .validation import ensure_offset, ensure_range

__all__ = [
    "BufferEdit",
    "BufferMirror",
    "BufferValidationError",
    "Range",
    "Selection",
    "TextBuffer",
    "ensure_offset",
    "ensure_range",
    "replace_range",
]
