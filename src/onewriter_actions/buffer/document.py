"""Immutable text buffer and the pure range replacement built on it."""

from __future__ import annotations

from dataclasses import dataclass

from .state import Range
from .validation import ensure_range


@dataclass(frozen=True, slots=True)
class TextBuffer:
    """Flat document text plus a version bumped on every replacement.

    Offsets index characters of ``text`` directly; there is no line table.
    Line structure is recovered on demand by ``onewriter_actions.selectors``.
    """

    text: str = ""
    version: int = 0

    def __len__(self) -> int:
        return len(self.text)

    def slice(self, start: int, end: int) -> str:
        ensure_range(len(self.text), start, end)
        return self.text[start:end]

    def with_text(self, text: str) -> "TextBuffer":
        return TextBuffer(text=text, version=self.version + 1)


@dataclass(frozen=True, slots=True)
class BufferEdit:
    """Outcome of :func:`replace_range`: the new buffer and derived selection."""

    buffer: TextBuffer
    selection: Range
    replaced: str


def replace_range(buffer: TextBuffer, start: int, end: int, text: str) -> BufferEdit:
    """Return ``buffer`` with ``[start, end)`` replaced by ``text``.

    The derived selection is a caret right after the inserted text.
    """

    ensure_range(len(buffer), start, end)
    before = buffer.text
    updated = buffer.with_text(before[:start] + text + before[end:])
    caret = start + len(text)
    return BufferEdit(buffer=updated, selection=(caret, caret), replaced=before[start:end])
