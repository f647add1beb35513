"""Boundary types for handing buffer state to hosts."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import Range


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    selection: Range
    attributes: dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "selection": list(self.selection),
            "attributes": dict(self.attributes),
        }


class BufferValidationError(RuntimeError):
    """Raised when a host or action supplies an out-of-bounds range."""

    def __init__(self, message: str, *, range: Range | None = None) -> None:
        super().__init__(message)
        self.range = range
