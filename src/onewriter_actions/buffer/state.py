"""Range and selection state for editor buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Range = Tuple[int, int]  # half-open (start, end) character offsets


@dataclass(slots=True)
class Selection:
    """Mutable selection tracked alongside a buffer; a caret when collapsed."""

    start: int = 0
    end: int = 0

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    def as_range(self) -> Range:
        return (self.start, self.end)

    def set_caret(self, offset: int) -> None:
        self.start = self.end = offset

    def set_range(self, start: int, end: int) -> None:
        if start > end:
            start, end = end, start
        self.start, self.end = start, end
