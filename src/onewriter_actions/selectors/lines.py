"""Line-boundary queries over a flat text buffer.

Every helper works on plain offsets into ``text`` and returns half-open
``(start, end)`` ranges. A line range never includes its terminating ``\\n``
unless a helper says otherwise.
"""

from __future__ import annotations

from typing import Optional, Tuple

from onewriter_actions.buffer import Range, ensure_offset, ensure_range

Location = Tuple[int, int]  # (row, column)

NEWLINE = "\n"


def line_start_at(text: str, offset: int) -> int:
    """Offset of the first character of the line containing ``offset``."""

    ensure_offset(len(text), offset)
    return text.rfind(NEWLINE, 0, offset) + 1


def line_end_at(text: str, offset: int) -> int:
    """Offset of the ``\\n`` ending the line at ``offset`` (or the buffer end)."""

    ensure_offset(len(text), offset)
    found = text.find(NEWLINE, offset)
    return len(text) if found == -1 else found


def line_range_for_selection(
    text: str, start: int, end: int, *, include_newline: bool = False
) -> Range:
    """Range covering every line touched by ``[start, end)``.

    A selection that stops right after a ``\\n`` does not pull in the
    following line.
    """

    ensure_range(len(text), start, end)
    scan_from = end
    if end > start and text[end - 1] == NEWLINE:
        scan_from = end - 1
    line_start = line_start_at(text, start)
    line_end = line_end_at(text, scan_from)
    if include_newline and line_end < len(text):
        line_end += 1
    return (line_start, line_end)


def trim_trailing_newline(text: str, line_range: Range) -> Range:
    """Drop a trailing ``\\n`` from ``line_range``; otherwise return it as is.

    ``line_range[1]`` is an absolute offset, not a length.
    """

    start, end = ensure_range(len(text), *line_range)
    if end > start and text[end - 1] == NEWLINE:
        return (start, end - 1)
    return (start, end)


def previous_line_range(text: str, start: int) -> Optional[Range]:
    """Range of the line ending just before the line that begins at ``start``.

    ``None`` when the newline before ``start`` sits at offset 0 or there is
    none, so an empty first line is never swapped.
    """

    ensure_offset(len(text), start)
    prev_end = start - 1
    if prev_end <= 0:
        return None
    prev_start = text.rfind(NEWLINE, 0, prev_end) + 1
    return (prev_start, prev_end)


def next_line_range(text: str, end: int) -> Optional[Range]:
    """Range of the line starting just after the ``\\n`` at ``end``.

    ``None`` when nothing follows that newline, so the empty line after a
    final ``\\n`` is never swapped.
    """

    ensure_offset(len(text), end)
    next_start = end + 1
    if next_start >= len(text):
        return None
    found = text.find(NEWLINE, next_start)
    next_end = len(text) if found == -1 else found
    return (next_start, next_end)


def line_index_at(text: str, offset: int) -> int:
    ensure_offset(len(text), offset)
    return text.count(NEWLINE, 0, offset)


def offset_to_location(text: str, offset: int) -> Location:
    row = line_index_at(text, offset)
    return (row, offset - line_start_at(text, offset))


def location_to_offset(text: str, location: Location) -> int:
    """Inverse of :func:`offset_to_location`; columns clamp to the line length.

    Rows are split on ``\\n`` only, so ``text`` must use LF line endings.
    """

    row, column = location
    lines = text.split(NEWLINE)
    row = max(0, min(row, len(lines) - 1))
    offset = sum(len(line) + 1 for line in lines[:row])
    return offset + max(0, min(column, len(lines[row])))


__all__ = [
    "Location",
    "NEWLINE",
    "line_end_at",
    "line_index_at",
    "line_range_for_selection",
    "line_start_at",
    "location_to_offset",
    "next_line_range",
    "offset_to_location",
    "previous_line_range",
    "trim_trailing_newline",
]
