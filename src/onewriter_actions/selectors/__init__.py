"""Pure text queries: line boundaries and task items."""

from .lines import (
    NEWLINE,
    Location,
    line_range_for_selection,
    location_to_offset,
    next_line_range,
    offset_to_location,
    previous_line_range,
    trim_trailing_newline,
)
from .todos import COMPLETED, UNCOMPLETED, collect_todos

__all__ = [
    "COMPLETED",
    "UNCOMPLETED",
    "Location",
    "NEWLINE",
    "collect_todos",
    "line_range_for_selection",
    "location_to_offset",
    "next_line_range",
    "offset_to_location",
    "previous_line_range",
    "trim_trailing_newline",
]
