"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import Range
from .sync import BufferValidationError


def ensure_offset(length: int, offset: int) -> int:
    if offset < 0 or offset > length:
        raise BufferValidationError(
            f"Offset {offset} outside buffer of length {length}",
            range=(offset, offset),
        )
    return offset


def ensure_range(length: int, start: int, end: int) -> Range:
    ensure_offset(length, start)
    ensure_offset(length, end)
    if start > end:
        raise BufferValidationError(
            f"Range start {start} is after end {end}", range=(start, end)
        )
    return (start, end)
