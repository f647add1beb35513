"""Markdown task-list extraction backing ``Editor.get_todos``."""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

COMPLETED = "completed"
UNCOMPLETED = "uncompleted"

Todo = Tuple[str, str]  # (title, status)

_TODO_PATTERN = re.compile(r"^[ \t]*[-*+][ \t]+\[([ xX])\][ \t]+(.+?)[ \t]*$", re.MULTILINE)


def iter_todos(text: str) -> Iterator[Todo]:
    for match in _TODO_PATTERN.finditer(text):
        mark, title = match.groups()
        yield title, COMPLETED if mark in "xX" else UNCOMPLETED


def collect_todos(text: str, completed: Optional[str] = None) -> List[Todo]:
    """All task items, or only those whose status equals ``completed``."""

    if completed is not None and completed not in (COMPLETED, UNCOMPLETED):
        raise ValueError(f"Unknown to-do status '{completed}'")
    return [todo for todo in iter_todos(text) if completed in (None, todo[1])]


__all__ = ["COMPLETED", "UNCOMPLETED", "Todo", "collect_todos", "iter_todos"]
