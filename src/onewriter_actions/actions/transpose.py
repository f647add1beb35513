"""Line transposition: swap the selected lines with their neighbour.

Planning is pure (text in, :class:`LineSwap` out); the host-facing actions
read the editor, plan, and apply the swap with a single replacement followed
by a caret move.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from onewriter_actions.buffer import BufferEdit, Range, TextBuffer, replace_range
from onewriter_actions.host.api import Editor, Host
from onewriter_actions.runtime.telemetry import record_event, span
from onewriter_actions.selectors.lines import (
    NEWLINE,
    next_line_range,
    previous_line_range,
    trim_trailing_newline,
)

from .models import ActionResult


@dataclass(frozen=True, slots=True)
class LineSwap:
    """Replace ``[start, end)`` with ``replacement`` then park the caret."""

    start: int
    end: int
    replacement: str
    caret: int

    def apply(self, buffer: TextBuffer) -> BufferEdit:
        edit = replace_range(buffer, self.start, self.end, self.replacement)
        return BufferEdit(
            buffer=edit.buffer,
            selection=(self.caret, self.caret),
            replaced=edit.replaced,
        )


def plan_move_up(text: str, line_range: Range) -> Optional[LineSwap]:
    """Swap the lines in ``line_range`` with the line above, if any."""

    start, end = trim_trailing_newline(text, line_range)
    previous = previous_line_range(text, start)
    if previous is None:
        return None
    prev_start, prev_end = previous
    current = text[start:end]
    above = text[prev_start:prev_end]
    return LineSwap(
        start=prev_start,
        end=end,
        replacement=f"{current}{NEWLINE}{above}",
        caret=prev_start,
    )


def plan_move_down(text: str, line_range: Range) -> Optional[LineSwap]:
    """Swap the lines in ``line_range`` with the line below, if any.

    The caret follows the moved lines to their new start.
    """

    start, end = trim_trailing_newline(text, line_range)
    following = next_line_range(text, end)
    if following is None:
        return None
    next_start, next_end = following
    current = text[start:end]
    below = text[next_start:next_end]
    return LineSwap(
        start=start,
        end=next_end,
        replacement=f"{below}{NEWLINE}{current}",
        caret=start + len(below) + 1,
    )


Planner = Callable[[str, Range], Optional[LineSwap]]


def _transpose(host: Host, action_id: str, planner: Planner, edge: str) -> ActionResult:
    editor: Editor = host.editor
    line_range = editor.get_selected_line_range()
    with span(
        f"actions::{action_id}",
        component="actions",
        metadata={"line_range": line_range},
    ) as handle:
        swap = planner(editor.get_text(), line_range)
        if swap is None:
            record_event("actions.noop", data={"action": action_id, "reason": edge})
            return ActionResult.noop(edge)
        editor.replace_text_in_range(swap.start, swap.end, swap.replacement)
        editor.set_selected_range(swap.caret)
        handle.add_metadata("caret", swap.caret)
        return ActionResult(applied=True, message=f"caret@{swap.caret}")


def move_line_up(host: Host) -> ActionResult:
    return _transpose(host, "lines.move_up", plan_move_up, "first_line")


def move_line_down(host: Host) -> ActionResult:
    return _transpose(host, "lines.move_down", plan_move_down, "last_line")


__all__ = [
    "LineSwap",
    "move_line_down",
    "move_line_up",
    "plan_move_down",
    "plan_move_up",
]
