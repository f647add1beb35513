"""Select the current line(s) without the trailing newline."""

from __future__ import annotations

from onewriter_actions.host.api import Host
from onewriter_actions.runtime.telemetry import record_event, span
from onewriter_actions.selectors.lines import trim_trailing_newline

from .models import ActionResult


def select_current_line(host: Host) -> ActionResult:
    editor = host.editor
    line_range = editor.get_selected_line_range()
    with span(
        "actions::lines.select",
        component="actions",
        metadata={"line_range": line_range},
    ):
        start, end = trim_trailing_newline(editor.get_text(), line_range)
        if editor.get_selected_range() == (start, end):
            record_event(
                "actions.noop",
                data={"action": "lines.select", "reason": "already_selected"},
            )
            return ActionResult.noop("already_selected")
        editor.set_selected_range(start, end)
        return ActionResult(applied=True, message=f"selected {start}:{end}")


__all__ = ["select_current_line"]
