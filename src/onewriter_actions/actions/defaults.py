"""Built-in actions and the shortcuts they ship with."""

from __future__ import annotations

from .models import ActionRef
from .registry import ActionRegistry
from .select import select_current_line
from .transpose import move_line_down, move_line_up

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="lines.move_up",
        handler=move_line_up,
        title="Move Up Current Line",
        shortcut="alt+up",
        description="Swap the current line with the line above",
    ),
    ActionRef(
        id="lines.move_down",
        handler=move_line_down,
        title="Move Down Current Line",
        shortcut="alt+down",
        description="Swap the current line with the line below",
    ),
    ActionRef(
        id="lines.select",
        handler=select_current_line,
        title="Select Current Line",
        shortcut="ctrl+l",
        description="Select the current line without its trailing newline",
    ),
)


def load_default_actions(
    registry: ActionRegistry, *, replace: bool = False
) -> ActionRegistry:
    for action in DEFAULT_ACTIONS:
        registry.register(action, replace=replace)
    return registry


__all__ = ["DEFAULT_ACTIONS", "load_default_actions"]
