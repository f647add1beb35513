"""Editor actions, the registry that names them, and the default set."""

from .models import ActionHandler, ActionRef, ActionResult, normalize_shortcut
from .registry import ActionRegistry, RegistryStats, ShortcutConflictError
from .select import select_current_line
from .transpose import (
    LineSwap,
    move_line_down,
    move_line_up,
    plan_move_down,
    plan_move_up,
)
from .defaults import DEFAULT_ACTIONS, load_default_actions

__all__ = [
    "ActionHandler",
    "ActionRef",
    "ActionRegistry",
    "ActionResult",
    "DEFAULT_ACTIONS",
    "LineSwap",
    "RegistryStats",
    "ShortcutConflictError",
    "load_default_actions",
    "move_line_down",
    "move_line_up",
    "normalize_shortcut",
    "plan_move_down",
    "plan_move_up",
    "select_current_line",
]
