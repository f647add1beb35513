"""Dataclasses describing registered actions and their outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Literal, Mapping, Optional

from onewriter_actions.host.api import Host

ActionStatus = Literal["applied", "noop"]


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Returned by every action handler."""

    applied: bool
    status: ActionStatus = "applied"
    message: Optional[str] = None

    @classmethod
    def noop(cls, reason: str) -> "ActionResult":
        return cls(applied=False, status="noop", message=reason)


ActionHandler = Callable[[Host], ActionResult]


def normalize_shortcut(shortcut: str) -> str:
    """``"Alt+Up"`` -> ``"alt+up"``; modifiers are sorted ahead of the key."""

    parts = [part.strip().lower() for part in shortcut.split("+") if part.strip()]
    if not parts:
        raise ValueError("shortcut cannot be empty")
    *modifiers, key = parts
    ordered = sorted(dict.fromkeys(modifiers))
    return "+".join([*ordered, key])


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata for a named action."""

    id: str
    handler: ActionHandler
    title: str
    shortcut: Optional[str] = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not self.title:
            raise ValueError("ActionRef title cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if self.shortcut is not None:
            object.__setattr__(self, "shortcut", normalize_shortcut(self.shortcut))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def matches(self, name: str) -> bool:
        key = name.strip().casefold()
        return key in (self.id.casefold(), self.title.casefold())

    def __call__(self, host: Host) -> ActionResult:
        return self.handler(host)


__all__ = [
    "ActionHandler",
    "ActionRef",
    "ActionResult",
    "ActionStatus",
    "normalize_shortcut",
]
