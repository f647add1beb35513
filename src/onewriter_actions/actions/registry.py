"""Action registry: named actions, their shortcuts, and dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from onewriter_actions.host.api import Host
from onewriter_actions.runtime.telemetry import span

from .models import ActionRef, ActionResult, normalize_shortcut


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    shortcut_count: int
    revision: int


class ShortcutConflictError(RuntimeError):
    """Raised when a new action claims a shortcut another action owns."""

    def __init__(self, action: ActionRef, existing: ActionRef) -> None:
        super().__init__(
            f"Shortcut '{action.shortcut}' of '{action.id}' is already bound to "
            f"'{existing.id}'"
        )
        self.action = action
        self.existing = existing


class ActionRegistry:
    """Owns action references and the shortcut index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._shortcuts: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def find(self, name: str) -> ActionRef:
        """Look an action up by id or by title, ignoring case."""

        for action in self._actions.values():
            if action.matches(name):
                return action
        raise KeyError(f"Action '{name}' is not registered")

    def for_shortcut(self, shortcut: str) -> Optional[ActionRef]:
        action_id = self._shortcuts.get(normalize_shortcut(shortcut))
        return self._actions[action_id] if action_id else None

    def iter_actions(self) -> Iterator[ActionRef]:
        yield from self._actions.values()

    def register(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "registry::register",
            logger_name=self._logger_name,
            component="registry",
            metadata={"action_id": action.id},
        ) as handle:
            existing = self._actions.get(action.id)
            if existing and not replace:
                raise ValueError(f"Action '{action.id}' already registered")

            if action.shortcut:
                owner_id = self._shortcuts.get(action.shortcut)
                if owner_id and owner_id != action.id:
                    handle.add_metadata("conflict", owner_id)
                    if not replace:
                        raise ShortcutConflictError(action, self._actions[owner_id])
                    self._drop(owner_id)

            if existing:
                self._drop(existing.id)
            self._actions[action.id] = action
            if action.shortcut:
                self._shortcuts[action.shortcut] = action.id
            self._revision += 1
            return action

    def unregister(self, action_id: str) -> Optional[ActionRef]:
        with span(
            "registry::unregister",
            logger_name=self._logger_name,
            component="registry",
            metadata={"action_id": action_id},
        ):
            if action_id not in self._actions:
                return None
            action = self._drop(action_id)
            self._revision += 1
            return action

    def run(self, name: str, host: Host) -> ActionResult:
        action = self.find(name)
        with span(
            "registry::run",
            logger_name=self._logger_name,
            component="registry",
            metadata={"action_id": action.id},
        ) as handle:
            result = action(host)
            handle.add_metadata("status", result.status)
            return result

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            shortcut_count=len(self._shortcuts),
            revision=self._revision,
        )

    def _drop(self, action_id: str) -> ActionRef:
        action = self._actions.pop(action_id)
        if action.shortcut and self._shortcuts.get(action.shortcut) == action_id:
            del self._shortcuts[action.shortcut]
        return action


__all__ = ["ActionRegistry", "RegistryStats", "ShortcutConflictError"]
