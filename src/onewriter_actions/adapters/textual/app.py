"""Executable Textual app hosting the editor actions."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use onewriter_actions.adapters.textual.app"
    ) from exc

from onewriter_actions.actions import (
    ActionRegistry,
    ActionResult,
    load_default_actions,
)
from onewriter_actions.host.api import Host
from onewriter_actions.runtime import telemetry

from .controller import TextAreaEditor


class ShortcutTextArea(TextArea):
    """TextArea that hands registered shortcuts to ``on_shortcut`` before editing."""

    def __init__(
        self,
        text: str = "",
        *,
        registry: ActionRegistry,
        on_shortcut: Callable[[str], None],
        **kwargs,
    ) -> None:
        super().__init__(text, **kwargs)
        self.registry = registry
        self._on_shortcut = on_shortcut

    def on_key(self, event: events.Key) -> None:
        action = self.registry.for_shortcut(event.key)
        if action is None:
            return
        event.stop()
        event.prevent_default()
        self._on_shortcut(action.id)


class ActionsApp(App[None]):
    """Single-document editor whose shortcuts run registered actions."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(
        self,
        text: str = "",
        *,
        path: Path | None = None,
        registry: ActionRegistry | None = None,
    ) -> None:
        super().__init__()
        self._initial_text = text
        self.path = path
        self.registry = (
            load_default_actions(ActionRegistry()) if registry is None else registry
        )
        self.editor: TextAreaEditor | None = None
        self._status_widget: Static | None = None
        self.last_result: ActionResult | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield ShortcutTextArea(
            self._initial_text,
            registry=self.registry,
            on_shortcut=self.action_run_action,
            id="editor",
        )
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        text_area = self.query_one("#editor", TextArea)
        self.editor = TextAreaEditor(
            text_area, path=str(self.path) if self.path else "Untitled.txt"
        )
        text_area.focus()
        self._update_status("ready")

    def action_run_action(self, action_id: str) -> None:
        if self.editor is None:
            return
        result = self.registry.run(action_id, Host(editor=self.editor))
        self.last_result = result
        self._update_status(f"{action_id}: {result.message or result.status}")

    def action_save(self) -> None:
        if self.editor is None or self.path is None:
            self._update_status("no file to save")
            return
        self.path.write_text(self.editor.get_text(), encoding="utf-8")
        telemetry.record_event("textual.save", data={"path": str(self.path)})
        self._update_status(f"saved {self.path}")

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the editor actions demo.")
    parser.add_argument("path", nargs="?", type=Path, help="File to open")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    path: Path | None = args.path
    text = path.read_text(encoding="utf-8") if path and path.exists() else ""
    ActionsApp(text, path=path).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
