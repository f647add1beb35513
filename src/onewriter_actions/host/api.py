"""Capability interfaces for the host application's scripting API.

Actions never reach for ambient globals; they receive a :class:`Host`
bundling one implementation of each protocol below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Literal, Mapping, Optional, Protocol, Tuple, TypedDict

from onewriter_actions.buffer import Range

OpenMode = Literal["edit", "preview"]
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
HttpError = Tuple[int, str]  # (status, message)

Callback = Callable[[], None]
ConfirmCallback = Callable[[bool], None]
PromptCallback = Callable[[Optional[str]], None]
HttpCallback = Callable[[object, Optional[HttpError]], None]


class RequestOptions(TypedDict, total=False):
    url: str
    type: HttpMethod
    data: Mapping[str, object]
    headers: Mapping[str, str]
    username: str
    password: str


class Editor(Protocol):
    """Text editor surface: selection, text access and open file management."""

    def get_selected_range(self) -> Range:
        ...

    def set_selected_range(self, start: int, end: Optional[int] = None) -> None:
        """Select ``[start, end)``; omit ``end`` to move the caret to ``start``."""
        ...

    def get_selected_line_range(self) -> Range:
        """Range of the lines that include the current selection."""
        ...

    def get_selected_text(self) -> Optional[str]:
        ...

    def get_text_in_range(self, start: int, end: int) -> str:
        ...

    def replace_text_in_range(self, start: int, end: int, replacement: str) -> None:
        ...

    def replace_selection(self, replacement: str) -> None:
        ...

    def get_text(self) -> str:
        ...

    def set_text(self, text: str) -> None:
        ...

    def get_folder_path(self) -> str:
        ...

    def get_file_name(self) -> str:
        ...

    def get_todos(self, completed: Optional[str] = None) -> List[Tuple[str, str]]:
        """``(title, status)`` pairs, optionally filtered by status."""
        ...

    def new_file(
        self,
        text: str = "",
        name: Optional[str] = None,
        callback: Optional[Callback] = None,
    ) -> None:
        ...

    def open_file(
        self,
        path: str,
        mode: Optional[OpenMode] = None,
        callback: Optional[Callback] = None,
    ) -> None:
        ...

    def close(self) -> None:
        ...

    def is_closed(self) -> bool:
        ...


class App(Protocol):
    def open_url(self, url: str) -> bool:
        ...

    def in_dark_mode(self) -> bool:
        ...

    def toggle_dark_mode(self) -> None:
        ...

    def get_clipboard(self) -> Optional[str]:
        ...

    def set_clipboard(self, text: str) -> None:
        ...


class UI(Protocol):
    """Dialogs; callbacks fire once when the dialog is dismissed."""

    def alert(self, message: str, callback: Optional[Callback] = None) -> None:
        ...

    def confirm(self, message: str, callback: Optional[ConfirmCallback] = None) -> None:
        ...

    def prompt(
        self,
        message: str,
        default_value: str = "",
        callback: Optional[PromptCallback] = None,
    ) -> None:
        ...

    def show_dialog(self, html: str, callback: Optional[Callback] = None) -> None:
        ...


class HTTP(Protocol):
    def request(
        self, options: RequestOptions, callback: Optional[HttpCallback] = None
    ) -> None:
        ...

    def get(
        self,
        url: str,
        data: Optional[Mapping[str, object]] = None,
        callback: Optional[HttpCallback] = None,
    ) -> None:
        ...

    def post(
        self,
        url: str,
        data: Optional[Mapping[str, object]] = None,
        callback: Optional[HttpCallback] = None,
    ) -> None:
        ...


class WebBrowser(Protocol):
    def open(self, url: str) -> None:
        ...

    def load_html(self, html: str) -> None:
        ...

    def get_url(self) -> str:
        ...

    def get_title(self) -> str:
        ...


@dataclass(slots=True)
class Host:
    """Everything an action may call into. Only ``editor`` is mandatory."""

    editor: Editor
    app: Optional[App] = None
    ui: Optional[UI] = None
    http: Optional[HTTP] = None
    web_browser: Optional[WebBrowser] = None


__all__ = [
    "App",
    "Callback",
    "ConfirmCallback",
    "Editor",
    "HTTP",
    "Host",
    "HttpCallback",
    "HttpError",
    "HttpMethod",
    "OpenMode",
    "PromptCallback",
    "RequestOptions",
    "UI",
    "WebBrowser",
]
