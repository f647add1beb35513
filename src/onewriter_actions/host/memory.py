"""In-memory host implementing every capability protocol.

Used by the test-suite and the command-line runner. Callbacks run
synchronously, exactly once, before the originating call returns.
"""

from __future__ import annotations

import posixpath
import re
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlsplit

from onewriter_actions.buffer import (
    BufferMirror,
    Range,
    Selection,
    TextBuffer,
    ensure_range,
    replace_range,
)
from onewriter_actions.runtime.telemetry import record_event, span
from onewriter_actions.selectors import collect_todos, line_range_for_selection

from .api import (
    Callback,
    ConfirmCallback,
    Host,
    HttpCallback,
    HttpError,
    OpenMode,
    PromptCallback,
    RequestOptions,
)

NOT_FOUND: HttpError = (404, "Not Found")


class MemoryEditor:
    """Editor backed by a :class:`TextBuffer` and a dict of stored files.

    ``line_range_includes_newline`` emulates hosts whose line range runs
    through the terminating ``\\n`` of the last selected line.
    """

    def __init__(
        self,
        text: str = "",
        *,
        selection: Range = (0, 0),
        path: str = "Untitled.txt",
        files: Optional[Mapping[str, str]] = None,
        line_range_includes_newline: bool = False,
    ) -> None:
        self.buffer = TextBuffer(text)
        self.selection = Selection()
        self.set_selected_range(*selection)
        self.files: Dict[str, str] = dict(files or {})
        self.path = path
        self.open_mode: OpenMode = "edit"
        self.line_range_includes_newline = line_range_includes_newline
        self._closed = False
        self._untitled = 0

    # selection

    def get_selected_range(self) -> Range:
        return self.selection.as_range()

    def set_selected_range(self, start: int, end: Optional[int] = None) -> None:
        end = start if end is None else end
        ensure_range(len(self.buffer), start, end)
        self.selection.set_range(start, end)

    def get_selected_line_range(self) -> Range:
        return line_range_for_selection(
            self.buffer.text,
            *self.selection.as_range(),
            include_newline=self.line_range_includes_newline,
        )

    def get_selected_text(self) -> Optional[str]:
        if self.selection.is_caret:
            return None
        return self.buffer.slice(*self.selection.as_range())

    # text

    def get_text_in_range(self, start: int, end: int) -> str:
        return self.buffer.slice(start, end)

    def replace_text_in_range(self, start: int, end: int, replacement: str) -> None:
        with span(
            "buffer::replace_range",
            component=True,
            metadata={"path": self.path, "start": start, "end": end},
        ) as handle:
            edit = replace_range(self.buffer, start, end, replacement)
            handle.add_metadata("version", edit.buffer.version)
            self.buffer = edit.buffer
            self.selection.set_range(*edit.selection)

    def replace_selection(self, replacement: str) -> None:
        self.replace_text_in_range(*self.selection.as_range(), replacement)

    def get_text(self) -> str:
        return self.buffer.text

    def set_text(self, text: str) -> None:
        self.buffer = self.buffer.with_text(text)
        start, end = self.selection.as_range()
        self.selection.set_range(min(start, len(text)), min(end, len(text)))

    # files

    def get_folder_path(self) -> str:
        return posixpath.dirname(self.path)

    def get_file_name(self) -> str:
        return posixpath.basename(self.path)

    def get_todos(self, completed: Optional[str] = None) -> List[Tuple[str, str]]:
        return collect_todos(self.buffer.text, completed)

    def new_file(
        self,
        text: str = "",
        name: Optional[str] = None,
        callback: Optional[Callback] = None,
    ) -> None:
        if name is None:
            self._untitled += 1
            name = f"Untitled {self._untitled}.txt"
        path = posixpath.join(self.get_folder_path(), name)
        self._store()
        self.files[path] = text
        self._load(path, "edit")
        record_event("editor.new_file", data={"path": path})
        if callback is not None:
            callback()

    def open_file(
        self,
        path: str,
        mode: Optional[OpenMode] = None,
        callback: Optional[Callback] = None,
    ) -> None:
        if path not in self.files:
            raise FileNotFoundError(path)
        self._store()
        self._load(path, mode or "edit")
        record_event("editor.open_file", data={"path": path, "mode": self.open_mode})
        if callback is not None:
            callback()

    def close(self) -> None:
        self._store()
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            text=self.buffer.text,
            selection=self.selection.as_range(),
            attributes={"path": self.path, "version": str(self.buffer.version)},
        )

    def _store(self) -> None:
        if not self._closed:
            self.files[self.path] = self.buffer.text

    def _load(self, path: str, mode: OpenMode) -> None:
        self.path = path
        self.open_mode = mode
        self.buffer = TextBuffer(self.files[path])
        self.selection.set_caret(0)
        self._closed = False


@dataclass
class MemoryApp:
    clipboard: Optional[str] = None
    dark_mode: bool = False
    opened_urls: List[str] = field(default_factory=list)

    def open_url(self, url: str) -> bool:
        if not urlsplit(url).scheme:
            return False
        self.opened_urls.append(url)
        return True

    def in_dark_mode(self) -> bool:
        return self.dark_mode

    def toggle_dark_mode(self) -> None:
        self.dark_mode = not self.dark_mode

    def get_clipboard(self) -> Optional[str]:
        return self.clipboard

    def set_clipboard(self, text: str) -> None:
        self.clipboard = text


class MemoryUI:
    """Dialogs answered from scripted queues; every message is transcribed.

    Without a scripted answer ``confirm`` reports Cancel and ``prompt``
    returns its default value.
    """

    def __init__(
        self,
        *,
        confirm_answers: Iterable[bool] = (),
        prompt_answers: Iterable[Optional[str]] = (),
    ) -> None:
        self._confirm_answers: Deque[bool] = deque(confirm_answers)
        self._prompt_answers: Deque[Optional[str]] = deque(prompt_answers)
        self.transcript: List[Tuple[str, str]] = []

    def alert(self, message: str, callback: Optional[Callback] = None) -> None:
        self.transcript.append(("alert", message))
        if callback is not None:
            callback()

    def confirm(self, message: str, callback: Optional[ConfirmCallback] = None) -> None:
        self.transcript.append(("confirm", message))
        answer = self._confirm_answers.popleft() if self._confirm_answers else False
        if callback is not None:
            callback(answer)

    def prompt(
        self,
        message: str,
        default_value: str = "",
        callback: Optional[PromptCallback] = None,
    ) -> None:
        self.transcript.append(("prompt", message))
        if self._prompt_answers:
            answer = self._prompt_answers.popleft()
        else:
            answer = default_value
        if callback is not None:
            callback(answer)

    def show_dialog(self, html: str, callback: Optional[Callback] = None) -> None:
        self.transcript.append(("dialog", html))
        if callback is not None:
            callback()


class MemoryHTTP:
    """Replays canned responses keyed by ``(method, url)``."""

    def __init__(self) -> None:
        self._responses: Dict[Tuple[str, str], Tuple[object, Optional[HttpError]]] = {}
        self.requests: List[RequestOptions] = []

    def respond(self, method: str, url: str, data: object) -> None:
        self._responses[(method.upper(), url)] = (data, None)

    def fail(self, method: str, url: str, status: int, message: str) -> None:
        self._responses[(method.upper(), url)] = ({}, (status, message))

    def request(
        self, options: RequestOptions, callback: Optional[HttpCallback] = None
    ) -> None:
        if "url" not in options:
            raise ValueError("request options require a 'url'")
        self.requests.append(options)
        method = str(options.get("type", "GET")).upper()
        data, error = self._responses.get((method, options["url"]), ({}, NOT_FOUND))
        record_event(
            "http.request",
            data={"method": method, "url": options["url"], "error": error},
        )
        if callback is not None:
            callback(data, error)

    def get(
        self,
        url: str,
        data: Optional[Mapping[str, object]] = None,
        callback: Optional[HttpCallback] = None,
    ) -> None:
        self.request({"url": url, "type": "GET", "data": dict(data or {})}, callback)

    def post(
        self,
        url: str,
        data: Optional[Mapping[str, object]] = None,
        callback: Optional[HttpCallback] = None,
    ) -> None:
        self.request({"url": url, "type": "POST", "data": dict(data or {})}, callback)


_TITLE_PATTERN = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)


@dataclass
class MemoryWebBrowser:
    url: str = "about:blank"
    html: str = ""
    history: List[str] = field(default_factory=list)

    def open(self, url: str) -> None:
        self.url = url
        self.html = ""
        self.history.append(url)

    def load_html(self, html: str) -> None:
        self.url = "about:blank"
        self.html = html

    def get_url(self) -> str:
        return self.url

    def get_title(self) -> str:
        match = _TITLE_PATTERN.search(self.html)
        return match.group(1).strip() if match else ""


def memory_host(
    text: str = "",
    *,
    selection: Range = (0, 0),
    line_range_includes_newline: bool = False,
    path: str = "Untitled.txt",
) -> Host:
    """Build a :class:`Host` whose capabilities all live in memory."""

    editor = MemoryEditor(
        text,
        selection=selection,
        path=path,
        line_range_includes_newline=line_range_includes_newline,
    )
    return Host(
        editor=editor,
        app=MemoryApp(),
        ui=MemoryUI(),
        http=MemoryHTTP(),
        web_browser=MemoryWebBrowser(),
    )


__all__ = [
    "MemoryApp",
    "MemoryEditor",
    "MemoryHTTP",
    "MemoryUI",
    "MemoryWebBrowser",
    "NOT_FOUND",
    "memory_host",
]
