"""Editor protocol implemented over a Textual ``TextArea``."""

from __future__ import annotations

import posixpath
from typing import Dict, List, Mapping, Optional, Tuple

from textual.widgets import TextArea
from textual.widgets.text_area import Selection as TextSelection

from onewriter_actions.buffer import BufferMirror, Range, ensure_range
from onewriter_actions.host.api import Callback, OpenMode
from onewriter_actions.runtime.telemetry import record_event, span
from onewriter_actions.selectors import (
    NEWLINE,
    collect_todos,
    line_range_for_selection,
    location_to_offset,
    offset_to_location,
)


class TextAreaEditor:
    """Bridges flat offsets used by actions to the widget's (row, column) model.

    The widget must be mounted before any edit is applied.
    """

    def __init__(
        self,
        text_area: TextArea,
        *,
        path: str = "Untitled.txt",
        files: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.text_area = text_area
        self.path = path
        self.files: Dict[str, str] = dict(files or {})
        self.open_mode: OpenMode = "edit"
        self._closed = False

    def get_selected_range(self) -> Range:
        text = self._text()
        selection = self.text_area.selection
        anchor = location_to_offset(text, selection.start)
        cursor = location_to_offset(text, selection.end)
        return (min(anchor, cursor), max(anchor, cursor))

    def set_selected_range(self, start: int, end: Optional[int] = None) -> None:
        text = self._text()
        end = start if end is None else end
        ensure_range(len(text), start, end)
        self.text_area.selection = TextSelection(
            offset_to_location(text, start), offset_to_location(text, end)
        )

    def get_selected_line_range(self) -> Range:
        return line_range_for_selection(self._text(), *self.get_selected_range())

    def get_selected_text(self) -> Optional[str]:
        start, end = self.get_selected_range()
        return self._text()[start:end] or None

    def get_text_in_range(self, start: int, end: int) -> str:
        text = self._text()
        ensure_range(len(text), start, end)
        return text[start:end]

    def replace_text_in_range(self, start: int, end: int, replacement: str) -> None:
        text = self._text()
        ensure_range(len(text), start, end)
        with span(
            "textual::replace_range",
            component="adapters",
            metadata={"path": self.path, "start": start, "end": end},
        ):
            self.text_area.replace(
                replacement,
                offset_to_location(text, start),
                offset_to_location(text, end),
            )
            self.set_selected_range(start + len(replacement))

    def replace_selection(self, replacement: str) -> None:
        self.replace_text_in_range(*self.get_selected_range(), replacement)

    def get_text(self) -> str:
        return self._text()

    def set_text(self, text: str) -> None:
        self.text_area.load_text(text)

    def get_folder_path(self) -> str:
        return posixpath.dirname(self.path)

    def get_file_name(self) -> str:
        return posixpath.basename(self.path)

    def get_todos(self, completed: Optional[str] = None) -> List[Tuple[str, str]]:
        return collect_todos(self._text(), completed)

    def new_file(
        self,
        text: str = "",
        name: Optional[str] = None,
        callback: Optional[Callback] = None,
    ) -> None:
        path = posixpath.join(self.get_folder_path(), name or "Untitled.txt")
        self.files[path] = text
        self._switch_to(path, "edit")
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
        self._switch_to(path, mode or "edit")
        if callback is not None:
            callback()

    def close(self) -> None:
        self._stash()
        self._closed = True
        self.text_area.read_only = True

    def is_closed(self) -> bool:
        return self._closed

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            text=self._text(),
            selection=self.get_selected_range(),
            attributes={"path": self.path, "mode": self.open_mode},
        )

    def _text(self) -> str:
        # widget rows joined with "\n" so offsets line up with locations for
        # CRLF documents too
        return NEWLINE.join(self.text_area.document.lines)

    def _stash(self) -> None:
        if not self._closed:
            self.files[self.path] = self._text()

    def _switch_to(self, path: str, mode: OpenMode) -> None:
        self._stash()
        self.path = path
        self.open_mode = mode
        self._closed = False
        self.text_area.load_text(self.files[path])
        self.text_area.read_only = mode == "preview"
        record_event("textual.switch_file", data={"path": path, "mode": mode})


__all__ = ["TextAreaEditor"]
