"""Host capability protocols and their in-memory implementations."""

from .api import HTTP, UI, App, Editor, Host, RequestOptions, WebBrowser
from .memory import (
    MemoryApp,
    MemoryEditor,
    MemoryHTTP,
    MemoryUI,
    MemoryWebBrowser,
    memory_host,
)

__all__ = [
    "App",
    "Editor",
    "HTTP",
    "Host",
    "MemoryApp",
    "MemoryEditor",
    "MemoryHTTP",
    "MemoryUI",
    "MemoryWebBrowser",
    "RequestOptions",
    "UI",
    "WebBrowser",
    "memory_host",
]
