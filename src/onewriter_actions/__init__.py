"""Line-editing actions written against a mobile text editor's scripting API."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "cli",
    "host",
    "runtime",
    "selectors",
]

__version__ = "0.1.0"
