"""Character, byte-buffer, string, printf-style formatting, linked-list and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "text",
    "output",
    "transform",
    "printf",
    "linked_list",
    "line_reader",
]