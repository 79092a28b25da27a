"""Character, string, number, byte-buffer, linked-list, line-reading and output helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "skip",
    "numbers",
    "memory",
    "strings",
    "transform",
    "lists",
    "lines",
    "output",
]