"""Advance an index past runs of characters in a string.

Each function returns the first index at or after ``index`` whose character
does not belong to the skipped set, or ``len(text)`` if the rest is skipped.
"""

from __future__ import annotations

_SPACE = frozenset(" \t\r\v\f")
_SPACE_NL = _SPACE | {"\n"}


def _skip_while(text: str, index: int, accept) -> int:
    if index < 0:
        raise ValueError(f"index must not be negative, got {index}")
    end = len(text)
    while index < end and accept(text[index]):
        index += 1
    return index


def skip_char(text: str, index: int, c: str) -> int:
    """Skip consecutive occurrences of the character ``c``."""
    return _skip_while(text, index, lambda ch: ch == c)


def skip_chars(text: str, index: int, base: str) -> int:
    """Skip consecutive characters that appear in ``base``."""
    allowed = frozenset(base)
    return _skip_while(text, index, allowed.__contains__)


def skip_space(text: str, index: int) -> int:
    """Skip spaces, tabs, carriage returns, vertical tabs and form feeds."""
    return _skip_while(text, index, _SPACE.__contains__)


def skip_spacenl(text: str, index: int) -> int:
    """Skip blank space, newlines included."""
    return _skip_while(text, index, _SPACE_NL.__contains__)