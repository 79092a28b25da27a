"""String building, splitting, trimming and tokenizing.

Strings are immutable, so operations that fill a fixed-size C buffer return
the resulting string together with the length the C routine reports.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional


def _single(c: str, what: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"{what} must be a string, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single(sep, "separator")
    return [piece for piece in text.split(sep) if piece]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent.

    Returns ``None`` only when both are ``None``.
    """
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` as if into a buffer of ``size`` bytes.

    Returns the resulting string and the length the append tried to create.
    If ``size`` cannot even hold ``dest`` and its terminator, ``dest`` is left
    unchanged and ``size + len(src)`` is reported.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = len(dest)
    if size < dst_len + 1:
        return dest, size + len(src)
    room = size - dst_len - 1
    return dest + src[:room], dst_len + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` as if into a buffer of ``size`` bytes.

    Returns the copy, truncated to ``size - 1`` characters, and ``len(src)``.
    A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for each character of ``text``.

    A string returned by ``func`` replaces that character; ``None`` keeps it.
    """
    pieces = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end gives an empty string; ``None`` gives ``None``.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


class Tokenizer:
    """Yield the pieces of a string separated by runs of one delimiter."""

    def __init__(self, text: str, delim: str) -> None:
        self._text = text
        self._delim = _single(delim, "delimiter")
        self._pos: Optional[int] = 0

    def next_token(self) -> Optional[str]:
        """Return the next token, or ``None`` once the string is used up."""
        if self._pos is None:
            return None
        text, delim = self._text, self._delim
        pos = self._pos
        while pos < len(text) and text[pos] == delim:
            pos += 1
        if pos >= len(text):
            self._pos = None
            return None
        end = text.find(delim, pos)
        if end < 0:
            self._pos = len(text)
            return text[pos:]
        self._pos = end + 1
        return text[pos:end]

    def __iter__(self) -> Iterator[str]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token