"""String inspection, comparison and copying.

Positions are returned as indices into the string. A search that finds
nothing returns ``None``. As with C strings, the end of a string behaves as a
NUL character, so ``strchr(text, "\\0")`` finds ``len(text)``.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a character, not a bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character, got {type(c).__name__}")


def _code_at(text: str, index: int) -> int:
    """Code point at ``index``, or 0 past the end of ``text``."""
    return ord(text[index]) if index < len(text) else 0


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or ``None`` if absent."""
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or ``None`` if absent."""
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings.

    Returns the difference of the code points of the first characters that
    differ, the end of a string counting as 0, or 0 if the strings are equal.
    """
    for index in range(max(len(s1), len(s2))):
        a, b = _code_at(s1, index), _code_at(s2, index)
        if a != b:
            return a - b
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for index in range(n):
        a, b = _code_at(s1, index), _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True if both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return strcmp(s1, s2) == 0


def strisnum(text: Optional[str]) -> bool:
    """True if ``text`` is an optional minus sign followed only by digits.

    ``None`` is not a number. The sign alone, or an empty string, counts as
    a number because no character in it breaks the rule.
    """
    if text is None:
        return False
    digits = text[1:] if text.startswith("-") else text
    return all("0" <= ch <= "9" for ch in digits)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at 0. Returns ``None`` if there is no match
    that lies wholly within the first ``length`` characters.
    """
    if not little:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def strndup(text: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``text``."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return text[:n]


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return dest + src


def strcpy(src: str) -> str:
    """Return a copy of ``src``."""
    return str(src)