"""ASCII character classification and case conversion.

Every function takes a character either as a one-character string or as an
integer code point. Only the ASCII ranges count: ``"é"`` is neither alphabetic
nor printable here.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACES = frozenset((9, 10, 11, 12, 13, 32))


def _code(c: Char) -> int:
    """Return the code point of ``c``, checking that it is a single character."""
    if isinstance(c, bool):
        raise TypeError("expected a character, not a bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character, got {type(c).__name__}")


def _like(original: Char, code: int) -> Char:
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def isalpha(c: Char) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: Char) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: Char) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True if ``c`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def isspace(c: Char) -> bool:
    """True if ``c`` is a space, tab, newline, vertical tab, form feed or CR."""
    return _code(c) in _SPACES


def isspacenl(c: Char) -> bool:
    """True if ``c`` is blank space, newline included."""
    return _code(c) in _SPACES


def ishexdigit(c: Char) -> Char | None:
    """Return ``c`` upper-cased if it is a hexadecimal digit, else ``None``."""
    code = _code(c)
    if ord("0") <= code <= ord("9"):
        return c
    upper = _code(toupper(c))
    if ord("A") <= upper <= ord("F"):
        return _like(c, upper)
    return None


def iscount(c: Char, base: str) -> int:
    """Count how often ``c`` occurs in ``base``."""
    target = chr(_code(c))
    return sum(1 for ch in base if ch == target)


def isin(c: Char, base: str) -> bool:
    """True if ``c`` occurs in ``base``."""
    return chr(_code(c)) in base


def iswhere(c: Char, base: str) -> int:
    """Index of the first ``c`` in ``base``, or -1 if absent."""
    return base.find(chr(_code(c)))


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; other characters pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; other characters pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c