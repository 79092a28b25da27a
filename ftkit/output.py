"""Write characters, strings and numbers to text streams, with a small printf.

Every writer takes an optional ``stream`` (a text stream with a ``write``
method); when it is omitted, standard output is used. Writers return the
number of characters written.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

Char = Union[str, int]

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_BLANKS = frozenset("\t\n\v\f\r ")
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: Optional[TextIO]) -> int:
    _out(stream).write(text)
    return len(text)


def _as_char(c: Char) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character, not a bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character, got {type(c).__name__}")


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _check_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError(f"a base needs at least two digits, got {base!r}")
    for ch in base:
        if ch in _BLANKS or ch in "+-":
            raise ValueError(f"invalid digit {ch!r} in base {base!r}")
    if len(set(base)) != len(base):
        raise ValueError(f"base {base!r} repeats a digit")


def _digits(value: int, base: str) -> str:
    radix = len(base)
    if value == 0:
        return base[0]
    out = []
    while value:
        value, rem = divmod(value, radix)
        out.append(base[rem])
    return "".join(reversed(out))


def _number_in_base(nbr: int, base: str, spec: str) -> str:
    _check_base(base)
    if spec in ("i", "d"):
        return _digits(nbr & _UINT32_MASK, base)
    if spec in ("u", "p", "x", "X"):
        return _digits(nbr & _UINT64_MASK, base)
    raise ValueError(f"unsupported conversion {spec!r}")


def putchar(c: Char, stream: Optional[TextIO] = None) -> int:
    """Write one character."""
    return _emit(_as_char(c), stream)


def putstr(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text``; ``None`` writes nothing."""
    if text is None:
        return 0
    return _emit(text, stream)


def putendl(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline; ``None`` writes only the newline."""
    return _emit((text or "") + "\n", stream)


def putnbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` in decimal."""
    return _emit(str(_as_int(n, "d")), stream)


def putnbr_base(
    nbr: int, base: str, spec: str, stream: Optional[TextIO] = None
) -> int:
    """Write ``nbr`` using the digits of ``base``.

    With ``spec`` ``"i"`` or ``"d"`` the number is taken as an unsigned 32-bit
    value; with ``"u"``, ``"p"``, ``"x"`` or ``"X"`` as an unsigned 64-bit one.
    A base must have at least two distinct digits and no blanks or signs;
    otherwise, or for any other ``spec``, ``ValueError`` is raised.
    """
    return _emit(_number_in_base(_as_int(nbr, spec), base, spec), stream)


def _convert(spec: str, args: list) -> str:
    if spec == "%":
        return "%"
    if spec not in "diuxXcps":
        return "%" + spec
    if not args:
        raise ValueError(f"not enough arguments for %{spec}")
    value = args.pop(0)
    if spec in ("d", "i"):
        number = _to_int32(_as_int(value, spec))
        sign = "-" if number < 0 else ""
        return sign + _number_in_base(abs(number), _DECIMAL, spec)
    if spec == "u":
        return _digits(_as_int(value, spec) & _UINT32_MASK, _DECIMAL)
    if spec == "x":
        return _digits(_as_int(value, spec) & _UINT32_MASK, _HEX_LOWER)
    if spec == "X":
        return _digits(_as_int(value, spec) & _UINT32_MASK, _HEX_UPPER)
    if spec == "c":
        return _as_char(value)
    if spec == "p":
        if value is None or value == 0:
            return "(nil)"
        return "0x" + _number_in_base(_as_int(value, spec), _HEX_LOWER, spec)
    # spec == "s"
    return "(null)" if value is None else str(value)


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with the conversions ``%d %i %u %x %X %c %p %s %%``.

    ``%s`` of ``None`` gives ``(null)`` and ``%p`` of ``None`` or 0 gives
    ``(nil)``. An unknown conversion is copied as it stands. A lone ``%`` at
    the end of ``fmt``, or too few arguments, raises ``ValueError``; extra
    arguments are ignored.
    """
    if fmt is None:
        raise ValueError("format must not be None")
    remaining = list(args)
    pieces = []
    i = 0
    length = len(fmt)
    while i < length:
        percent = fmt.find("%", i)
        if percent < 0:
            pieces.append(fmt[i:])
            break
        pieces.append(fmt[i:percent])
        if percent + 1 >= length:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_convert(fmt[percent + 1], remaining))
        i = percent + 2
    return "".join(pieces)


def printfd(stream: Optional[TextIO], fmt: str, *args: Any) -> int:
    """Write ``format_string(fmt, *args)`` to ``stream`` and return its length.

    Nothing is written if the format is invalid.
    """
    return _emit(format_string(fmt, *args), stream)