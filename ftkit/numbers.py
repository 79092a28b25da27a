"""Integer helpers: digit counts, powers and string conversions."""

from __future__ import annotations

_LLONG_MAX = 2**63 - 1
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def abs_value(n: int) -> int:
    """Return the absolute value of ``n``."""
    return -n if n < 0 else n


def baselen(n: int, base: int) -> int:
    """Number of characters needed to write ``n`` in ``base``.

    A leading minus sign counts as one character. A base below 2 gives 0.
    """
    if base < 2:
        return 0
    if n == 0:
        return 1
    size = 1 if n < 0 else 0
    magnitude = abs(n)
    while magnitude:
        magnitude //= base
        size += 1
    return size


def hexlen(num: int) -> int:
    """Number of hexadecimal digits in ``num`` taken as an unsigned 32-bit value.

    Zero has no digits and gives 0.
    """
    num &= 0xFFFFFFFF
    count = 0
    while num:
        num //= 16
        count += 1
    return count


def nbrlen(n: int) -> int:
    """Number of characters needed to write ``n`` in decimal, sign included."""
    return baselen(n, 10)


def power(nbr: int, exponent: int) -> int:
    """Return ``nbr`` raised to the non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    result = 1
    for _ in range(exponent):
        result *= nbr
    return result


def atoi(text: str) -> int:
    """Parse the leading integer of ``text`` like the C ``atoi``.

    Leading blank space is skipped, one optional sign is read, then digits
    until the first non-digit. If the digits overflow a 64-bit signed value
    the result is -1 for a positive number and 0 for a negative one. The
    result is wrapped into the signed 32-bit range.
    """
    length = len(text)
    i = 0
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and "0" <= text[i] <= "9":
        result = result * 10 + (ord(text[i]) - ord("0"))
        if result > _LLONG_MAX:
            return -1 if sign == 1 else 0
        i += 1
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))