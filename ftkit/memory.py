"""Byte buffer operations on mutable buffers such as ``bytearray``.

Buffers are indexed by position; where a C routine would hand back a pointer
into a buffer, these functions hand back an index instead. Asking for more
bytes than a buffer holds raises ``ValueError``.
"""

from __future__ import annotations


def _check(buf, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def _byte(c: int) -> int:
    return c & 0xFF


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memset(buf, c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check(buf, n)
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def memcpy(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check(dst, n, "destination")
    _check(src, n, "source")
    dst[:n] = src[:n]
    return dst


def memmove(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check(dst, n, "destination")
    _check(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst, src, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just after
    the copied ``c``, or ``None`` if ``c`` was not among the ``n`` bytes.
    """
    _check(src, n, "source")
    target = _byte(c)
    found = bytes(src[:n]).find(target)
    count = n if found < 0 else found + 1
    _check(dst, count, "destination")
    dst[:count] = src[:count]
    return None if found < 0 else count


def memchr(buf, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    _check(buf, n)
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check(a, n, "first buffer")
    _check(b, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0