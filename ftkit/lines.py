"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 1024

Line = Union[str, bytes]


class LineReader:
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; a final line without one is
    returned as is. Reads are done ``buffer_size`` characters at a time.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Line] = None
        self._eof = False

    def _newline(self) -> Line:
        return "\n" if isinstance(self._pending, str) else b"\n"

    def _fill(self) -> bool:
        """Read one chunk into the pending data; False at end of stream."""
        if self._eof:
            return False
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            self._eof = True
            return False
        self._pending = chunk if self._pending is None else self._pending + chunk
        return True

    def readline(self) -> Optional[Line]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while self._pending is None or self._newline() not in self._pending:
            if not self._fill():
                break
        if not self._pending:
            return None
        end = self._pending.find(self._newline())
        if end < 0:
            line, self._pending = self._pending, self._pending[:0]
            return line
        line = self._pending[: end + 1]
        self._pending = self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line