"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Reads lines, newline included, from a text or binary stream.

    The stream is read ``buffer_size`` units at a time; whatever follows the
    returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._saved: Optional[AnyStr] = None

    def _newline_at(self) -> int:
        if self._saved is None:
            return -1
        newline = "\n" if isinstance(self._saved, str) else b"\n"
        return self._saved.find(newline)

    def read_line(self) -> Optional[AnyStr]:
        """Next line including its newline, the unterminated tail at the end of
        the stream, or None when nothing is left.

        A read error discards any buffered data and propagates.
        """
        while self._newline_at() < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._saved = None
                raise
            if not chunk:
                break
            self._saved = chunk if self._saved is None else self._saved + chunk
        if not self._saved:
            return None
        end = self._newline_at()
        if end < 0:
            line, self._saved = self._saved, self._saved[:0]
        else:
            line, self._saved = self._saved[: end + 1], self._saved[end + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)