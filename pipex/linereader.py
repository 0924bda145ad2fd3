"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 20


def _newline_index(data: AnyStr) -> int:
    """Index of the first newline in ``data``, or -1 if there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Return lines, each ending in a newline if it had one, from a stream.

    The stream is read in chunks of ``buffer_size``; whatever follows the
    returned line is kept for the next call. Works with text and binary
    streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> None:
        while self._pending is None or _newline_index(self._pending) == -1:
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or ``None`` once the stream has nothing more."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = _newline_index(pending)
        if index == -1:
            self._pending = None
            return pending
        line = pending[: index + 1]
        rest = pending[index + 1:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Iterate over the lines of ``stream``, newline included where present."""
    return iter(LineReader(stream, buffer_size))