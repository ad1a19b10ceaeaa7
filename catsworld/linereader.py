"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    The stream is read buffer_size units at a time; data past the returned
    line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def readline(self) -> AnyStr | None:
        """Return the next line with its newline, or None at end of stream."""
        try:
            while True:
                pending = self._pending
                if pending is not None:
                    newline = "\n" if isinstance(pending, str) else b"\n"
                    index = pending.find(newline)
                    if index >= 0:
                        line = pending[:index + 1]
                        self._pending = pending[index + 1:]
                        return line
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                self._pending = chunk if pending is None else pending + chunk
        except BaseException:
            self._pending = None
            raise
        line = self._pending
        self._pending = None if line is None else line[:0]
        return line if line else None

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of a text file, newlines kept as written."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))