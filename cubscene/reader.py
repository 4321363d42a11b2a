"""Line-by-line reading of a text stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

DEFAULT_BUFFER_SIZE = 32


class _Readable(Protocol):
    def read(self, size: int = ..., /) -> str: ...


class LineReader:
    """Read lines from ``stream``, pulling ``buffer_size`` characters at a time.

    Each line keeps its trailing newline. The last line of the stream is
    returned without one if the stream does not end with a newline.
    """

    def __init__(self, stream: _Readable, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        newline = self._pending.find("\n")
        if newline < 0:
            line, self._pending = self._pending, ""
        else:
            line = self._pending[: newline + 1]
            self._pending = self._pending[newline + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line

    def reset(self) -> None:
        """Discard any buffered text that has not been returned yet."""
        self._pending = ""