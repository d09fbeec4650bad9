"""Buffered line reading from a stream, one line per call."""

import sys
from typing import Iterator, Optional, Union

BUFFER_SIZE = 42
MAX_LINE_LENGTH = 100000

Chunk = Union[bytes, str]


class LineReader:
    """Read lines from a stream through a fixed-size read buffer.

    A line ends after a newline, at end of input, or once ``max_length``
    characters have been collected. As with C strings, anything after a NUL
    character in a line is dropped.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE,
                 max_length: int = MAX_LINE_LENGTH):
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        if max_length < 1:
            raise ValueError("max_length must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._max_length = max_length
        self._buffer: Chunk = b""
        self._pos = 0

    def _fill(self) -> bool:
        chunk = self._stream.read(self._buffer_size)
        self._pos = 0
        if not chunk:
            self._buffer = self._buffer[:0]
            return False
        self._buffer = chunk
        return True

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the input is exhausted."""
        parts = []
        length = 0
        newline: Chunk = b"\n"
        while True:
            if self._pos >= len(self._buffer) and not self._fill():
                break
            newline = "\n" if isinstance(self._buffer, str) else b"\n"
            segment = self._buffer[self._pos:self._pos + self._max_length - length]
            end = segment.find(newline)
            if end >= 0:
                segment = segment[:end + 1]
            parts.append(segment)
            self._pos += len(segment)
            length += len(segment)
            if end >= 0 or length >= self._max_length:
                break
        if not length:
            return None
        line = parts[0][:0].join(parts)
        nul = "\0" if isinstance(line, str) else b"\0"
        cut = line.find(nul)
        return line if cut < 0 else line[:cut]

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line


def main(argv=None) -> int:
    """Copy standard input to standard output line by line."""
    out = sys.stdout.buffer
    for line in LineReader(sys.stdin.buffer):
        out.write(line)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())