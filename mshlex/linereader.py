"""Line-by-line reading from a file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

DEFAULT_BUFFER_SIZE = 42
MAX_FD = 1024

_NEWLINE = b"\n"


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Data is pulled with ``os.read`` in chunks of ``buffer_size`` bytes and
    kept between calls, so bytes after a newline are not lost. Lines are
    returned as bytes, including their trailing newline when one was read.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError("fd must be an integer")
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._storage = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once no data is left.

        A read error discards any buffered data and propagates as OSError.
        """
        while _NEWLINE not in self._storage:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._storage.clear()
                raise
            if not chunk:
                break
            self._storage += chunk
        if not self._storage:
            return None
        end = self._storage.find(_NEWLINE)
        cut = len(self._storage) if end == -1 else end + 1
        line = bytes(self._storage[:cut])
        del self._storage[:cut]
        return line

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd``, keeping separate state per descriptor.

    Returns None when the descriptor has no more data; its buffered state is
    then dropped. Descriptors must lie in ``0 .. MAX_FD - 1``.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError("fd must be an integer")
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"invalid file descriptor: {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line