"""Line-by-line reading from a raw file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled with ``os.read`` in chunks of ``buffer_size`` bytes.
    Reading stops as soon as a newline has been buffered, so bytes beyond the
    returned line stay pending for the next call. Each returned line keeps
    its trailing ``b"\\n"`` except a final line without one.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> bytes | None:
        """Return the next line, or ``None`` when nothing is left to read.

        A failed read discards any buffered data and raises OSError.
        """
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n") + 1 or len(self._pending)
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)