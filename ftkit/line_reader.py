"""Read a file descriptor or stream one line at a time, through a small buffer."""

from __future__ import annotations

import os
from typing import AnyStr, Callable, Dict, Generic, Iterator, List, Optional, Union

BUFFER_SIZE = 5

_Source = Union[int, "object"]


class LineReader(Generic[AnyStr]):
    """Split what a source yields into lines, keeping the trailing newline.

    ``source`` is either an integer file descriptor, read with ``os.read``,
    or an object with a ``read(size)`` method returning ``bytes`` or ``str``.
    Lines have the type the source returns. The source is read
    ``buffer_size`` units at a time, only as far as the next newline.
    """

    def __init__(self, source: _Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, bool):
            raise TypeError("source must be a file descriptor or a readable object")
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            fd = source
            self._read: Callable[[int], AnyStr] = lambda size: os.read(fd, size)
        else:
            read = getattr(source, "read", None)
            if not callable(read):
                raise TypeError("source must be a file descriptor or a readable object")
            self._read = read
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline(chunk: AnyStr) -> AnyStr:
        return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, newline included, or ``None`` once nothing is left.

        The last line of the input comes back without a newline if it has none.
        Errors raised by the source propagate and drop any buffered data.
        """
        chunks: List[AnyStr] = []
        pending = self._pending
        if pending:
            chunks.append(pending)
            found = self._newline(pending) in pending
        else:
            found = False
        try:
            while not found:
                data = self._read(self.buffer_size)
                if not data:
                    break
                chunks.append(data)
                found = self._newline(data) in data
        except BaseException:
            self._pending = None
            raise
        if not chunks:
            self._pending = None
            return None
        newline = self._newline(chunks[0])
        joined = chunks[0][:0].join(chunks)
        index = joined.find(newline)
        if index < 0:
            self._pending = None
            return joined
        rest = joined[index + 1:]
        self._pending = rest if rest else None
        return joined[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader[bytes]] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from file descriptor ``fd``, or ``None`` at the end.

    Buffered data is kept apart for each descriptor, so several can be read
    in turn. The state of a descriptor is dropped at its end and on error.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"expected a file descriptor, got {type(fd).__name__}")
    if fd < 0:
        raise ValueError(f"invalid file descriptor {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line