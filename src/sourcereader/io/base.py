"""Base protocol and shared helpers for byte readers."""

from typing import Iterator, Protocol, runtime_checkable


DEFAULT_CHUNK_SIZE = 64 * 1024  # 64 KB


@runtime_checkable
class ByteReader(Protocol):
    """Protocol for sequential, forward-only byte readers."""

    bytes_read: int  # running total

    def read(self, size: int = -1) -> bytes:
        """Return up to `size` bytes (all remaining if negative); b"" at end of stream."""
        ...

    def readinto(self, buffer) -> int:
        """Fill `buffer` and return the number of bytes written; 0 at end of stream."""
        ...

    def close(self) -> None:
        ...

    @property
    def closed(self) -> bool:
        ...


class ReaderBase:
    """Shared bookkeeping for the concrete readers.

    Subclasses implement `_read` and `_readinto` against their stream and
    `_release` to give the resource back.
    """

    def __init__(self):
        self.bytes_read = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self):
        if self._closed:
            raise ValueError("I/O operation on closed reader")

    def read(self, size: int = -1) -> bytes:
        self._check_open()
        data = self._read(-1 if size is None else size)
        self.bytes_read += len(data)
        return data

    def readinto(self, buffer) -> int:
        self._check_open()
        count = self._readinto(buffer) or 0
        self.bytes_read += count
        return count

    def iter_chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield chunks of at most `chunk_size` bytes until end of stream."""
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        while True:
            chunk = self.read(chunk_size)
            if not chunk:
                return
            yield chunk

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __del__(self):
        # Only release if construction got far enough to set the flag
        if not getattr(self, "_closed", True):
            self.close()

    def _read(self, size: int) -> bytes:
        raise NotImplementedError

    def _readinto(self, buffer) -> int:
        raise NotImplementedError

    def _release(self):
        raise NotImplementedError
