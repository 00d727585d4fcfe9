"""Reader over the process's standard input."""

import logging
import sys
from typing import BinaryIO, Optional

from .base import ReaderBase

logger = logging.getLogger(__name__)


def _binary_stdin() -> BinaryIO:
    # Text wrappers expose the raw bytes via .buffer; a replaced stdin might not
    return getattr(sys.stdin, "buffer", sys.stdin)


class StdinByteReader(ReaderBase):
    """Reader over stdin. Closing it leaves the process-wide stream open."""

    def __init__(self, stream: Optional[BinaryIO] = None):
        super().__init__()
        self._stream = stream if stream is not None else _binary_stdin()

    def _read(self, size: int) -> bytes:
        return self._stream.read(size)

    def _readinto(self, buffer) -> int:
        if hasattr(self._stream, "readinto"):
            return self._stream.readinto(buffer)
        view = memoryview(buffer).cast("B")
        data = self._stream.read(len(view))
        view[:len(data)] = data
        return len(data)

    def _release(self):
        self._stream = None


def open_stdin_reader() -> StdinByteReader:
    """Create a reader for stdin; this cannot fail."""
    logger.debug("opening stdin")
    return StdinByteReader()
