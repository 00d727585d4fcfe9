"""Local file reader."""

import errno
import logging

from ..core.model import LocalIOError
from .base import ReaderBase

logger = logging.getLogger(__name__)


class LocalByteReader(ReaderBase):
    """Sequential reader over a file opened in binary mode."""

    def __init__(self, path: str):
        super().__init__()
        self.path = path
        self._file = None
        try:
            self._file = open(path, "rb")
        except OSError as e:
            self._closed = True
            raise LocalIOError(e.errno, e.strerror, e.filename) from e
        except ValueError as e:            # e.g. embedded null byte
            self._closed = True
            raise LocalIOError(errno.EINVAL, str(e), path) from e

    def _read(self, size: int) -> bytes:
        return self._file.read(size)

    def _readinto(self, buffer) -> int:
        return self._file.readinto(buffer)

    def _release(self):
        if self._file is not None:
            self._file.close()
            self._file = None


def open_local_reader(path: str) -> LocalByteReader:
    """Create a reader for a local file path."""
    logger.debug("opening local file %s", path)
    return LocalByteReader(path)
