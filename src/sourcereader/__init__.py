"""sourcereader - read bytes from a local path, an http(s) URL or stdin ("-")."""

from .core.model import (                                             # re-export
    FilePath, Url, Stdin, Source, ReadConfig,
    OpenError, LocalIOError, NetworkError,
)
from .core.resolver import classify
from .io import ByteReader, open_source, open_reader, read_bytes


__all__ = [
    "classify", "open_source", "open_reader", "read_bytes",
    "FilePath", "Url", "Stdin", "Source", "ReadConfig", "ByteReader",
    "OpenError", "LocalIOError", "NetworkError",
]
