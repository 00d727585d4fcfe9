"""I/O layer for sourcereader - turns a classified source into a byte reader."""

# Re-export these for import convenience
from .base import ByteReader, ReaderBase, DEFAULT_CHUNK_SIZE
from .local import LocalByteReader, open_local_reader
from .http_sync import HTTPByteReader, open_http_reader
from .stdin import StdinByteReader, open_stdin_reader
from ..core.model import FilePath, ReadConfig, Stdin, Url
from ..core.resolver import classify



def open_source(source, config: ReadConfig | None = None) -> ByteReader:
    """Open the resource behind a classified source.

    `config` only affects URLs. Raises LocalIOError or NetworkError if the
    source cannot be opened; stdin always opens.
    """
    if isinstance(source, FilePath):
        return open_local_reader(source.path)
    if isinstance(source, Url):
        return open_http_reader(source.url, config)
    if isinstance(source, Stdin):
        return open_stdin_reader()
    raise TypeError(f"not a source: {source!r}")


def open_reader(specifier, config: ReadConfig | None = None) -> ByteReader:
    """Classify `specifier` and open it."""
    return open_source(classify(specifier), config)


def read_bytes(specifier, config: ReadConfig | None = None) -> bytes:
    """Classify `specifier`, read it to the end and close it."""
    return classify(specifier).read_to_end(config)


__all__ = [
    "ByteReader", "ReaderBase", "DEFAULT_CHUNK_SIZE",
    "LocalByteReader", "HTTPByteReader", "StdinByteReader",
    "open_local_reader", "open_http_reader", "open_stdin_reader",
    "open_source", "open_reader", "read_bytes",
]
