from __future__ import annotations
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, ClassVar, Mapping, Optional, Union

if TYPE_CHECKING:
    import requests

    from ..io.base import ByteReader


DEFAULT_USER_AGENT = "source-reader (requests)"
STDIN_SENTINEL = "-"


class OpenError(OSError):
    """Raised when a source cannot be opened for reading."""
    pass


class LocalIOError(OpenError):
    """Raised when a local file cannot be opened (missing, no permission, directory)."""
    pass


class NetworkError(OpenError):
    """Raised on connection, DNS, TLS, timeout or non-success HTTP status."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True, slots=True)
class ReadConfig:
    timeout: Union[float, timedelta, None] = None     # None -> wait forever
    headers: Mapping[str, str] = field(default_factory=dict)
    user_agent: str = DEFAULT_USER_AGENT
    session: Optional["requests.Session"] = None       # caller-owned if given

    def __post_init__(self):
        seconds = self.timeout_seconds
        if seconds is not None and seconds <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")

    @property
    def timeout_seconds(self) -> float | None:
        if isinstance(self.timeout, timedelta):
            return self.timeout.total_seconds()
        return None if self.timeout is None else float(self.timeout)

    def request_headers(self) -> dict[str, str]:
        """Headers for the GET request; explicit headers win over the default User-Agent."""
        merged = {"User-Agent": self.user_agent}
        for name, value in self.headers.items():
            if name.lower() == "user-agent":
                merged.pop("User-Agent", None)
            merged[name] = value
        return merged


class _SourceMixin:
    __slots__ = ()
    kind: ClassVar[str]

    @classmethod
    def from_specifier(cls, specifier) -> "Source":
        from .resolver import classify
        return classify(specifier)

    def open(self, config: ReadConfig | None = None) -> "ByteReader":
        """Acquire the underlying resource and return a reader over it."""
        from ..io import open_source
        return open_source(self, config)

    def read_to_end(self, config: ReadConfig | None = None) -> bytes:
        """Open the source, read every byte and close it again."""
        with self.open(config) as reader:
            return reader.read()


@dataclass(frozen=True, slots=True)
class FilePath(_SourceMixin):
    path: str
    kind: ClassVar[str] = "file"

    @property
    def value(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class Url(_SourceMixin):
    url: str
    kind: ClassVar[str] = "url"

    @property
    def value(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class Stdin(_SourceMixin):
    kind: ClassVar[str] = "stdin"

    @property
    def value(self) -> str:
        return STDIN_SENTINEL


Source = Union[FilePath, Url, Stdin]
SOURCE_TYPES = (FilePath, Url, Stdin)
