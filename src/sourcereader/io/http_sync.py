"""Streaming HTTP reader using requests."""

import logging
from typing import Optional

import requests

from ..core.model import NetworkError, ReadConfig
from .base import ReaderBase

logger = logging.getLogger(__name__)


class HTTPByteReader(ReaderBase):
    """Synchronous reader over the body of a single GET response.

    The request is sent on construction with ``stream=True`` so the caller can
    start reading before the body has arrived.
    """

    def __init__(self, url: str, config: Optional[ReadConfig] = None):
        super().__init__()
        self.url = url
        self.config = config or ReadConfig()
        self.status_code: Optional[int] = None
        self.content_length: Optional[int] = None
        self._pending = b""
        self._response: Optional[requests.Response] = None
        # A caller-supplied session is theirs to close
        self._owns_session = self.config.session is None
        self._session = self.config.session or requests.Session()

        try:
            self._perform_get()
        except Exception:
            self.close()
            raise

    def _perform_get(self):
        """Send the GET request and check the status."""
        try:
            response = self._session.get(
                self.url,
                headers=self.config.request_headers(),
                timeout=self.config.timeout_seconds,
                stream=True,
            )
        except requests.RequestException as e:
            raise NetworkError(f"GET request failed: {e}", url=self.url) from e

        self._response = response
        self.status_code = response.status_code
        if not 200 <= response.status_code < 300:
            raise NetworkError(
                f"GET request failed with status {response.status_code}",
                url=self.url,
                status_code=response.status_code,
            )

        content_length_header = response.headers.get("content-length")
        if content_length_header and content_length_header.isdigit():
            self.content_length = int(content_length_header)

    def _read(self, size: int) -> bytes:
        raw = self._response.raw
        if size < 0:
            data = self._pending + raw.read(decode_content=True)
            self._pending = b""
            return data

        if self._pending:
            data, self._pending = self._pending[:size], self._pending[size:]
            return data

        data = raw.read(size, decode_content=True)
        # Decompression may hand back more than asked for
        if len(data) > size:
            data, self._pending = data[:size], data[size:]
        return data

    def _readinto(self, buffer) -> int:
        view = memoryview(buffer).cast("B")
        data = self._read(len(view))
        view[:len(data)] = data
        return len(data)

    def _release(self):
        if self._response is not None:
            self._response.close()
            self._response = None
        if self._owns_session:
            self._session.close()


def open_http_reader(url: str, config: Optional[ReadConfig] = None) -> HTTPByteReader:
    """Create a streaming reader for an http(s) URL."""
    logger.debug("opening %s", url)
    return HTTPByteReader(url, config)
