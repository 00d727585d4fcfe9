"""Tests for specifier classification."""

import logging

import pytest
from pathlib import Path, PurePosixPath

from sourcereader import classify, FilePath, Url, Stdin
from sourcereader.core.resolver import is_url


class TestClassify:
    """Test the three-way path / URL / stdin dispatch."""

    def test_dash_is_stdin(self):
        """The sentinel maps to Stdin."""
        assert classify("-") == Stdin()

    def test_dash_path_is_stdin(self):
        """A path value equal to the sentinel is normalised the same way."""
        assert classify(Path("-")) == Stdin()
        assert classify(b"-") == Stdin()

    @pytest.mark.parametrize("url", [
        "http://example.com",
        "https://example.com/file",
        "https://example.com:8443/a/b?x=1#frag",
        "HTTPS://EXAMPLE.COM/upper",
        "http://127.0.0.1:8080/",
        "http://[::1]/v6",
        "http://user:pw@host/path",
    ])
    def test_http_urls(self, url):
        """Absolute http(s) URLs map to Url carrying the exact string."""
        source = classify(url)
        assert source == Url(url)
        assert source.url == url

    @pytest.mark.parametrize("specifier", [
        "/tmp/example.txt",
        "relative/file.bin",
        "./file",
        "file.txt",
        "--",
        " -",
        "",
        "ftp://example.com/file",
        "file:///etc/hosts",
        "s3://bucket/key",
        "http:/missing-slash",
        "https://",
        "http//example.com",
        "http://[::1/broken",
        "C:\\Users\\me\\data.bin",
    ])
    def test_everything_else_is_file_path(self, specifier):
        """Unsupported schemes, missing hosts and plain paths map to FilePath."""
        source = classify(specifier)
        assert source == FilePath(specifier)
        assert source.path == specifier

    def test_path_object(self):
        """Path values are accepted interchangeably with strings."""
        assert classify(Path("/tmp/example.txt")) == FilePath("/tmp/example.txt")
        assert classify(PurePosixPath("data/x.bin")) == FilePath("data/x.bin")

    def test_bytes_specifier(self):
        """Bytes specifiers are decoded with the filesystem encoding."""
        assert classify(b"/tmp/example.txt") == FilePath("/tmp/example.txt")
        assert classify(b"https://example.com/") == Url("https://example.com/")

    def test_source_passthrough(self):
        """An already classified source is returned unchanged."""
        source = Url("https://example.com/file")
        assert classify(source) is source

    def test_invalid_type(self):
        """Non-path values are rejected outright."""
        with pytest.raises(TypeError):
            classify(42)
        with pytest.raises(TypeError):
            classify(None)

    def test_pure(self):
        """Classifying twice gives equal values and touches nothing on disk."""
        specifier = "/definitely/not/here.bin"
        assert classify(specifier) == classify(specifier)
        assert not Path(specifier).exists()

    def test_no_log_records(self, caplog):
        """Classification has no side effects, logging included."""
        with caplog.at_level(logging.DEBUG, logger="sourcereader"):
            classify("-")
            classify("https://example.com/file")
            classify("/tmp/example.txt")
        assert caplog.records == []

    def test_from_specifier_alias(self):
        """Source classes expose classify as a constructor."""
        assert FilePath.from_specifier("-") == Stdin()
        assert Stdin.from_specifier("https://a.b/c") == Url("https://a.b/c")


class TestIsUrl:

    def test_schemes(self):
        assert is_url("http://a")
        assert is_url("https://a")
        assert not is_url("ftp://a")
        assert not is_url("mailto:me@example.com")
        assert not is_url("/abs/path")
