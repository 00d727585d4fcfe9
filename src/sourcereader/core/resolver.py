"""Classify input specifiers into FilePath, Url or Stdin sources."""

from __future__ import annotations
import os
from typing import Union
from urllib.parse import urlsplit

from .model import SOURCE_TYPES, STDIN_SENTINEL, FilePath, Source, Stdin, Url

URL_SCHEMES = frozenset({"http", "https"})

Specifier = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _normalize(specifier) -> str:
    """Single conversion boundary: str, bytes and path-likes all become str."""
    try:
        return os.fsdecode(specifier)
    except TypeError:
        raise TypeError(
            f"expected str, bytes or os.PathLike specifier, not {type(specifier).__name__}"
        ) from None


def is_url(text: str) -> bool:
    """True for absolute http(s) URLs with a network location."""
    try:
        parts = urlsplit(text)
    except ValueError:           # e.g. unbalanced brackets in an IPv6 host
        return False
    return parts.scheme.lower() in URL_SCHEMES and bool(parts.netloc)


def classify(specifier: Specifier | Source) -> Source:
    """Map a specifier onto exactly one source variant.

    First match wins: the ``"-"`` sentinel is stdin, an absolute http/https
    URL is a Url, anything else is a FilePath. Never fails for valid input
    types and performs no I/O.
    """
    if isinstance(specifier, SOURCE_TYPES):
        return specifier

    text = _normalize(specifier)
    if text == STDIN_SENTINEL:
        return Stdin()
    if is_url(text):
        return Url(text)
    return FilePath(text)
