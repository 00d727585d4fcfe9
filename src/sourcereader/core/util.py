from __future__ import annotations
import logging
import sys
from typing import Any, Dict, Tuple

from .model import Source


def source_asdict(source: Source) -> Dict[str, Any]:
    """Return a JSON-serialisable description of a classified source."""
    return {"kind": source.kind, "value": source.value}


def parse_header(raw: str) -> Tuple[str, str]:
    """Split a ``Name: value`` string as given on the command line."""
    name, sep, value = raw.partition(":")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"expected 'Name: value', got {raw!r}")
    return name, value.strip()


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger("sourcereader")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
