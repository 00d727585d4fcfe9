"""CLI implementation for sourcereader."""

import json
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

import typer

from . import classify
from .core.model import OpenError, ReadConfig, Source
from .core.util import parse_header, setup_logging, source_asdict
from .io import DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Copy bytes from files, URLs or stdin to stdout.")


def build_config(timeout: Optional[float], headers: Optional[list[str]]) -> ReadConfig:
    """Turn command-line options into a ReadConfig."""
    parsed = {}
    for raw in headers or []:
        try:
            name, value = parse_header(raw)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="'-H' / '--header'")
        parsed[name] = value
    try:
        return ReadConfig(timeout=timeout, headers=parsed)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="'--timeout'")


def copy_source(source: Source, sink: BinaryIO, config: ReadConfig, chunk_size: int) -> int:
    """Stream one source into `sink`; return the number of bytes copied."""
    with source.open(config) as reader:
        for chunk in reader.iter_chunks(chunk_size):
            sink.write(chunk)
        sink.flush()
        return reader.bytes_read


@app.command()
def main(
    sources: list[str] = typer.Argument(None, help="Paths, http(s) URLs, or '-' for stdin"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0, help="HTTP timeout in seconds"),
    header: list[str] = typer.Option(None, "-H", "--header", help="Extra HTTP header, 'Name: value'"),
    classify_only: bool = typer.Option(False, "--classify", help="Print how each source is classified and exit"),
    chunk_size: int = typer.Option(DEFAULT_CHUNK_SIZE, "--chunk-size", min=1, help="Read size in bytes"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging on stderr"),
):
    """Read each source in order and write its bytes out."""
    setup_logging(verbose)
    if not sources:
        typer.echo("No input sources given.", err=True)
        raise typer.Exit(code=1)

    classified = [classify(specifier) for specifier in sources]
    if classify_only:
        for source in classified:
            typer.echo(json.dumps(source_asdict(source)))
        return

    config = build_config(timeout, header)

    sink = open(output, "wb") if output else sys.stdout.buffer
    failed = False
    try:
        for source in classified:
            try:
                copied = copy_source(source, sink, config, chunk_size)
            except OpenError as e:
                typer.echo(f"error: {e}", err=True)
                failed = True
                continue
            logger.debug("copied %d bytes from %s %s", copied, source.kind, source.value)
    finally:
        if output:
            sink.close()

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
