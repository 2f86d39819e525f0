"""Command line entry point: ``goexamples path/to/search/``."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import typer

from goexamples.core.config import resolve_config
from goexamples.core.errors import GoExamplesError, UsageError
from goexamples.core.logging import configure_logging
from goexamples.formats import OutputFormat, render
from goexamples.scan.collect import collect_examples

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="goexamples",
    help="List the documentation examples of every Go function, method and package under a path.",
    add_completion=False,
)


def usage_message(command: str) -> str:
    sep = os.sep
    return f'Incorrect usage:\nPlease use "{command} path{sep}to{sep}search{sep}"'


def _check_arguments(paths: list[str]) -> str:
    if len(paths) != 1:
        raise UsageError(f"expected exactly one path, got {len(paths)}")
    return paths[0]


@app.command()
def run(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(None, help="Directory to search, inside GOPATH", show_default=False),
    fmt: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", "-f", help="Report format"),
    discovery_order: bool = typer.Option(
        False, "--discovery-order", help="Keep packages and owners in the order they were found instead of sorting"
    ),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", help="Directory name to skip (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", help="Log progress details"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    """Print every example grouped by package and by the function or method it documents."""
    configure_logging(logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING)

    try:
        search_arg = _check_arguments(paths or [])
    except UsageError:
        typer.echo(usage_message(ctx.find_root().info_name or Path(sys.argv[0]).name))
        raise typer.Exit(code=1)

    try:
        config = resolve_config(search_arg, ignore_dirs=tuple(ignore or ()), sort=not discovery_order)
        collection = collect_examples(config)
    except (GoExamplesError, ValueError) as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)

    typer.echo(render(collection, fmt=fmt, sort=config.sort), nl=False)


def main() -> None:
    app()
