"""Exceptions raised while resolving, scanning and parsing a search path."""

from __future__ import annotations

from pathlib import Path


class GoExamplesError(Exception):
    """Base class for all fatal goexamples errors."""


class UsageError(GoExamplesError):
    """The command line was invoked with the wrong number of arguments."""


class PathResolutionError(GoExamplesError):
    """The search path could not be resolved against a package root."""


class ParseError(GoExamplesError):
    """A Go source file could not be parsed.

    Attributes
    ----------
    path
        File that failed to parse.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Could not parse files in {path.parent}: {path}: {message}")
        self.path = path
