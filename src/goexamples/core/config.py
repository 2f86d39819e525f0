"""Run configuration and package-root resolution.

The package root plays the role of ``$GOPATH``: only directories beneath it
are scanned, and package paths are reported relative to ``<root>/src`` so
they read like import paths.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from goexamples.core.errors import PathResolutionError

GOPATH_ENV = "GOPATH"


class ScanConfig(BaseModel):
    """Resolved settings for one run.

    Attributes
    ----------
    search_path
        Absolute directory to scan recursively.
    package_root
        The ``GOPATH`` entry containing `search_path`.
    ignore_dirs
        Directory names that are not descended into.
    sort
        Render packages and owners in lexicographic order instead of
        discovery order.
    """

    search_path: Path
    package_root: Path
    ignore_dirs: tuple[str, ...] = Field(default_factory=tuple)
    sort: bool = True

    model_config = {"frozen": True, "extra": "forbid"}


def package_roots(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Return the configured package roots.

    ``GOPATH`` may list several roots separated by ``os.pathsep``. When it is
    unset, ``~/go`` is used, matching the Go toolchain's default.

    Raises
    ------
    PathResolutionError
        If ``GOPATH`` is unset and the home directory cannot be determined.
    """
    env = os.environ if environ is None else environ
    raw = env.get(GOPATH_ENV, "")
    roots = [Path(p) for p in raw.split(os.pathsep) if p]
    if roots:
        return [r.expanduser().absolute() for r in roots]
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise PathResolutionError("GOPATH is not set and no home directory is available") from e
    return [home / "go"]


def resolve_config(
    search_arg: str,
    *,
    environ: Mapping[str, str] | None = None,
    ignore_dirs: tuple[str, ...] = (),
    sort: bool = True,
) -> ScanConfig:
    """Resolve the command-line path against the configured package roots.

    Parameters
    ----------
    search_arg
        Path given on the command line, absolute or relative.
    environ
        Environment to read ``GOPATH`` from; defaults to ``os.environ``.
    ignore_dirs
        Directory names to skip while walking.
    sort
        Whether reports are rendered in sorted order.

    Returns
    -------
    ScanConfig
        Configuration with absolute search path and matching root.

    Raises
    ------
    PathResolutionError
        If the path cannot be made absolute or lies outside every root.
    """
    try:
        search_path = Path(os.path.abspath(os.path.expanduser(search_arg)))
    except (OSError, ValueError) as e:
        raise PathResolutionError(f"Cannot resolve search path {search_arg!r}: {e}") from e

    for root in package_roots(environ):
        if search_path == root or search_path.is_relative_to(root):
            return ScanConfig(search_path=search_path, package_root=root, ignore_dirs=ignore_dirs, sort=sort)
    raise PathResolutionError("search path is not in GOPATH")


def relative_package_path(directory: Path, root: Path) -> str:
    """Package path of `directory` with the leading ``<root>/src/`` removed.

    Directories outside ``<root>/src`` are reported unchanged.
    """
    src = root / "src"
    if directory != src and directory.is_relative_to(src):
        return directory.relative_to(src).as_posix()
    return str(directory)
