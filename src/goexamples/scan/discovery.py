"""Deterministic directory discovery for a scan."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

GO_SUFFIX = ".go"


def iter_package_dirs(root: Path, *, ignore_dirs: Iterable[str] = ()) -> Iterator[Path]:
    """Yield `root` and every directory beneath it, depth-first.

    Entries are visited in name order. Symlinked directories are not
    followed, and directories whose name is in `ignore_dirs` are skipped
    together with their contents (`root` itself is always yielded).

    Raises
    ------
    ValueError
        If `root` is not an existing directory or a directory cannot be listed.
    """
    if not root.is_dir():
        raise ValueError(f"Root must be an existing directory: {root}")
    skip = frozenset(ignore_dirs)

    def walk_dir(directory: Path) -> Iterator[Path]:
        yield directory
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ValueError(f"Failed to list directory: {directory}") from e
        for entry in entries:
            if entry.is_symlink() or not entry.is_dir():
                continue
            if entry.name in skip:
                continue
            yield from walk_dir(entry)

    yield from walk_dir(root)


def go_files(directory: Path) -> list[Path]:
    """Regular ``*.go`` files directly inside `directory`, sorted by name.

    Raises
    ------
    ValueError
        If the directory cannot be listed.
    """
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise ValueError(f"Failed to list directory: {directory}") from e
    return sorted((p for p in entries if p.name.endswith(GO_SUFFIX) and p.is_file()), key=lambda p: p.name)
