"""Records exchanged between the source scanner and the grouping engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Declaration:
    """An exported function or method declaration.

    Attributes
    ----------
    name
        Identifier as written in source (method names are unqualified).
    position
        Human-readable ``path:line:column`` location of the declaration.
    """

    name: str
    position: str


@dataclass(frozen=True)
class ParsedPackage:
    """Declarations of one Go package found in one directory.

    Attributes
    ----------
    name
        Name from the ``package`` clause, possibly with a ``_test`` suffix.
    directory
        Absolute directory holding the package's files.
    declarations
        Exported function and method declarations in file order, then
        source order within each file.
    has_exports
        True if the package declares any exported identifier at all.
    """

    name: str
    directory: Path
    declarations: tuple[Declaration, ...] = field(default_factory=tuple)
    has_exports: bool = False
