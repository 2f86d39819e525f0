"""Group example declarations under the owner they document."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from goexamples.core.naming import classify
from goexamples.core.types import Declaration


def format_entry(position: str, name: str) -> str:
    """Format an example entry as ``position<TAB>name``."""
    return f"{position}\t{name}"


class FuncMap(Mapping[str, Sequence[str]]):
    """Ordered mapping from owner key to the example entries documenting it.

    Keys are compared as exact, case-sensitive strings:

    - ``""`` is the package itself,
    - ``"Name"`` is a function (or an unqualified method name),
    - ``"Type.Method"`` is a method on ``Type``.

    An owner mapped to an empty list has no known example. Keys keep their
    first insertion order and entries keep their append order.
    """

    def __init__(self, entries: Mapping[str, Iterable[str]] | None = None) -> None:
        self._entries: dict[str, list[str]] = {}
        if entries:
            for owner, values in entries.items():
                self._entries[owner] = list(values)

    def __getitem__(self, owner: str) -> Sequence[str]:
        return tuple(self._entries[owner])

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FuncMap({self._entries!r})"

    def ensure(self, owner: str) -> None:
        """Register `owner` with no examples unless it is already present."""
        self._entries.setdefault(owner, [])

    def append(self, owner: str, entry: str) -> None:
        """Append an example entry to `owner`, registering the owner if needed."""
        self._entries.setdefault(owner, []).append(entry)

    def merge(self, other: FuncMap) -> None:
        """Union `other` into this map, concatenating the lists of shared owners."""
        for owner in other:
            self._entries.setdefault(owner, []).extend(other._entries[owner])

    def documented(self) -> list[str]:
        """Owners with at least one example."""
        return [owner for owner, values in self._entries.items() if values]

    def undocumented(self) -> list[str]:
        """Owners without any example."""
        return [owner for owner, values in self._entries.items() if not values]


def group_declarations(declarations: Iterable[Declaration]) -> FuncMap:
    """Build the FuncMap of one package.

    Parameters
    ----------
    declarations
        Declarations in the order the scanner produced them.

    Returns
    -------
    FuncMap
        Plain declarations as owners (possibly without examples) and every
        example entry filed under the owner derived from its name. Tests and
        benchmarks are dropped.
    """
    func_map = FuncMap()
    for decl in declarations:
        result = classify(decl.name)
        if result.kind.is_excluded or result.owner is None:
            continue
        if result.kind.is_example:
            func_map.append(result.owner, format_entry(decl.position, result.display_name))
        else:
            func_map.ensure(result.owner)
    return func_map
