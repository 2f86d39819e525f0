"""Fold packages and their ``_test`` variants into one collection."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TypeVar

from goexamples.core.grouping import FuncMap

logger = logging.getLogger(__name__)

TEST_PACKAGE_SUFFIX = "_test"

V = TypeVar("V")


def canonical_package_name(name: str) -> str:
    """Strip the external test package suffix (``foo_test`` -> ``foo``)."""
    if name.endswith(TEST_PACKAGE_SUFFIX):
        return name[: -len(TEST_PACKAGE_SUFFIX)]
    return name


def package_key(name: str, path: str) -> str:
    """Build the group key ``"<name> in <path>"`` for a package."""
    return f"{canonical_package_name(name)} in {path}"


class PackageCollection(Mapping[str, FuncMap]):
    """Mapping from package group key to the package's FuncMap.

    Group keys have the form ``"<package name> in <package path>"``, with the
    package name already stripped of its ``_test`` suffix. Keys keep the order
    in which packages were first added.
    """

    def __init__(self) -> None:
        self._groups: dict[str, FuncMap] = {}

    def __getitem__(self, key: str) -> FuncMap:
        return self._groups[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def add(self, name: str, path: str, func_map: FuncMap) -> str:
        """Insert a package, merging it into an existing group with the same key.

        Parameters
        ----------
        name
            Package name as declared, ``_test`` suffix included.
        path
            Package path relative to the package root's ``src`` directory.
        func_map
            Examples grouped for this package.

        Returns
        -------
        str
            Key of the group the package landed in.
        """
        key = package_key(name, path)
        existing = self._groups.get(key)
        if existing is None:
            self._groups[key] = func_map
        else:
            logger.debug("Merging %s into existing group %s", name, key)
            existing.merge(func_map)
        return key


def ordered_items(mapping: Mapping[str, V], *, sort: bool) -> list[tuple[str, V]]:
    """Items of `mapping` either sorted by key or in insertion order."""
    items = list(mapping.items())
    if sort:
        items.sort(key=lambda item: item[0])
    return items
