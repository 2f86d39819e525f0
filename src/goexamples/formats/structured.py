"""Structured (YAML/JSON) view of a collection with coverage counts."""

from __future__ import annotations

from typing import Any

from goexamples.core.aggregate import PackageCollection, ordered_items


def collection_document(collection: PackageCollection, *, sort: bool = True) -> dict[str, Any]:
    """Build a JSON-serializable document for a collection.

    Returns
    -------
    dict[str, Any]
        ``{"packages": [...], "summary": {...}}`` where every package lists
        its owners with their example entries and per-package coverage
        counts, and the summary aggregates those counts.
    """
    packages: list[dict[str, Any]] = []
    total_owners = 0
    total_documented = 0
    total_undocumented = 0
    for key, func_map in ordered_items(collection, sort=sort):
        owners = [
            {"owner": owner, "examples": list(entries)}
            for owner, entries in ordered_items(func_map, sort=sort)
        ]
        documented = len(func_map.documented())
        undocumented = len(func_map.undocumented())
        total_owners += len(func_map)
        total_documented += documented
        total_undocumented += undocumented
        packages.append(
            {
                "package": key,
                "owners": owners,
                "coverage": {
                    "owners": len(func_map),
                    "documented": documented,
                    "undocumented": undocumented,
                },
            }
        )
    return {
        "packages": packages,
        "summary": {
            "packages": len(packages),
            "owners": total_owners,
            "documented": total_documented,
            "undocumented": total_undocumented,
        },
    }
