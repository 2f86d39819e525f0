"""Plain-text report, one package block after another."""

from __future__ import annotations

from goexamples.core.aggregate import PackageCollection, ordered_items
from goexamples.core.naming import PACKAGE_OWNER

PACKAGE_LEVEL_LABEL = "Package level example:"


def render_text(collection: PackageCollection, *, sort: bool = True) -> str:
    """Render a collection as tab-indented text.

    Each package produces::

        Package <key>
        \t<owner>
        \t\t<position>\t<example name>

    Package-level examples are listed under ``Package level example:``, and
    an owner without examples gets a ``No Examples for function ...`` line.
    """
    out: list[str] = []
    for key, func_map in ordered_items(collection, sort=sort):
        out.append(f"Package {key}\n")
        for owner, entries in ordered_items(func_map, sort=sort):
            label = PACKAGE_LEVEL_LABEL if owner == PACKAGE_OWNER else owner
            out.append(f"\t{label}\n")
            if entries:
                out.extend(f"\t\t{entry}\n" for entry in entries)
            else:
                out.append(f"\t\tNo Examples for function {owner} in package {key}\n")
    return "".join(out)
