"""YAML report."""

from __future__ import annotations

import yaml

from goexamples.core.aggregate import PackageCollection
from goexamples.formats.structured import collection_document


def render_yaml(collection: PackageCollection, *, sort: bool = True) -> str:
    """Render a collection as a YAML document (key order preserved)."""
    return yaml.safe_dump(
        collection_document(collection, sort=sort),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
