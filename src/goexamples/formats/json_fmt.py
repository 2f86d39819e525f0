"""JSON report."""

from __future__ import annotations

import json

from goexamples.core.aggregate import PackageCollection
from goexamples.formats.structured import collection_document


def render_json(collection: PackageCollection, *, sort: bool = True) -> str:
    """Render a collection as an indented JSON document ending in a newline."""
    return json.dumps(collection_document(collection, sort=sort), indent=2, ensure_ascii=False) + "\n"
