"""Report renderers for a `PackageCollection`."""

from __future__ import annotations

from enum import Enum

from goexamples.core.aggregate import PackageCollection
from goexamples.formats.json_fmt import render_json
from goexamples.formats.text_fmt import render_text
from goexamples.formats.yaml_fmt import render_yaml


class OutputFormat(str, Enum):
    """Report output format.

    Attributes
    ----------
    TEXT
        Tab-indented listing, one owner per line.
    YAML
        Structured document with a coverage summary per package.
    JSON
        Same structure as YAML, serialized as JSON.
    """

    TEXT = "text"
    YAML = "yaml"
    JSON = "json"


def render(collection: PackageCollection, *, fmt: OutputFormat, sort: bool = True) -> str:
    """Render a collection in the requested format."""
    if fmt is OutputFormat.YAML:
        return render_yaml(collection, sort=sort)
    if fmt is OutputFormat.JSON:
        return render_json(collection, sort=sort)
    return render_text(collection, sort=sort)
