"""Extract package names and exported declarations from Go sources.

Parsing uses tree-sitter's Go grammar. Only the top level of each file is
inspected: function and method declarations supply the names to classify,
while type, var and const specs only count towards whether the package
exports anything.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache
from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from goexamples.core.errors import ParseError
from goexamples.core.naming import is_upper
from goexamples.core.types import Declaration, ParsedPackage
from goexamples.scan.discovery import go_files

logger = logging.getLogger(__name__)

FUNC_NODE_TYPES = frozenset({"function_declaration", "method_declaration"})
SPEC_NODE_TYPES = frozenset({"type_spec", "type_alias", "var_spec", "const_spec"})
GENERIC_DECL_TYPES = frozenset({"type_declaration", "var_declaration", "const_declaration"})


@dataclass(frozen=True)
class ParsedFile:
    """Top-level facts about one Go source file.

    Attributes
    ----------
    path
        Absolute path of the file.
    package
        Name from the ``package`` clause.
    declarations
        Exported function and method declarations in source order.
    has_exports
        True if any top-level name in the file is exported.
    """

    path: Path
    package: str
    declarations: tuple[Declaration, ...]
    has_exports: bool


def is_exported(name: str) -> bool:
    """Go's export rule: the first character is an upper-case letter."""
    return is_upper(name[:1])


def format_position(path: Path, node: Node) -> str:
    """``path:line:column`` with 1-based line and byte column, as Go prints it."""
    row, column = node.start_point
    return f"{path}:{row + 1}:{column + 1}"


@cache
def _parser() -> Parser:
    return Parser(Language(tree_sitter_go.language()))


def parse_source(source: bytes, path: Path) -> ParsedFile:
    """Parse the text of a Go file.

    Parameters
    ----------
    source
        Raw file contents.
    path
        Path used in positions and error messages.

    Returns
    -------
    ParsedFile
        Package name and exported declarations.

    Raises
    ------
    ParseError
        If the file is not UTF-8, has syntax errors or lacks a package clause.
    """
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(path, f"invalid UTF-8 at byte {e.start}") from e

    tree = _parser().parse(source)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root)
        where = format_position(path, bad) if bad is not None else str(path)
        raise ParseError(path, f"syntax error at {where}")

    package: str | None = None
    declarations: list[Declaration] = []
    has_exports = False
    for node in root.named_children:
        if node.type == "package_clause":
            package = _package_name(node)
        elif node.type in FUNC_NODE_TYPES:
            name = _node_text(node.child_by_field_name("name"))
            if is_exported(name):
                has_exports = True
                declarations.append(Declaration(name=name, position=format_position(path, node)))
        elif node.type in GENERIC_DECL_TYPES:
            if any(is_exported(n) for n in _spec_names(node)):
                has_exports = True

    if not package:
        raise ParseError(path, "expected 'package' clause")
    return ParsedFile(path=path, package=package, declarations=tuple(declarations), has_exports=has_exports)


def parse_file(path: Path) -> ParsedFile:
    """Read and parse one Go file."""
    try:
        source = path.read_bytes()
    except OSError as e:
        raise ParseError(path, f"cannot read file: {e}") from e
    return parse_source(source, path)


def parse_directory(directory: Path) -> list[ParsedPackage]:
    """Parse every Go file in `directory` and group the results by package.

    Returns
    -------
    list[ParsedPackage]
        One entry per package clause found, sorted by package name. An
        empty list if the directory holds no Go files.

    Raises
    ------
    ParseError
        If any file fails to parse; no partial result is returned.
    """
    files: dict[str, list[ParsedFile]] = {}
    for path in go_files(directory):
        parsed = parse_file(path)
        files.setdefault(parsed.package, []).append(parsed)
        logger.debug("Parsed %s (package %s, %d declarations)", path, parsed.package, len(parsed.declarations))

    packages: list[ParsedPackage] = []
    for name in sorted(files):
        members = files[name]
        packages.append(
            ParsedPackage(
                name=name,
                directory=directory,
                declarations=tuple(d for f in members for d in f.declarations),
                has_exports=any(f.has_exports for f in members),
            )
        )
    return packages


def _package_name(clause: Node) -> str | None:
    for child in clause.named_children:
        if child.type == "package_identifier":
            return _node_text(child)
    return None


def _spec_names(decl: Node) -> Iterator[str]:
    stack = list(decl.named_children)
    while stack:
        node = stack.pop()
        if node.type in SPEC_NODE_TYPES:
            for name in node.children_by_field_name("name"):
                yield _node_text(name)
        else:
            stack.extend(node.named_children)


def _first_error(root: Node) -> Node | None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        stack.extend(reversed(node.children))
    return None


def _node_text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")
