"""Walk a search path and build the example collection."""

from __future__ import annotations

import logging

from goexamples.core.aggregate import PackageCollection, canonical_package_name
from goexamples.core.config import ScanConfig, relative_package_path
from goexamples.core.grouping import FuncMap, group_declarations
from goexamples.core.types import ParsedPackage
from goexamples.scan.discovery import iter_package_dirs
from goexamples.scan.parser import parse_directory

logger = logging.getLogger(__name__)


def add_package(collection: PackageCollection, package: ParsedPackage, config: ScanConfig) -> str:
    """Group one parsed package and fold it into `collection`.

    Packages without exported identifiers are logged and contribute an
    empty group.
    """
    if package.has_exports:
        func_map = group_declarations(package.declarations)
    else:
        logger.warning("No exported identifiers in %s", canonical_package_name(package.name))
        func_map = FuncMap()
    path = relative_package_path(package.directory, config.package_root)
    return collection.add(package.name, path, func_map)


def collect_examples(config: ScanConfig) -> PackageCollection:
    """Scan `config.search_path` recursively.

    Returns
    -------
    PackageCollection
        Every package found, with ``_test`` packages merged into their base
        package.

    Raises
    ------
    ParseError
        If any Go file under the search path fails to parse.
    """
    collection = PackageCollection()
    for directory in iter_package_dirs(config.search_path, ignore_dirs=config.ignore_dirs):
        for package in parse_directory(directory):
            key = add_package(collection, package, config)
            logger.info("Collected %s (%d declarations)", key, len(package.declarations))
    return collection
