"""Naming conventions for Go tests, benchmarks and documentation examples.

Go's `go doc` and `go test` tooling attach meaning to function names:

- ``TestXxx`` and ``BenchmarkXxx`` are tests and benchmarks.
- ``Example`` documents the package itself.
- ``ExampleF`` documents the function ``F``.
- ``ExampleT_M`` documents the method ``M`` on type ``T``.
- ``ExampleF_suffix`` (lower-case suffix) is an additional example of ``F``.

A prefix only counts when the character that follows it is not a lower-case
letter, so ``Testify`` is an ordinary function.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum

TEST_PREFIX = "Test"
BENCHMARK_PREFIX = "Benchmark"
EXAMPLE_PREFIX = "Example"

PACKAGE_OWNER = ""


class DeclarationKind(str, Enum):
    """Role of a declaration under the Go naming convention.

    Attributes
    ----------
    TEST
        ``TestXxx``; never reported.
    BENCHMARK
        ``BenchmarkXxx``; never reported.
    PLAIN
        Any other function or method; an owner that examples can document.
    PACKAGE_EXAMPLE
        ``Example``; documents the package.
    FUNCTION_EXAMPLE
        ``ExampleF``; documents function ``F``.
    SUB_EXAMPLE
        ``ExampleF_suffix``; an additional example of function ``F``.
    METHOD_EXAMPLE
        ``ExampleT_M``; documents method ``M`` of type ``T``.
    """

    TEST = "test"
    BENCHMARK = "benchmark"
    PLAIN = "plain"
    PACKAGE_EXAMPLE = "package_example"
    FUNCTION_EXAMPLE = "function_example"
    SUB_EXAMPLE = "sub_example"
    METHOD_EXAMPLE = "method_example"

    @property
    def is_example(self) -> bool:
        return self in _EXAMPLE_KINDS

    @property
    def is_excluded(self) -> bool:
        return self in (DeclarationKind.TEST, DeclarationKind.BENCHMARK)


_EXAMPLE_KINDS = frozenset(
    {
        DeclarationKind.PACKAGE_EXAMPLE,
        DeclarationKind.FUNCTION_EXAMPLE,
        DeclarationKind.SUB_EXAMPLE,
        DeclarationKind.METHOD_EXAMPLE,
    }
)


@dataclass(frozen=True)
class Classification:
    """Result of classifying one declaration name.

    Attributes
    ----------
    kind
        Role of the declaration.
    owner
        Owner key the declaration files under: the function name, a
        ``Type.Method`` pair, or ``""`` for the package. None for tests and
        benchmarks.
    display_name
        Name stored next to the source position in example entries.
    """

    kind: DeclarationKind
    owner: str | None
    display_name: str


def is_lower(char: str) -> bool:
    """Go's `unicode.IsLower`: true only for category Ll, not Other_Lowercase."""
    return bool(char) and unicodedata.category(char[0]) == "Ll"


def is_upper(char: str) -> bool:
    """Go's `unicode.IsUpper`: true only for category Lu."""
    return bool(char) and unicodedata.category(char[0]) == "Lu"


def is_prefixed(name: str, prefix: str) -> bool:
    """Tell whether `name` is `prefix` followed by nothing or a non lower-case character."""
    if not name.startswith(prefix):
        return False
    if len(name) == len(prefix):
        return True
    return not is_lower(name[len(prefix)])


def is_test(name: str) -> bool:
    return is_prefixed(name, TEST_PREFIX)


def is_benchmark(name: str) -> bool:
    return is_prefixed(name, BENCHMARK_PREFIX)


def is_example(name: str) -> bool:
    return is_prefixed(name, EXAMPLE_PREFIX)


def classify(name: str) -> Classification:
    """Classify a function or method name.

    Parameters
    ----------
    name
        Identifier exactly as declared in source.

    Returns
    -------
    Classification
        Kind, owner key and display name for the declaration.
    """
    if is_test(name):
        return Classification(DeclarationKind.TEST, None, name)
    if is_benchmark(name):
        return Classification(DeclarationKind.BENCHMARK, None, name)
    if not is_example(name):
        return Classification(DeclarationKind.PLAIN, name, name)

    segments = name.split("_")
    if len(segments) == 1:
        owner = name[len(EXAMPLE_PREFIX) :]
        kind = DeclarationKind.FUNCTION_EXAMPLE if owner else DeclarationKind.PACKAGE_EXAMPLE
        return Classification(kind, owner, name)

    type_part = segments[0][len(EXAMPLE_PREFIX) :]
    member = segments[1]
    if is_upper(member[:1]):
        # Example_Method has no type to attach to; file it under the package.
        owner = f"{type_part}.{member}" if type_part else PACKAGE_OWNER
        return Classification(DeclarationKind.METHOD_EXAMPLE, owner, name)
    # Every ExampleF_suffix shares the key F; only the display name differs.
    return Classification(DeclarationKind.SUB_EXAMPLE, type_part, name)
