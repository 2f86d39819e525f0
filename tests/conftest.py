"""Shared test fixtures for goexamples tests."""

from __future__ import annotations

import logging
import textwrap
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from goexamples.core.types import Declaration

WriteGo = Callable[[Path, str, str], Path]


@pytest.fixture
def gopath(tmp_path: Path) -> Path:
    """Create an empty GOPATH with a ``src`` directory."""
    root = tmp_path / "go"
    (root / "src").mkdir(parents=True)
    return root


@pytest.fixture
def write_go() -> WriteGo:
    """Return a helper writing dedented Go source into a directory."""

    def _write(directory: Path, filename: str, source: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(textwrap.dedent(source).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def demo_project(gopath: Path, write_go: WriteGo) -> Path:
    """A ``demo`` package with an external ``demo_test`` package beside it."""
    pkg = gopath / "src" / "example.com" / "demo"
    write_go(
        pkg,
        "demo.go",
        """
        package demo

        func Foo() {}

        func Bar() {}

        type Buffer struct{}

        func (b *Buffer) Reset() {}

        func helper() {}
        """,
    )
    write_go(
        pkg,
        "demo_test.go",
        """
        package demo

        import "testing"

        func TestFoo(t *testing.T) {}

        func BenchmarkFoo(b *testing.B) {}

        func ExampleFoo() {}
        """,
    )
    write_go(
        pkg,
        "example_test.go",
        """
        package demo_test

        func Example() {}

        func ExampleFoo_second() {}

        func ExampleBuffer_Reset() {}
        """,
    )
    return pkg


@pytest.fixture
def demo_declarations() -> list[Declaration]:
    """Declarations of a small package, in source order."""
    return [
        Declaration(name="Foo", position="demo.go:3:1"),
        Declaration(name="ExampleFoo", position="demo_test.go:5:1"),
        Declaration(name="TestFoo", position="demo_test.go:9:1"),
    ]


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers the CLI installs so later tests do not write to closed streams."""
    yield
    logger = logging.getLogger("goexamples")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
