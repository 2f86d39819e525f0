"""Unit tests for FuncMap and declaration grouping."""

from __future__ import annotations

import pytest

from goexamples.core.grouping import FuncMap, format_entry, group_declarations
from goexamples.core.types import Declaration

pytestmark = pytest.mark.unit


class TestFuncMap:
    """Tests for the FuncMap container."""

    def test_ensure_creates_empty_owner(self) -> None:
        """Test that ensure registers an owner without examples."""
        fm = FuncMap()
        fm.ensure("Foo")
        assert fm["Foo"] == ()
        assert len(fm) == 1

    def test_ensure_keeps_existing_examples(self) -> None:
        """Test that ensure does not reset an owner that has examples."""
        fm = FuncMap()
        fm.append("Foo", "a.go:1:1\tExampleFoo")
        fm.ensure("Foo")
        assert fm["Foo"] == ("a.go:1:1\tExampleFoo",)

    def test_append_keeps_order(self) -> None:
        """Test that entries keep their append order."""
        fm = FuncMap()
        fm.append("Foo", "one")
        fm.append("Foo", "two")
        assert list(fm["Foo"]) == ["one", "two"]

    def test_keys_keep_insertion_order(self) -> None:
        """Test that owners iterate in first-insertion order."""
        fm = FuncMap()
        fm.ensure("Zeta")
        fm.append("Alpha", "x")
        fm.ensure("Zeta")
        assert list(fm) == ["Zeta", "Alpha"]

    def test_merge_concatenates(self) -> None:
        """Test that merge appends the other map's lists."""
        left = FuncMap({"Foo": ["a"], "Bar": []})
        right = FuncMap({"Foo": ["b"], "Baz": ["c"], "Bar": []})
        left.merge(right)
        assert dict(left) == {"Foo": ("a", "b"), "Bar": (), "Baz": ("c",)}

    def test_merge_with_itself_doubles_lists(self) -> None:
        """Test that merging identical content doubles lists without new keys."""
        left = FuncMap({"Foo": ["a"], "": ["p"], "Bar": []})
        left.merge(FuncMap({"Foo": ["a"], "": ["p"], "Bar": []}))
        assert sorted(left) == ["", "Bar", "Foo"]
        assert left["Foo"] == ("a", "a")
        assert left[""] == ("p", "p")
        assert left["Bar"] == ()

    def test_documented_and_undocumented(self) -> None:
        """Test the coverage helpers."""
        fm = FuncMap({"Foo": ["a"], "Bar": []})
        assert fm.documented() == ["Foo"]
        assert fm.undocumented() == ["Bar"]

    def test_returned_lists_are_read_only(self) -> None:
        """Test that callers cannot mutate entries through indexing."""
        fm = FuncMap({"Foo": ["a"]})
        with pytest.raises(AttributeError):
            fm["Foo"].append("b")  # type: ignore[attr-defined]


class TestGroupDeclarations:
    """Tests for group_declarations."""

    def test_format_entry(self) -> None:
        """Test the example entry format."""
        assert format_entry("a.go:3:1", "ExampleFoo") == "a.go:3:1\tExampleFoo"

    def test_plain_example_and_test(self, demo_declarations: list[Declaration]) -> None:
        """Test the Foo / ExampleFoo / TestFoo scenario."""
        fm = group_declarations(demo_declarations)
        assert dict(fm) == {"Foo": ("demo_test.go:5:1\tExampleFoo",)}

    def test_example_before_declaration(self) -> None:
        """Test that a later plain declaration keeps earlier examples."""
        fm = group_declarations(
            [
                Declaration("ExampleFoo", "a_test.go:1:1"),
                Declaration("Foo", "a.go:1:1"),
            ]
        )
        assert list(fm) == ["Foo"]
        assert fm["Foo"] == ("a_test.go:1:1\tExampleFoo",)

    def test_all_example_kinds(self) -> None:
        """Test that every example kind lands under its owner."""
        fm = group_declarations(
            [
                Declaration("Example", "x.go:1:1"),
                Declaration("ExampleFoo", "x.go:2:1"),
                Declaration("ExampleFoo_second", "x.go:3:1"),
                Declaration("ExampleBuf_Reset", "x.go:4:1"),
                Declaration("BenchmarkFoo", "x.go:5:1"),
                Declaration("Reset", "y.go:1:1"),
            ]
        )
        assert dict(fm) == {
            "": ("x.go:1:1\tExample",),
            "Foo": ("x.go:2:1\tExampleFoo", "x.go:3:1\tExampleFoo_second"),
            "Buf.Reset": ("x.go:4:1\tExampleBuf_Reset",),
            "Reset": (),
        }

    def test_only_tests(self) -> None:
        """Test that tests and benchmarks alone give an empty map."""
        fm = group_declarations([Declaration("TestA", "t.go:1:1"), Declaration("Benchmark", "t.go:2:1")])
        assert len(fm) == 0

    def test_no_duplicate_keys(self) -> None:
        """Test that repeated discoveries never duplicate an owner."""
        fm = group_declarations(
            [
                Declaration("Foo", "a.go:1:1"),
                Declaration("Foo", "b.go:1:1"),
                Declaration("ExampleFoo", "c.go:1:1"),
            ]
        )
        assert list(fm) == ["Foo"]
        assert fm["Foo"] == ("c.go:1:1\tExampleFoo",)
