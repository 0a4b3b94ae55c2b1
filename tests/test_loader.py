"""Tests for CSV pair loading and type inference."""

import io
from decimal import Decimal

import pytest

from yacl.data.loader import LoadError, coerce_value, infer_type, load_pairs
from yacl.model import Pair, Relation


class TestInferType:
    """Test type inference from string values."""

    def test_all_ints(self) -> None:
        assert infer_type(["30", "25"]) is int

    def test_mixed_int_decimal(self) -> None:
        assert infer_type(["1", "2.5"]) is Decimal

    def test_all_bool(self) -> None:
        assert infer_type(["true", "False", "TRUE"]) is bool

    def test_strings(self) -> None:
        assert infer_type(["Alice", "1"]) is str

    def test_empty_values_are_ignored(self) -> None:
        assert infer_type(["", "3"]) is int
        assert infer_type(["", ""]) is str


class TestCoerceValue:
    def test_coerce(self) -> None:
        assert coerce_value("3", int) == 3
        assert coerce_value("2.50", Decimal) == Decimal("2.50")
        assert coerce_value("True", bool) is True
        assert coerce_value("", int) == ""
        assert coerce_value("x", str) == "x"


class TestLoadPairs:
    """Test loading two-column CSV text into relations."""

    def test_basic(self) -> None:
        table = load_pairs(io.StringIO("parent,child\ntom,jane\nfred,mary\n"))
        assert table.columns == ("parent", "child")
        assert table.relation == Relation.of(("tom", "jane"), ("fred", "mary"))

    def test_type_inference_per_column(self) -> None:
        table = load_pairs(io.StringIO("name,age\ntom,30\nfred,25\n"))
        assert Pair("tom", 30) in table.relation
        assert table.x_type is str
        assert table.y_type is int

    def test_duplicate_rows_collapse(self) -> None:
        table = load_pairs(io.StringIO("a,b\n1,2\n1,2\n"))
        assert len(table.relation) == 1

    def test_blank_lines_skipped(self) -> None:
        table = load_pairs(io.StringIO("a,b\n1,2\n\n2,3\n"))
        assert len(table.relation) == 2

    def test_header_is_stripped(self) -> None:
        table = load_pairs(io.StringIO(" a , b \n1,2\n"))
        assert table.columns == ("a", "b")

    def test_empty_input(self) -> None:
        table = load_pairs(io.StringIO(""))
        assert table.columns == ("x", "y")
        assert table.relation.is_empty()

    def test_header_only(self) -> None:
        table = load_pairs(io.StringIO("a,b\n"))
        assert table.columns == ("a", "b")
        assert table.relation.is_empty()

    def test_bad_header(self) -> None:
        with pytest.raises(LoadError, match="exactly two columns"):
            load_pairs(io.StringIO("a,b,c\n1,2,3\n"))

    def test_bad_row(self) -> None:
        with pytest.raises(LoadError, match="Line 3"):
            load_pairs(io.StringIO("a,b\n1,2\n1,2,3\n"))
