"""Tests for the ASCII table formatter."""

from yacl.display.formatter import format_relation, format_set, format_value
from yacl.model import Relation, Set


class TestFormatValue:
    def test_values(self) -> None:
        assert format_value("tom") == "tom"
        assert format_value(3) == "3"
        assert format_value(True) == "true"
        assert format_value(False) == "false"


class TestFormatSet:
    def test_empty(self) -> None:
        assert format_set(Set()) == "(empty set)"

    def test_rows_sorted(self) -> None:
        out = format_set(Set.of("tom", "fred"), header="name")
        assert out.splitlines() == [
            "+------+",
            "| name |",
            "+------+",
            "| fred |",
            "| tom  |",
            "+------+",
        ]


class TestFormatRelation:
    def test_empty(self) -> None:
        assert format_relation(Relation()) == "(empty relation)"

    def test_table(self) -> None:
        rel = Relation.of(("tom", "jane"), ("fred", "mary"))
        out = format_relation(rel, ("parent", "child"))
        assert out.splitlines() == [
            "+--------+-------+",
            "| parent | child |",
            "+--------+-------+",
            "| fred   | mary  |",
            "| tom    | jane  |",
            "+--------+-------+",
        ]

    def test_default_columns(self) -> None:
        out = format_relation(Relation.of((1, 2)))
        assert "| x | y |" in out


class TestRowOrder:
    def test_numbers_sort_numerically(self) -> None:
        out = format_set(Set.of(10, 2, 1))
        assert [line.strip("| ") for line in out.splitlines()[3:6]] == ["1", "2", "10"]

    def test_relation_numbers_sort_numerically(self) -> None:
        out = format_relation(Relation.of((10, 1), (2, 1), (2, 0)))
        rows = [line for line in out.splitlines() if line.startswith("|")][1:]
        assert rows == ["| 2  | 0 |", "| 2  | 1 |", "| 10 | 1 |"]

    def test_mixed_types_fall_back_to_text(self) -> None:
        out = format_set(Set.of(2, "b", "a"))
        assert [line.strip("| ") for line in out.splitlines()[3:6]] == ["2", "a", "b"]
