"""Tests for the yacl command line."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from yacl.cli import main


@pytest.fixture
def family(tmp_path: Path) -> Path:
    path = tmp_path / "family.csv"
    path.write_text(
        "parent,child\ntom,jane\nfred,mary\ntom,kim\nmary,eve\neve,ron\n"
    )
    return path


@pytest.fixture
def vehicles(tmp_path: Path) -> Path:
    path = tmp_path / "vehicles.csv"
    path.write_text("owner,vehicle\njane,car\nmary,truck\nkim,train\n")
    return path


def _rows(output: str) -> list[str]:
    """Return the body rows of a printed table, without borders or header."""
    lines = [line for line in output.splitlines() if line.startswith("|")]
    return [
        " ".join(cell.strip() for cell in line.strip().strip("|").split("|"))
        for line in lines[1:]
    ]


class TestShow:
    def test_show(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["show", str(family)])
        assert result.exit_code == 0
        assert "| parent | child |" in result.output
        assert "pairs: 5" in result.output
        assert "function: false" in result.output
        assert "injection: false" in result.output
        assert "reflexive: false" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(main, ["show", str(tmp_path / "nope.csv")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("a,b\n1,2,3\n")
        result = CliRunner().invoke(main, ["show", str(path)])
        assert result.exit_code == 1
        assert "expected 2 fields" in result.output

    def test_stdin(self) -> None:
        result = CliRunner().invoke(main, ["domain", "-"], input="a,b\n1,2\n3,4\n")
        assert result.exit_code == 0
        assert _rows(result.output) == ["1", "3"]

    def test_verbose(self, family: Path) -> None:
        with patch("yacl.cli.logging.basicConfig") as basic_config:
            result = CliRunner().invoke(main, ["--verbose", "closure", str(family)])
        assert result.exit_code == 0
        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG


class TestUnaryCommands:
    def test_domain(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["domain", str(family)])
        assert result.exit_code == 0
        assert "| parent |" in result.output
        assert _rows(result.output) == ["eve", "fred", "mary", "tom"]

    def test_range(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["range", str(family)])
        assert _rows(result.output) == ["eve", "jane", "kim", "mary", "ron"]

    def test_inverse(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["inverse", str(family)])
        assert result.exit_code == 0
        assert "| child | parent |" in result.output
        assert "jane tom" in _rows(result.output)

    def test_closure(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["closure", str(family)])
        assert result.exit_code == 0
        rows = _rows(result.output)
        assert len(rows) == 8
        assert "fred ron" in rows


class TestBinaryCommands:
    def test_compose(self, tmp_path: Path, vehicles: Path) -> None:
        people = tmp_path / "people.csv"
        people.write_text("person,partner\ntom,jane\nfred,mary\ntom,kim\n")
        result = CliRunner().invoke(main, ["compose", str(people), str(vehicles)])
        assert result.exit_code == 0
        assert "| person | vehicle |" in result.output
        assert _rows(result.output) == ["fred truck", "tom car", "tom train"]

    def test_override(self, tmp_path: Path) -> None:
        q = tmp_path / "q.csv"
        q.write_text("x,y\ntom,jane\nfred,mary\ntom,kim\nharry,eve\n")
        r = tmp_path / "r.csv"
        r.write_text("x,y\njane,car\nfred,truck\ntom,train\n")
        result = CliRunner().invoke(main, ["override", str(q), str(r)])
        assert result.exit_code == 0
        assert _rows(result.output) == ["fred truck", "harry eve", "jane car", "tom train"]

    def test_union_difference_intersection(self, tmp_path: Path) -> None:
        a = tmp_path / "a.csv"
        a.write_text("x,y\n1,2\n2,3\n")
        b = tmp_path / "b.csv"
        b.write_text("x,y\n2,3\n3,4\n")
        runner = CliRunner()
        union = runner.invoke(main, ["union", str(a), str(b)])
        assert _rows(union.output) == ["1 2", "2 3", "3 4"]
        difference = runner.invoke(main, ["difference", str(a), str(b)])
        assert _rows(difference.output) == ["1 2"]
        intersection = runner.invoke(main, ["intersection", str(a), str(b)])
        assert _rows(intersection.output) == ["2 3"]

    def test_empty_result(self, tmp_path: Path) -> None:
        a = tmp_path / "a.csv"
        a.write_text("x,y\n1,2\n")
        result = CliRunner().invoke(main, ["intersection", str(a), str(a)])
        assert _rows(result.output) == ["1 2"]
        result = CliRunner().invoke(main, ["difference", str(a), str(a)])
        assert result.output.strip() == "(empty relation)"


class TestRestrictAndImage:
    def test_domain_restriction(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["restrict", str(family), "tom"])
        assert result.exit_code == 0
        assert _rows(result.output) == ["tom jane", "tom kim"]

    def test_domain_anti_restriction(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["restrict", "--anti", str(family), "tom", "mary"])
        assert _rows(result.output) == ["eve ron", "fred mary"]

    def test_range_restriction(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["restrict", "--range", str(family), "kim"])
        assert _rows(result.output) == ["tom kim"]

    def test_range_anti_restriction(self, family: Path) -> None:
        result = CliRunner().invoke(
            main, ["restrict", "--range", "--anti", str(family), "kim", "jane"]
        )
        assert _rows(result.output) == ["eve ron", "fred mary", "mary eve"]

    def test_numeric_values(self, tmp_path: Path) -> None:
        edges = tmp_path / "edges.csv"
        edges.write_text("src,dst\n1,2\n2,3\n")
        result = CliRunner().invoke(main, ["restrict", str(edges), "1"])
        assert _rows(result.output) == ["1 2"]

    def test_image(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["image", str(family), "tom", "fred"])
        assert result.exit_code == 0
        assert "| child |" in result.output
        assert _rows(result.output) == ["jane", "kim", "mary"]


class TestGet:
    def test_get(self, vehicles: Path) -> None:
        result = CliRunner().invoke(main, ["get", str(vehicles), "mary"])
        assert result.exit_code == 0
        assert result.output.strip() == "truck"

    def test_get_unmapped(self, vehicles: Path) -> None:
        result = CliRunner().invoke(main, ["get", str(vehicles), "larry"])
        assert result.exit_code == 1
        assert "is not mapped" in result.output

    def test_get_on_relation(self, family: Path) -> None:
        result = CliRunner().invoke(main, ["get", str(family), "tom"])
        assert result.exit_code == 1
        assert "is not a function" in result.output


class TestColumnTypes:
    """Command-line values take the type of the column they are matched against."""

    def test_restrict_on_text_column(self, tmp_path: Path) -> None:
        agents = tmp_path / "agents.csv"
        agents.write_text("code,name\nA1,alpha\n007,bond\n")
        result = CliRunner().invoke(main, ["restrict", str(agents), "007"])
        assert result.exit_code == 0
        assert _rows(result.output) == ["007 bond"]

    def test_get_on_text_column(self, tmp_path: Path) -> None:
        answers = tmp_path / "answers.csv"
        answers.write_text("code,name\nA1,alpha\n42,answer\n")
        result = CliRunner().invoke(main, ["get", str(answers), "42"])
        assert result.exit_code == 0
        assert result.output.strip() == "answer"

    def test_range_restrict_uses_y_column_type(self, tmp_path: Path) -> None:
        scores = tmp_path / "scores.csv"
        scores.write_text("code,score\nx7,1\ny8,2\n")
        result = CliRunner().invoke(main, ["restrict", "--range", str(scores), "2"])
        assert _rows(result.output) == ["y8 2"]

    def test_image_on_numeric_column(self, tmp_path: Path) -> None:
        edges = tmp_path / "edges.csv"
        edges.write_text("src,dst\n1,2\n2,3\n")
        result = CliRunner().invoke(main, ["image", str(edges), "2"])
        assert _rows(result.output) == ["3"]

    def test_value_not_of_column_type(self, tmp_path: Path) -> None:
        edges = tmp_path / "edges.csv"
        edges.write_text("src,dst\n1,2\n2,3\n")
        result = CliRunner().invoke(main, ["restrict", str(edges), "abc"])
        assert result.exit_code == 0
        assert result.output.strip() == "(empty relation)"
