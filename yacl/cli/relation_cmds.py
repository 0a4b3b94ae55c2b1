"""CLI subcommands: relational operators over CSV pair files."""

from __future__ import annotations

import sys
from decimal import InvalidOperation

import click

from yacl.data.loader import LoadError, PairTable, coerce_value, load_pairs
from yacl.display.formatter import format_relation, format_set, format_value
from yacl.model.errors import YaclError
from yacl.model.relation import Relation
from yacl.model.sets import Set


def _load(path: str) -> PairTable:
    """Load a pair file, or stdin when path is '-'."""
    try:
        if path == "-":
            return load_pairs(sys.stdin)
        with open(path, newline="") as f:
            return load_pairs(f)
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e}")
    except LoadError as e:
        raise click.ClickException(f"{path}: {e}")


def _values(raw: tuple[str, ...], target: type) -> Set:
    """Turn command-line values into a Set of the column's type."""
    return Set(_coerce_arg(v, target) for v in raw)


def _coerce_arg(value: str, target: type) -> object:
    # A value that does not parse as the column type cannot match; keep it as text.
    try:
        return coerce_value(value, target)
    except (ValueError, InvalidOperation):
        return value


def _echo_relation(rel: Relation, columns: tuple[str, str]) -> None:
    click.echo(format_relation(rel, columns))


file_arg = click.argument("file", type=click.Path(allow_dash=True))
left_arg = click.argument("left", type=click.Path(allow_dash=True))
right_arg = click.argument("right", type=click.Path(allow_dash=True))


@click.command("show")
@file_arg
def show_cmd(file: str) -> None:
    """Print a relation and how it classifies."""
    table = _load(file)
    rel = table.relation
    _echo_relation(rel, table.columns)
    click.echo(f"pairs: {len(rel)}")
    click.echo(f"function: {format_value(rel.is_function())}")
    click.echo(f"injection: {format_value(rel.is_injection())}")
    click.echo(f"reflexive: {format_value(rel.is_reflexive())}")


@click.command("domain")
@file_arg
def domain_cmd(file: str) -> None:
    """Print the set of x values."""
    table = _load(file)
    click.echo(format_set(table.relation.domain(), header=table.columns[0]))


@click.command("range")
@file_arg
def range_cmd(file: str) -> None:
    """Print the set of y values."""
    table = _load(file)
    click.echo(format_set(table.relation.range(), header=table.columns[1]))


@click.command("inverse")
@file_arg
def inverse_cmd(file: str) -> None:
    """Print the relation with every pair swapped."""
    table = _load(file)
    x_col, y_col = table.columns
    _echo_relation(table.relation.inverse(), (y_col, x_col))


@click.command("closure")
@file_arg
def closure_cmd(file: str) -> None:
    """Print the transitive closure."""
    table = _load(file)
    _echo_relation(table.relation.transitive_closure(), table.columns)


@click.command("compose")
@left_arg
@right_arg
def compose_cmd(left: str, right: str) -> None:
    """Print LEFT composed with RIGHT: (x, z) where LEFT has (x, y) and RIGHT has (y, z)."""
    lhs = _load(left)
    rhs = _load(right)
    result = lhs.relation.composition(rhs.relation)
    _echo_relation(result, (lhs.columns[0], rhs.columns[1]))


@click.command("override")
@left_arg
@right_arg
def override_cmd(left: str, right: str) -> None:
    """Print LEFT overridden by RIGHT."""
    lhs = _load(left)
    rhs = _load(right)
    _echo_relation(lhs.relation.override(rhs.relation), lhs.columns)


@click.command("union")
@left_arg
@right_arg
def union_cmd(left: str, right: str) -> None:
    """Print the pairs in either file."""
    lhs = _load(left)
    rhs = _load(right)
    _echo_relation(lhs.relation.union(rhs.relation), lhs.columns)


@click.command("difference")
@left_arg
@right_arg
def difference_cmd(left: str, right: str) -> None:
    """Print the pairs of LEFT that are not in RIGHT."""
    lhs = _load(left)
    rhs = _load(right)
    _echo_relation(lhs.relation.difference(rhs.relation), lhs.columns)


@click.command("intersection")
@left_arg
@right_arg
def intersection_cmd(left: str, right: str) -> None:
    """Print the pairs in both files."""
    lhs = _load(left)
    rhs = _load(right)
    _echo_relation(lhs.relation.intersection(rhs.relation), lhs.columns)


@click.command("restrict")
@file_arg
@click.argument("values", nargs=-1, required=True)
@click.option("--range", "on_range", is_flag=True, default=False, help="Restrict on y instead of x.")
@click.option("--anti", is_flag=True, default=False, help="Drop matching pairs instead of keeping them.")
def restrict_cmd(file: str, values: tuple[str, ...], on_range: bool, anti: bool) -> None:
    """Print the pairs whose x (or y) is among VALUES."""
    table = _load(file)
    rel = table.relation
    s = _values(values, table.y_type if on_range else table.x_type)
    if on_range:
        result = rel.range_anti_restriction(s) if anti else rel.range_restriction(s)
    else:
        result = rel.domain_anti_restriction(s) if anti else rel.domain_restriction(s)
    _echo_relation(result, table.columns)


@click.command("image")
@file_arg
@click.argument("values", nargs=-1, required=True)
def image_cmd(file: str, values: tuple[str, ...]) -> None:
    """Print the y values related to any of VALUES."""
    table = _load(file)
    image = table.relation.image(_values(values, table.x_type))
    click.echo(format_set(image, header=table.columns[1]))


@click.command("get")
@file_arg
@click.argument("key")
def get_cmd(file: str, key: str) -> None:
    """Treat FILE as a function and print the value KEY maps to."""
    table = _load(file)
    try:
        fn = table.relation.to_function()
    except YaclError as e:
        raise click.ClickException(f"{file} is not a function: {e}")
    (x,) = _values((key,), table.x_type)
    pair = fn.get_maplet(x)
    if pair is None:
        raise click.ClickException(f"{key!r} is not mapped")
    click.echo(format_value(pair.y))
