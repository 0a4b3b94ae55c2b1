"""CSV loading: parse two-column CSV data into a Relation with type inference."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TextIO

from yacl.model.pair import Pair
from yacl.model.relation import Relation

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = ("x", "y")

Scalar = int | Decimal | bool | str


class LoadError(Exception):
    """Raised when pair data cannot be loaded."""


@dataclass(frozen=True)
class PairTable:
    """A loaded relation together with the names of its two columns."""

    columns: tuple[str, str]
    relation: Relation
    x_type: type = str
    y_type: type = str


def load_pairs(source: TextIO) -> PairTable:
    """Read CSV data from a text stream and return its pairs.

    The first row is a header naming the x and y columns. Every later row
    must hold exactly two fields. Blank lines are ignored. Type inference
    is applied per column: int > Decimal > bool > str.
    """
    reader = csv.reader(source)
    try:
        header = next(reader)
    except StopIteration:
        return PairTable(DEFAULT_COLUMNS, Relation())

    if len(header) != 2:
        raise LoadError(f"Header must name exactly two columns, got {len(header)}")
    columns = (header[0].strip(), header[1].strip())

    xs: list[str] = []
    ys: list[str] = []
    for row in reader:
        if not row:
            continue
        if len(row) != 2:
            raise LoadError(
                f"Line {reader.line_num}: expected 2 fields, got {len(row)}"
            )
        xs.append(row[0].strip())
        ys.append(row[1].strip())

    x_type = infer_type(xs)
    y_type = infer_type(ys)
    relation = Relation(
        Pair(coerce_value(x, x_type), coerce_value(y, y_type)) for x, y in zip(xs, ys)
    )
    logger.debug(
        "loaded %d rows (%d distinct pairs) as %s: %s, %s: %s",
        len(xs),
        len(relation),
        columns[0],
        x_type.__name__,
        columns[1],
        y_type.__name__,
    )
    return PairTable(columns, relation, x_type, y_type)


def infer_type(values: list[str]) -> type:
    """Infer the best type for one column's values.

    A column is int if every non-empty value parses as int, Decimal if
    every non-empty value parses as a decimal number, bool if every
    non-empty value is 'true' or 'false' (case-insensitive), else str.
    """
    non_empty = [v for v in values if v != ""]
    if not non_empty:
        return str

    if all(_is_int(v) for v in non_empty):
        return int

    if all(_is_decimal(v) for v in non_empty):
        return Decimal

    if all(v.lower() in ("true", "false") for v in non_empty):
        return bool

    return str


def _is_int(s: str) -> bool:
    try:
        int(s)
        return True
    except ValueError:
        return False


def _is_decimal(s: str) -> bool:
    try:
        Decimal(s)
        return True
    except InvalidOperation:
        return False


def coerce_value(value: str, target_type: type) -> Scalar:
    """Coerce a single string value to the target type."""
    if value == "":
        return value  # keep empty string as-is

    if target_type is int:
        return int(value)
    if target_type is Decimal:
        return Decimal(value)
    if target_type is bool:
        return value.lower() == "true"
    return value
