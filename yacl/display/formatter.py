"""ASCII table formatter for displaying sets and relations."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from yacl.model.protocols import RelationOps, SetOps

T = TypeVar("T")


def format_value(value: object) -> str:
    """Format a single value for display."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_set(s: SetOps, header: str = "element") -> str:
    """Format a set as a one-column ASCII table, rows sorted."""
    if len(s) == 0:
        return "(empty set)"
    rows = [[format_value(e)] for e in _sorted(s, lambda e: (e,))]
    return _build_table([header], rows)


def format_relation(
    rel: RelationOps, columns: tuple[str, str] = ("x", "y")
) -> str:
    """Format a relation as a two-column ASCII table, rows sorted."""
    if len(rel) == 0:
        return "(empty relation)"
    rows = [
        [format_value(p.x), format_value(p.y)]
        for p in _sorted(rel, lambda p: (p.x, p.y))
    ]
    return _build_table(list(columns), rows)


def _sorted(items: Iterable[T], key: Callable[[T], tuple]) -> list[T]:
    """Sort on the raw values, falling back to their text when they do not compare."""
    items = list(items)
    try:
        return sorted(items, key=key)
    except TypeError:
        return sorted(items, key=lambda item: tuple(format_value(v) for v in key(item)))


def _build_table(headers: list[str], rows: list[list[str]]) -> str:
    """Build an ASCII table from headers and rows."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    sep = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    header = "| " + " | ".join(h.ljust(w) for h, w in zip(headers, widths)) + " |"

    lines = [sep, header, sep]
    for row in rows:
        line = "| " + " | ".join(cell.ljust(w) for cell, w in zip(row, widths)) + " |"
        lines.append(line)
    lines.append(sep)

    return "\n".join(lines)
