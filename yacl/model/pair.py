"""Pair: the immutable ordered pair stored in relations."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

X = TypeVar("X")
Y = TypeVar("Y")


class Pair(Generic[X, Y]):
    """An immutable, hashable ordered pair (x, y), also called a maplet.

    Two pairs are equal when both components are equal.
    """

    __slots__ = ("_x", "_y", "_hash")

    def __init__(self, x: X, y: Y) -> None:
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)
        object.__setattr__(self, "_hash", None)

    @property
    def x(self) -> X:
        return self._x

    @property
    def y(self) -> Y:
        return self._y

    # Aliases for readers who think of pairs as (first, second).
    first = x
    second = y

    def swap(self) -> Pair[Y, X]:
        """Return the pair with its components exchanged."""
        return Pair(self._y, self._x)

    def __iter__(self) -> Iterator[object]:
        yield self._x
        yield self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash((self._x, self._y)))
        return self._hash

    def __repr__(self) -> str:
        return f"Pair({self._x!r}, {self._y!r})"

    def __str__(self) -> str:
        return f"{self._x}->{self._y}"

    def __reduce__(self) -> tuple[type, tuple[object, object]]:
        return (Pair, (self._x, self._y))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Pair is immutable")
