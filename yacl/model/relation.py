"""Relation: a set of ordered pairs with relational operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, Mapping, TypeVar

from yacl.model.errors import InvalidArgumentError, TypeMismatchError
from yacl.model.pair import Pair
from yacl.model.sets import Set, members_of, set_operator

if TYPE_CHECKING:
    from yacl.model.function import Function

logger = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")
Z = TypeVar("Z")


def check_pair(item: object) -> Pair:
    """Return item if it is a Pair, else raise TypeMismatchError."""
    if not isinstance(item, Pair):
        raise TypeMismatchError(
            f"Relations hold Pair elements, got {type(item).__name__}"
        )
    return item


def _coerce_pair(item: object) -> Pair:
    """Accept a Pair or a 2-tuple."""
    if isinstance(item, tuple) and len(item) == 2:
        return Pair(item[0], item[1])
    return check_pair(item)


def as_relation(other: object) -> Relation:
    """Return other as a Relation, copying when it is some other pair collection."""
    if isinstance(other, Relation):
        return other
    return Relation(members_of(other))


class Relation(Generic[X, Y]):
    """A binary relation: a set of (x, y) pairs.

    The same x may be related to several y. The pairs live in an owned
    Set; every operation below returns a new Relation (or Set) and leaves
    its operands untouched.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[Pair[X, Y]] | None = None) -> None:
        self._pairs: Set[Pair[X, Y]] = Set()
        if pairs is not None:
            self.update(pairs)

    @classmethod
    def of(cls, *items: Pair[X, Y] | tuple[X, Y]) -> Relation[X, Y]:
        """Build a relation from Pairs or (x, y) tuples."""
        return cls(_coerce_pair(item) for item in items)

    @classmethod
    def zip(cls, xs: Iterable[X], ys: Iterable[Y]) -> Relation[X, Y]:
        """Relate the i-th element of xs to the i-th element of ys.

        Raises InvalidArgumentError if the two collections differ in size.
        """
        xs = list(xs)
        ys = list(ys)
        if len(xs) != len(ys):
            raise InvalidArgumentError(
                f"Collections must be the same size ({len(xs)} != {len(ys)})"
            )
        return cls(Pair(x, y) for x, y in zip(xs, ys))

    @classmethod
    def from_mapping(cls, mapping: Mapping[X, Y]) -> Relation[X, Y]:
        """Build a relation with one pair per key of a mapping."""
        return cls(Pair(k, v) for k, v in mapping.items())

    @property
    def members(self) -> frozenset[Pair[X, Y]]:
        """Return a frozen snapshot of the pairs."""
        return self._pairs.members

    # --- Mutation ---

    def add(self, pair: Pair[X, Y]) -> bool:
        """Add a pair. Returns True if the relation changed."""
        return self._pairs.add(check_pair(pair))

    def add_pair(self, x: X, y: Y) -> bool:
        return self.add(Pair(x, y))

    def update(self, pairs: Iterable[Pair[X, Y]]) -> bool:
        """Add every pair of an iterable. Nothing is added if any item is not a Pair."""
        checked = [check_pair(p) for p in pairs]
        return self._pairs.update(checked)

    def update_mapping(self, mapping: Mapping[X, Y]) -> bool:
        return self.update(Pair(k, v) for k, v in mapping.items())

    def remove(self, pair: Pair[X, Y]) -> bool:
        """Remove a pair. Returns True if it was present."""
        return self._pairs.remove(pair)

    def discard(self, pair: Pair[X, Y]) -> None:
        self._pairs.discard(pair)

    def clear(self) -> None:
        self._pairs.clear()

    def copy(self) -> Relation[X, Y]:
        return Relation(self._pairs)

    __copy__ = copy

    # --- Queries ---

    def contains(self, pair: object) -> bool:
        return pair in self._pairs

    def size(self) -> int:
        return len(self._pairs)

    def is_empty(self) -> bool:
        return self._pairs.is_empty()

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Pair[X, Y]]:
        return iter(self._pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self._pairs

    def __eq__(self, other: object) -> bool:
        try:
            return self._pairs.members == members_of(other)
        except TypeMismatchError:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(sorted(str(p) for p in self._pairs))
        return f"{{{items}}}"

    # --- Set operations on the pairs ---

    def union(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> Relation[X, Y]:
        """Union: pairs in either operand (|).

        A plain Set of pairs is accepted; any non-pair in it raises
        TypeMismatchError.
        """
        return Relation(self._pairs.members | members_of(other))

    def difference(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> Relation[X, Y]:
        """Difference: pairs in self but not in other (-)."""
        return Relation(self._pairs.members - members_of(other))

    def intersection(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> Relation[X, Y]:
        """Intersection: pairs in both operands (&)."""
        return Relation(self._pairs.members & members_of(other))

    def is_subset_of(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> bool:
        return self._pairs.is_subset_of(other)

    def is_proper_subset_of(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> bool:
        return self._pairs.is_proper_subset_of(other)

    def identity(self) -> Relation[Pair[X, Y], Pair[X, Y]]:
        return self._pairs.identity()

    def cartesian_product(self, other: Set[Z]) -> Relation[Pair[X, Y], Z]:
        return self._pairs.cartesian_product(other)

    __or__ = set_operator(union)
    __sub__ = set_operator(difference)
    __and__ = set_operator(intersection)
    __le__ = set_operator(is_subset_of)
    __lt__ = set_operator(is_proper_subset_of)

    # --- Relational operations ---

    def domain(self) -> Set[X]:
        """Return the set of first components."""
        return Set(p.x for p in self._pairs)

    def range(self) -> Set[Y]:
        """Return the set of second components."""
        return Set(p.y for p in self._pairs)

    def domain_restriction(self, s: Set[X]) -> Relation[X, Y]:
        """Keep the pairs whose x is in s."""
        keep = members_of(s)
        return Relation(p for p in self._pairs if p.x in keep)

    def domain_anti_restriction(self, s: Set[X]) -> Relation[X, Y]:
        """Keep the pairs whose x is not in s."""
        drop = members_of(s)
        return Relation(p for p in self._pairs if p.x not in drop)

    def range_restriction(self, t: Set[Y]) -> Relation[X, Y]:
        """Keep the pairs whose y is in t."""
        keep = members_of(t)
        return Relation(p for p in self._pairs if p.y in keep)

    def range_anti_restriction(self, t: Set[Y]) -> Relation[X, Y]:
        """Keep the pairs whose y is not in t."""
        drop = members_of(t)
        return Relation(p for p in self._pairs if p.y not in drop)

    def inverse(self) -> Relation[Y, X]:
        """Swap the components of every pair."""
        return Relation(p.swap() for p in self._pairs)

    def composition(self, other: Relation[Y, Z]) -> Relation[X, Z]:
        """Relational composition.

        (x, z) is in the result when self holds (x, y) and other holds
        (y, z) for some y. Plain nested-loop join.
        """
        right = as_relation(other)
        result: set[Pair] = set()
        for left_pair in self._pairs:
            for right_pair in right:
                if left_pair.y == right_pair.x:
                    result.add(Pair(left_pair.x, right_pair.y))
        return Relation(result)

    def override(self, other: Relation[X, Y]) -> Relation[X, Y]:
        """Override self with other.

        Every x in the domain of other keeps exactly the pairs other gives
        it; every other x keeps the pairs it had in self.
        """
        right = as_relation(other)
        return self.domain_anti_restriction(right.domain()).union(right)

    def transitive_closure(self) -> Relation[X, Y]:
        """Return the smallest transitive relation containing self.

        Composes the accumulated relation with itself until a pass adds
        no new pairs.
        """
        closure = self.copy()
        passes = 0
        while True:
            before = len(closure)
            closure.update(closure.composition(closure))
            passes += 1
            logger.debug(
                "transitive closure pass %d: %d -> %d pairs", passes, before, len(closure)
            )
            if len(closure) == before:
                return closure

    def image(self, s: Set[X]) -> Set[Y]:
        """Return the y values related to some x in s."""
        return self.domain_restriction(s).range()

    def is_function(self) -> bool:
        """True if no x appears in more than one pair."""
        return len(self.domain()) == len(self._pairs)

    def is_injection(self) -> bool:
        """True if self is a function and no two x share a y."""
        return self.is_function() and len(self.domain()) == len(self.range())

    def is_reflexive(self) -> bool:
        """True if every x in the domain is related to itself."""
        return self.domain().identity().is_subset_of(self)

    def to_function(self) -> Function[X, Y]:
        """Promote to a Function. Raises DuplicateKeyError if an x repeats."""
        from yacl.model.function import Function

        return Function.from_relation(self)
