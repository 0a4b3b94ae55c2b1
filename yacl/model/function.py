"""Function: a relation that maps each x to at most one y."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Mapping, TypeVar

from yacl.model.errors import DuplicateKeyError, InvalidArgumentError
from yacl.model.pair import Pair
from yacl.model.relation import Relation, X, Y, Z, as_relation, check_pair
from yacl.model.sets import Set, set_operator

V = TypeVar("V")


class Function(Generic[X, Y]):
    """A partial function: a relation in which every x is unique.

    Wraps a Relation and guards every mutation so the uniqueness of x
    always holds. add() is strict and refuses an x that is already
    mapped; put() is the way to replace a mapping.

    Lookups scan the pairs; no index is kept.
    """

    __slots__ = ("_relation",)

    def __init__(self, pairs: Iterable[Pair[X, Y]] | None = None) -> None:
        self._relation: Relation[X, Y] = Relation()
        if pairs is not None:
            self.update(pairs)

    @classmethod
    def of(cls, *items: Pair[X, Y] | tuple[X, Y]) -> Function[X, Y]:
        """Build a function from Pairs or (x, y) tuples."""
        return cls(Relation.of(*items))

    @classmethod
    def zip(cls, xs: Iterable[X], ys: Iterable[Y]) -> Function[X, Y]:
        """Map the distinct elements of xs, in first-seen order, onto ys.

        Raises InvalidArgumentError unless the number of distinct xs
        equals the number of ys.
        """
        keys = list(dict.fromkeys(xs))
        values = list(ys)
        if len(keys) != len(values):
            raise InvalidArgumentError(
                "The number of unique elements in xs must equal the number of elements "
                f"in ys ({len(keys)} != {len(values)})"
            )
        return cls(Pair(k, v) for k, v in zip(keys, values))

    @classmethod
    def from_mapping(cls, mapping: Mapping[X, Y]) -> Function[X, Y]:
        return cls(Pair(k, v) for k, v in mapping.items())

    @classmethod
    def from_relation(cls, relation: Relation[X, Y]) -> Function[X, Y]:
        """Copy a relation into a function. Raises DuplicateKeyError if an x repeats."""
        return cls(as_relation(relation))

    @classmethod
    def _wrap(cls, relation: Relation[X, Y]) -> Function[X, Y]:
        # Caller guarantees relation is already a function.
        fn = cls()
        fn._relation = relation
        return fn

    @property
    def members(self) -> frozenset[Pair[X, Y]]:
        return self._relation.members

    # --- Mutation ---

    def add(self, pair: Pair[X, Y]) -> bool:
        """Add a pair whose x is not yet mapped.

        Raises DuplicateKeyError if x is already mapped, even to the same y.
        """
        check_pair(pair)
        if self.get_maplet(pair.x) is not None:
            raise DuplicateKeyError(pair.x)
        return self._relation.add(pair)

    def add_pair(self, x: X, y: Y) -> bool:
        return self.add(Pair(x, y))

    def update(self, pairs: Iterable[Pair[X, Y]]) -> bool:
        """Strictly add every pair. Nothing is added if any x would repeat."""
        batch = Relation(pairs)
        seen = self._relation.domain()
        for pair in batch:
            if not seen.add(pair.x):
                raise DuplicateKeyError(pair.x)
        return self._relation.update(batch)

    def update_mapping(self, mapping: Mapping[X, Y]) -> bool:
        return self.update(Pair(k, v) for k, v in mapping.items())

    def put(self, x: X, y: Y) -> Y | None:
        """Map x to y, replacing any existing mapping.

        Returns the y previously mapped to x, or None if x was unmapped.
        """
        return self.put_maplet(Pair(x, y))

    def put_maplet(self, pair: Pair[X, Y]) -> Y | None:
        check_pair(pair)
        existing = self.get_maplet(pair.x)
        if existing is not None:
            self._relation.remove(existing)
        self._relation.add(pair)
        return existing.y if existing is not None else None

    def remove(self, pair: Pair[X, Y]) -> bool:
        return self._relation.remove(pair)

    def remove_key(self, x: X) -> Y | None:
        """Unmap x. Returns the y it was mapped to, or None."""
        existing = self.get_maplet(x)
        if existing is None:
            return None
        self._relation.remove(existing)
        return existing.y

    def discard(self, pair: Pair[X, Y]) -> None:
        self._relation.discard(pair)

    def clear(self) -> None:
        self._relation.clear()

    def copy(self) -> Function[X, Y]:
        return Function._wrap(self._relation.copy())

    __copy__ = copy

    # --- Lookup ---

    def get_maplet(self, x: X) -> Pair[X, Y] | None:
        """Return the pair whose first component is x, or None."""
        for pair in self._relation:
            if pair.x == x:
                return pair
        return None

    def get_value(self, x: X, default: V | None = None) -> Y | V | None:
        """Return the y mapped to x, or default when x is unmapped."""
        pair = self.get_maplet(x)
        if pair is None:
            return default
        return pair.y

    def contains_key(self, x: object) -> bool:
        return self._relation.domain().contains(x)

    def contains_value(self, y: object) -> bool:
        return self._relation.range().contains(y)

    def to_dict(self) -> dict[X, Y]:
        return {pair.x: pair.y for pair in self._relation}

    def as_relation(self) -> Relation[X, Y]:
        """Return a Relation copy of this function's pairs."""
        return self._relation.copy()

    # --- Queries delegated to the relation ---

    def contains(self, pair: object) -> bool:
        return self._relation.contains(pair)

    def size(self) -> int:
        return self._relation.size()

    def is_empty(self) -> bool:
        return self._relation.is_empty()

    def __len__(self) -> int:
        return len(self._relation)

    def __iter__(self) -> Iterator[Pair[X, Y]]:
        return iter(self._relation)

    def __contains__(self, pair: object) -> bool:
        return pair in self._relation

    def __eq__(self, other: object) -> bool:
        return self._relation.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return repr(self._relation)

    def domain(self) -> Set[X]:
        return self._relation.domain()

    def range(self) -> Set[Y]:
        return self._relation.range()

    def image(self, s: Set[X]) -> Set[Y]:
        return self._relation.image(s)

    def is_function(self) -> bool:
        return True

    def is_injection(self) -> bool:
        return self._relation.is_injection()

    def is_reflexive(self) -> bool:
        return self._relation.is_reflexive()

    def is_subset_of(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> bool:
        return self._relation.is_subset_of(other)

    def is_proper_subset_of(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> bool:
        return self._relation.is_proper_subset_of(other)

    # --- Operations that cannot break uniqueness return Functions ---

    def domain_restriction(self, s: Set[X]) -> Function[X, Y]:
        return Function._wrap(self._relation.domain_restriction(s))

    def domain_anti_restriction(self, s: Set[X]) -> Function[X, Y]:
        return Function._wrap(self._relation.domain_anti_restriction(s))

    def range_restriction(self, t: Set[Y]) -> Function[X, Y]:
        return Function._wrap(self._relation.range_restriction(t))

    def range_anti_restriction(self, t: Set[Y]) -> Function[X, Y]:
        return Function._wrap(self._relation.range_anti_restriction(t))

    def difference(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> Function[X, Y]:
        return Function._wrap(self._relation.difference(other))

    def intersection(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> Function[X, Y]:
        return Function._wrap(self._relation.intersection(other))

    def override(self, other: Relation[X, Y]) -> Function[X, Y] | Relation[X, Y]:
        """Override with other; the result is a Function when other is one."""
        result = self._relation.override(other)
        if isinstance(other, Function):
            return Function._wrap(result)
        return result

    def composition(self, other: Relation[Y, Z]) -> Function[X, Z] | Relation[X, Z]:
        """Compose with other; the result is a Function when other is one."""
        result = self._relation.composition(other)
        if isinstance(other, Function):
            return Function._wrap(result)
        return result

    # --- Operations that may relate an x to several y return Relations ---

    def union(self, other: Relation[X, Y] | Set[Pair[X, Y]]) -> Relation[X, Y]:
        return self._relation.union(other)

    def inverse(self) -> Relation[Y, X]:
        return self._relation.inverse()

    def transitive_closure(self) -> Relation[X, Y]:
        return self._relation.transitive_closure()

    def identity(self) -> Relation[Pair[X, Y], Pair[X, Y]]:
        return self._relation.identity()

    def cartesian_product(self, other: Set[Z]) -> Relation[Pair[X, Y], Z]:
        return self._relation.cartesian_product(other)

    __or__ = set_operator(union)
    __sub__ = set_operator(difference)
    __and__ = set_operator(intersection)
    __le__ = set_operator(is_subset_of)
    __lt__ = set_operator(is_proper_subset_of)
