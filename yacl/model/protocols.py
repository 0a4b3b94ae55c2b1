"""Capability contracts for sets, relations and functions.

Set, Relation and Function do not inherit from one another: a Relation
owns a Set of pairs and a Function owns a Relation. These protocols
describe what each of them offers, so callers can accept any collection
with the capability they need.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, TypeVar, runtime_checkable

from yacl.model.pair import Pair

T = TypeVar("T")
X = TypeVar("X")
Y = TypeVar("Y")


@runtime_checkable
class SetOps(Protocol[T]):
    """Membership plus the set algebra."""

    def add(self, element: T) -> bool: ...

    def remove(self, element: T) -> bool: ...

    def contains(self, element: object) -> bool: ...

    def size(self) -> int: ...

    def is_empty(self) -> bool: ...

    def union(self, other: Any) -> SetOps[T]: ...

    def difference(self, other: Any) -> SetOps[T]: ...

    def intersection(self, other: Any) -> SetOps[T]: ...

    def is_subset_of(self, other: Any) -> bool: ...

    def is_proper_subset_of(self, other: Any) -> bool: ...

    def identity(self) -> RelationOps[T, T]: ...

    def cartesian_product(self, other: Any) -> RelationOps[T, Any]: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...

    def __contains__(self, element: object) -> bool: ...


@runtime_checkable
class RelationOps(SetOps[Pair[X, Y]], Protocol[X, Y]):
    """A set of pairs with the relational operators."""

    def domain(self) -> SetOps[X]: ...

    def range(self) -> SetOps[Y]: ...

    def domain_restriction(self, s: Any) -> RelationOps[X, Y]: ...

    def domain_anti_restriction(self, s: Any) -> RelationOps[X, Y]: ...

    def range_restriction(self, t: Any) -> RelationOps[X, Y]: ...

    def range_anti_restriction(self, t: Any) -> RelationOps[X, Y]: ...

    def inverse(self) -> RelationOps[Y, X]: ...

    def composition(self, other: Any) -> RelationOps[X, Any]: ...

    def override(self, other: Any) -> RelationOps[X, Y]: ...

    def transitive_closure(self) -> RelationOps[X, Y]: ...

    def image(self, s: Any) -> SetOps[Y]: ...

    def is_function(self) -> bool: ...

    def is_injection(self) -> bool: ...

    def is_reflexive(self) -> bool: ...


@runtime_checkable
class FunctionOps(RelationOps[X, Y], Protocol[X, Y]):
    """A relation with unique x values and keyed access."""

    def put(self, x: X, y: Y) -> Y | None: ...

    def get_value(self, x: X, default: Any = None) -> Any: ...

    def get_maplet(self, x: X) -> Pair[X, Y] | None: ...

    def contains_key(self, x: object) -> bool: ...

    def contains_value(self, y: object) -> bool: ...
