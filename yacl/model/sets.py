"""Set: a mutable finite set with algebraic operations."""

from __future__ import annotations

import functools
from typing import (
    TYPE_CHECKING,
    AbstractSet,
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    TypeVar,
)

from yacl.model.errors import TypeMismatchError
from yacl.model.pair import Pair

if TYPE_CHECKING:
    from yacl.model.relation import Relation

T = TypeVar("T")
U = TypeVar("U")


def members_of(collection: object) -> AbstractSet:
    """Return the elements of a yacl collection or builtin set.

    Relations and functions contribute their pairs. Anything else is
    rejected with TypeMismatchError.
    """
    if isinstance(collection, Set):
        return collection._elements
    if isinstance(collection, (set, frozenset)):
        return collection
    members = getattr(collection, "members", None)
    if isinstance(members, frozenset):
        return members
    raise TypeMismatchError(
        f"Expected a set, relation or function, got {type(collection).__name__}"
    )


def set_operator(method: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """Wrap a binary set method as an operator.

    Operands that are not sets, relations or functions give NotImplemented
    so Python can try the reflected operation.
    """

    @functools.wraps(method)
    def wrapper(self: Any, other: Any) -> Any:
        try:
            members_of(other)
        except TypeMismatchError:
            return NotImplemented
        return method(self, other)

    return wrapper


class Set(Generic[T]):
    """A finite, unordered collection without duplicates.

    Backed by a builtin set. The algebraic operations never modify their
    operands and always return a new Set.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[T] | None = None) -> None:
        self._elements: set[T] = set(elements) if elements is not None else set()

    @classmethod
    def of(cls, *elements: T) -> Set[T]:
        """Build a set from positional arguments."""
        return cls(elements)

    @property
    def members(self) -> frozenset[T]:
        """Return a frozen snapshot of the elements."""
        return frozenset(self._elements)

    # --- Mutation ---

    def add(self, element: T) -> bool:
        """Add an element. Returns True if the set changed."""
        if element in self._elements:
            return False
        self._elements.add(element)
        return True

    def remove(self, element: T) -> bool:
        """Remove an element. Returns True if it was present."""
        if element not in self._elements:
            return False
        self._elements.remove(element)
        return True

    def discard(self, element: T) -> None:
        self._elements.discard(element)

    def update(self, elements: Iterable[T]) -> bool:
        """Add every element of an iterable. Returns True if the set changed."""
        before = len(self._elements)
        self._elements.update(elements)
        return len(self._elements) != before

    def clear(self) -> None:
        self._elements.clear()

    def copy(self) -> Set[T]:
        return Set(self._elements)

    __copy__ = copy

    # --- Queries ---

    def contains(self, element: object) -> bool:
        return element in self._elements

    def size(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __eq__(self, other: object) -> bool:
        try:
            return self._elements == members_of(other)
        except TypeMismatchError:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(sorted(repr(e) for e in self._elements))
        return f"{{{items}}}"

    # --- Set algebra ---

    def union(self, other: Set[T]) -> Set[T]:
        """Union: elements in either set (|)."""
        return Set(self._elements | members_of(other))

    def difference(self, other: Set[T]) -> Set[T]:
        """Difference: elements in self but not in other (-)."""
        return Set(self._elements - members_of(other))

    def intersection(self, other: Set[T]) -> Set[T]:
        """Intersection: elements in both sets (&)."""
        return Set(self._elements & members_of(other))

    def is_subset_of(self, other: Set[T]) -> bool:
        """True if every element of self is in other. Equal sets qualify."""
        return self._elements <= members_of(other)

    def is_proper_subset_of(self, other: Set[T]) -> bool:
        """True if self is a subset of other and strictly smaller."""
        theirs = members_of(other)
        return self._elements <= theirs and len(self._elements) < len(theirs)

    def identity(self) -> Relation[T, T]:
        """Return the relation relating each element to itself."""
        from yacl.model.relation import Relation

        return Relation(Pair(e, e) for e in self._elements)

    def cartesian_product(self, other: Set[U]) -> Relation[T, U]:
        """Return every pair (x, y) with x in self and y in other."""
        from yacl.model.relation import Relation

        theirs = members_of(other)
        return Relation(Pair(x, y) for x in self._elements for y in theirs)

    __or__ = set_operator(union)
    __sub__ = set_operator(difference)
    __and__ = set_operator(intersection)
    __le__ = set_operator(is_subset_of)
    __lt__ = set_operator(is_proper_subset_of)
