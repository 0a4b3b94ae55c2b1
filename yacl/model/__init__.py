"""Data model: Pair, Set, Relation and Function."""

from yacl.model.errors import (
    DuplicateKeyError,
    InvalidArgumentError,
    TypeMismatchError,
    YaclError,
)
from yacl.model.function import Function
from yacl.model.pair import Pair
from yacl.model.protocols import FunctionOps, RelationOps, SetOps
from yacl.model.relation import Relation
from yacl.model.sets import Set

__all__ = [
    "DuplicateKeyError",
    "Function",
    "FunctionOps",
    "InvalidArgumentError",
    "Pair",
    "Relation",
    "RelationOps",
    "Set",
    "SetOps",
    "TypeMismatchError",
    "YaclError",
]
