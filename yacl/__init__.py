"""yacl: finite sets, binary relations and partial functions."""

from yacl.model import (
    DuplicateKeyError,
    Function,
    InvalidArgumentError,
    Pair,
    Relation,
    Set,
    TypeMismatchError,
    YaclError,
)

__all__ = [
    "DuplicateKeyError",
    "Function",
    "InvalidArgumentError",
    "Pair",
    "Relation",
    "Set",
    "TypeMismatchError",
    "YaclError",
]
