"""CSV input for relations."""

from yacl.data.loader import LoadError, PairTable, load_pairs

__all__ = ["LoadError", "PairTable", "load_pairs"]
