"""Text rendering of sets and relations."""

from yacl.display.formatter import format_relation, format_set, format_value

__all__ = ["format_relation", "format_set", "format_value"]
