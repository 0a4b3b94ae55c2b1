"""Exceptions raised by the collection algebra."""

from __future__ import annotations


class YaclError(Exception):
    """Base class for collection algebra errors."""


class InvalidArgumentError(YaclError, ValueError):
    """Raised when a constructor receives inconsistent inputs."""


class TypeMismatchError(YaclError, TypeError):
    """Raised when an element or operand has the wrong kind."""


class DuplicateKeyError(YaclError, KeyError):
    """Raised when a function already maps the key being inserted."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Duplicate key: {self.key!r}"
