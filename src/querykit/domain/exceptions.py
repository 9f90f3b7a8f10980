"""
Collection Exceptions.

Contract violations (bad index, empty pop) are raised immediately.
Duplicate keys are normally reported through OperationResult and only
raised when the map is configured to be strict.
"""

from __future__ import annotations

from typing import Any, Optional


class CollectionError(Exception):
    """Base class for all container errors."""

    pass


class OutOfRangeError(CollectionError, IndexError):
    """Raised when a position lies outside the current bounds."""

    def __init__(self, index: int, size: int, operation: str = "access") -> None:
        super().__init__(
            f"{operation}: index {index} out of range for {size} element(s)"
        )
        self.index = index
        self.size = size
        self.operation = operation


class EmptyCollectionError(CollectionError, IndexError):
    """Raised when removing from a container with no elements."""

    def __init__(self, operation: str, container: Optional[str] = None) -> None:
        target = container or "container"
        super().__init__(f"{operation}: {target} is empty")
        self.operation = operation
        self.container = container


class DuplicateKeyError(CollectionError, KeyError):
    """Raised by a strict KeyedMap when a key is inserted twice."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key {self.key!r} already exists"
