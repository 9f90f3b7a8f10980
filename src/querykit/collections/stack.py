"""
Stack - LIFO Container.

The top of the stack is the end of the backing list, so traversal order
runs from the bottom (oldest) to the top (newest).
"""

from __future__ import annotations

from typing import TypeVar

from querykit.core.ordered_collection import OrderedCollection
from querykit.domain.exceptions import EmptyCollectionError

T = TypeVar("T")


class Stack(OrderedCollection[T]):
    """Last in, first out."""

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """
        Remove and return the top element.

        Raises:
            EmptyCollectionError: If the stack has no elements
        """
        if not self._items:
            raise EmptyCollectionError("pop", container="Stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise EmptyCollectionError("peek", container="Stack")
        return self._items[-1]
