"""
Queue - FIFO Container.

Backed by a plain list: dequeue removes from the front and is O(n).
"""

from __future__ import annotations

from typing import TypeVar

from querykit.core.ordered_collection import OrderedCollection
from querykit.domain.exceptions import EmptyCollectionError

T = TypeVar("T")


class Queue(OrderedCollection[T]):
    """First in, first out."""

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        """
        Remove and return the front element.

        Raises:
            EmptyCollectionError: If the queue has no elements
        """
        if not self._items:
            raise EmptyCollectionError("dequeue", container="Queue")
        return self._items.pop(0)

    def peek(self) -> T:
        """Return the front element without removing it."""
        if not self._items:
            raise EmptyCollectionError("peek", container="Queue")
        return self._items[0]
