"""
Ordered List - Random Add/Remove with Indexed Access.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from querykit.core.ordered_collection import OrderedCollection

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OrderedList(OrderedCollection[T]):
    """List container: appends at the end, removes by value or position."""

    def add(self, item: T) -> None:
        self._items.append(item)

    def remove(self, item: T) -> bool:
        """
        Remove the first element equal to item.

        Args:
            item: Value to remove (compared with ==)

        Returns:
            True if an element was removed, False if none was equal
        """
        index = self.find_index(lambda element: element == item)
        if index < 0:
            logger.debug(f"OrderedList.remove: {item!r} not present, nothing removed")
            return False
        del self._items[index]
        return True

    def find_index(self, predicate: Callable[[T], bool]) -> int:
        """Position of the first element matching predicate, or -1."""
        for element, position in self._traverse():
            if predicate(element):
                return position
        return -1

    def get_at_index(self, index: int) -> T:
        """
        Read the element at index.

        Raises:
            OutOfRangeError: If index is outside [0, count)
        """
        self._check_index(index, "get_at_index")
        return self._items[index]

    def remove_at_index(self, index: int) -> T:
        """
        Remove and return the element at index.

        Raises:
            OutOfRangeError: If index is outside [0, count)
        """
        self._check_index(index, "remove_at_index")
        return self._items.pop(index)
