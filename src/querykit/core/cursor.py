"""
Sequential Cursor - Positional Iteration over a Backing List.

The cursor holds a reference to its container's backing list, so in-place
changes to that list are visible to the next step of a traversal.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

from querykit.domain.exceptions import OutOfRangeError

T = TypeVar("T")

BEFORE_FIRST = -1


class SequentialCursor(Generic[T]):
    """Implements the Enumerable protocol for one container instance."""

    def __init__(self, items: List[T]) -> None:
        self._items = items
        self._position = BEFORE_FIRST

    @property
    def position(self) -> int:
        return self._position

    def reset(self) -> None:
        self._position = BEFORE_FIRST

    def has_next(self) -> bool:
        # Bounds only: a None element is still an element
        return self._position + 1 < len(self._items)

    def advance(self) -> T:
        """
        Step forward and return the element at the new position.

        Raises:
            OutOfRangeError: If the cursor is already at the last element
        """
        if not self.has_next():
            raise OutOfRangeError(
                self._position + 1, len(self._items), operation="advance"
            )
        self._position += 1
        return self._items[self._position]
