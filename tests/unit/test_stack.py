"""
Unit Tests for Stack.

Test Aspects Covered:
    ✅ Business Logic: LIFO push/pop/peek
    ✅ Error Handling: pop and peek on an empty stack
    ✅ State: traversal runs bottom to top
"""

from __future__ import annotations

import pytest

from querykit.collections.stack import Stack
from querykit.domain.exceptions import CollectionError, EmptyCollectionError


class TestStack:
    """Test cases for Stack."""

    def test_push_push_pop(self) -> None:
        """
        SCENARIO: push(1), push(2), pop()
        EXPECTED: 2 returned, count 1
        """
        stack = Stack()
        stack.push(1)
        stack.push(2)

        top = stack.pop()

        assert top == 2
        assert stack.count == 1
        assert stack.to_array() == [1]

    def test_pop_initial_items_from_the_end(self) -> None:
        stack = Stack([1, 2, 3])
        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]

    def test_peek_does_not_remove(self) -> None:
        stack = Stack(["x", "y"])

        assert stack.peek() == "y"
        assert stack.count == 2

    def test_pop_on_empty_raises(self) -> None:
        """
        SCENARIO: pop() with no elements
        EXPECTED: EmptyCollectionError, count stays 0
        """
        stack = Stack()

        with pytest.raises(EmptyCollectionError) as exc_info:
            stack.pop()

        assert exc_info.value.operation == "pop"
        assert "Stack" in str(exc_info.value)
        assert stack.count == 0

    def test_peek_on_empty_raises(self) -> None:
        with pytest.raises(CollectionError):
            Stack().peek()

    def test_pop_after_draining(self) -> None:
        stack = Stack([1])
        stack.pop()

        with pytest.raises(IndexError):
            stack.pop()

    def test_traversal_from_bottom(self) -> None:
        stack = Stack()
        stack.push("first")
        stack.push("second")

        assert stack.first_or_default(lambda x: True) == "first"
