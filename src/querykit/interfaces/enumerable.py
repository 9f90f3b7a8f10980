"""
Enumerable Protocol.

Defines the cursor contract every container traversal is built on.

A full traversal is always:
    reset(), then has_next() -> advance() until has_next() is False.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - One active traversal per container instance
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Enumerable(Protocol[T_co]):
    """Positional iterator over an ordered backing sequence."""

    @property
    def position(self) -> int:
        """Current offset, -1 before the first element."""
        ...

    def reset(self) -> None:
        """Move the position to before the first element."""
        ...

    def has_next(self) -> bool:
        """Report whether an element exists at position + 1."""
        ...

    def advance(self) -> T_co:
        """
        Move forward one step and return the element now at the position.

        Raises:
            OutOfRangeError: If no element remains
        """
        ...
