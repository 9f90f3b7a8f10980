"""
Core Domain Entities.

This module defines the entities the containers are built around.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class SortDirection(str, Enum):
    """Ordering direction for order_by."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"


@dataclass(frozen=True)
class KeyValueEntry(Generic[K, V]):
    """One key paired with one value inside a KeyedMap."""

    key: K
    value: V

    def as_tuple(self) -> Tuple[K, V]:
        return self.key, self.value
