"""
Queryable Collection Protocol.

Defines the query/aggregation surface shared by every container variant.
Operators run eagerly: each either returns a new container or the same
container with its backing sequence changed.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    List,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)

if TYPE_CHECKING:
    from querykit.core.selectors import Selector
    from querykit.domain.entities import SortDirection

T = TypeVar("T")


@runtime_checkable
class QueryableCollection(Protocol[T]):
    """Abstract interface for the shared operator set."""

    @property
    def count(self) -> int:
        """Number of elements currently held."""
        ...

    def to_array(self) -> List[T]:
        """Backing sequence by reference (no defensive copy)."""
        ...

    def for_each_read(self, visit: Callable[[T, int], None]) -> "QueryableCollection[T]":
        ...

    def for_each_alter(self, transform: Callable[[T, int], T]) -> "QueryableCollection[T]":
        ...

    def where(self, predicate: Callable[[T], bool]) -> "QueryableCollection[T]":
        ...

    def order_by(
        self,
        selector: "Selector",
        direction: "SortDirection",
    ) -> "QueryableCollection[T]":
        ...

    def first_or_default(
        self, predicate: Callable[[T], bool], default: Optional[T] = None
    ) -> Optional[T]:
        ...

    def last_or_default(
        self, predicate: Callable[[T], bool], default: Optional[T] = None
    ) -> Optional[T]:
        ...

    def any(self, predicate: Optional[Callable[[T], bool]] = None) -> bool:
        ...

    def none(self, predicate: Optional[Callable[[T], bool]] = None) -> bool:
        ...

    def all(self, predicate: Callable[[T], bool]) -> bool:
        ...

    def sum(self, selector: "Selector") -> Any:
        ...

    def avg(self, selector: "Selector") -> float:
        ...

    def max(self, selector: "Selector") -> Any:
        ...

    def min(self, selector: "Selector") -> Any:
        ...

    def convert(self, map_fn: Callable[[T], Any]) -> "QueryableCollection[Any]":
        ...
