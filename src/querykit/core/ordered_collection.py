"""
Ordered Collection - Shared Query/Aggregation Operators.

Every operator here is written once against the SequentialCursor and is
inherited unchanged by OrderedList, Stack and Queue. Each variant only adds
its own mutation methods.

Design Notes:
    - Operators run eagerly and complete before returning
    - where/convert build a new container of the same variant
    - order_by/for_each_alter change the backing list in place
    - Only one traversal may be active per instance; calling another
      operator of the same container from inside a callback restarts the
      cursor and corrupts the outer traversal
"""

from __future__ import annotations

import logging
from operator import itemgetter
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from querykit.config.models import (
    AverageDenominator,
    CollectionsConfig,
    MissingSortPlacement,
)
from querykit.core.cursor import SequentialCursor
from querykit.core.selectors import (
    Selector,
    add_numeric,
    is_numeric,
    resolve_selector,
)
from querykit.domain.entities import SortDirection
from querykit.domain.exceptions import OutOfRangeError
from querykit.domain.value_objects import MISSING

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class OrderedCollection(Generic[T]):
    """
    Base container: an ordered backing list, its cursor and the operator set.

    Features:
        - Element-wise read and in-place alteration
        - Filtering, projection and in-place sorting
        - First/last lookup and existence predicates
        - Numeric reductions over a field selector
    """

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        config: Optional[CollectionsConfig] = None,
    ) -> None:
        """
        Initialize the container.

        Args:
            items: Initial elements. A list is adopted by reference,
                   any other iterable is copied into a new list,
                   None means no elements.
            config: Behaviour settings, shared with derived containers
        """
        if items is None:
            self._items: List[T] = []
        elif isinstance(items, list):
            self._items = items
        else:
            self._items = list(items)
        self._config = config or CollectionsConfig()
        self._cursor: SequentialCursor[T] = SequentialCursor(self._items)

    # -------------------------------------------------------------------------
    # Backing sequence
    # -------------------------------------------------------------------------

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def config(self) -> CollectionsConfig:
        return self._config

    def to_array(self) -> List[T]:
        """Return the backing list itself. Changes to it affect the container."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # Snapshot iteration, independent of the cursor
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _traverse(self) -> Iterator[Tuple[T, int]]:
        """Run one full cursor traversal, yielding (element, position)."""
        self._cursor.reset()
        while self._cursor.has_next():
            element = self._cursor.advance()
            yield element, self._cursor.position

    def _spawn(self, items: List[Any]) -> "OrderedCollection[Any]":
        """Build a new container of the same variant sharing the config."""
        result = type(self)(items, config=self._config)
        logger.debug(
            f"{type(self).__name__}: built new container with {len(items)} element(s)"
        )
        return result

    def _check_index(self, index: int, operation: str) -> None:
        if not 0 <= index < len(self._items):
            raise OutOfRangeError(index, len(self._items), operation=operation)

    # -------------------------------------------------------------------------
    # Element-wise operators
    # -------------------------------------------------------------------------

    def for_each_read(self, visit: Callable[[T, int], None]) -> "OrderedCollection[T]":
        """
        Call visit(element, position) for every element.

        Returns:
            This container, unchanged
        """
        for element, position in self._traverse():
            visit(element, position)
        return self

    def for_each_alter(self, transform: Callable[[T, int], T]) -> "OrderedCollection[T]":
        """
        Replace every element with transform(element, position).

        Returns:
            This container, with its backing list changed
        """
        for element, position in self._traverse():
            self._items[position] = transform(element, position)
        return self

    def where(self, predicate: Callable[[T], bool]) -> "OrderedCollection[T]":
        """
        Collect the elements matching predicate, in their current order.

        Returns:
            New container of the same variant; this one is not modified
        """
        matches = [element for element, _ in self._traverse() if predicate(element)]
        return self._spawn(matches)

    def convert(self, map_fn: Callable[[T], R]) -> "OrderedCollection[R]":
        """
        Project every element through map_fn.

        Returns:
            New container of the same variant holding the projected values
        """
        projected = [map_fn(element) for element, _ in self._traverse()]
        return self._spawn(projected)

    def order_by(
        self,
        selector: Selector,
        direction: Union[SortDirection, str] = SortDirection.ASCENDING,
    ) -> "OrderedCollection[T]":
        """
        Sort the backing list in place by the selected value.

        Values are compared with the native < operator, so numbers sort
        numerically and strings lexicographically. Elements without the
        selected field, or whose field holds None, are grouped at the end
        (or start, per config) in their current order.

        Args:
            selector: Field name or callable giving the sort value
            direction: ASCENDING or DESCENDING

        Returns:
            This container

        Raises:
            TypeError: If selected values cannot be compared with each other
        """
        direction = SortDirection(direction)
        read = resolve_selector(selector)

        present: List[Tuple[Any, T]] = []
        missing: List[T] = []
        for element, _ in self._traverse():
            value = read(element)
            if value is MISSING or value is None:
                missing.append(element)
            else:
                present.append((value, element))

        present.sort(
            key=itemgetter(0),
            reverse=direction is SortDirection.DESCENDING,
        )
        ordered = [element for _, element in present]
        if self._config.missing_sort_values is MissingSortPlacement.FIRST:
            ordered = missing + ordered
        else:
            ordered = ordered + missing

        self._items[:] = ordered
        logger.debug(
            f"{type(self).__name__}: sorted {len(ordered)} element(s) "
            f"{direction.value.lower()}, {len(missing)} without sort value"
        )
        return self

    # -------------------------------------------------------------------------
    # Lookup and predicates
    # -------------------------------------------------------------------------

    def first_or_default(
        self,
        predicate: Callable[[T], bool],
        default: Optional[T] = None,
    ) -> Optional[T]:
        """Return the first matching element, or default when none match."""
        for element, _ in self._traverse():
            if predicate(element):
                return element
        return default

    def last_or_default(
        self,
        predicate: Callable[[T], bool],
        default: Optional[T] = None,
    ) -> Optional[T]:
        """Return the last matching element, or default when none match."""
        found = False
        last: Optional[T] = None
        for element, _ in self._traverse():
            if predicate(element):
                found = True
                last = element
        return last if found else default

    def any(self, predicate: Optional[Callable[[T], bool]] = None) -> bool:
        """True if some element matches. Without predicate: True if not empty."""
        if predicate is None:
            return len(self._items) > 0
        for element, _ in self._traverse():
            if predicate(element):
                return True
        return False

    def none(self, predicate: Optional[Callable[[T], bool]] = None) -> bool:
        return not self.any(predicate)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if every element matches. Vacuously True when empty."""
        for element, _ in self._traverse():
            if not predicate(element):
                return False
        return True

    # -------------------------------------------------------------------------
    # Numeric reductions
    # -------------------------------------------------------------------------

    def sum(self, selector: Selector) -> Any:
        """
        Add up the selected values.

        Elements whose value is missing or not numeric are skipped.
        Returns 0 when nothing qualifies.
        """
        read = resolve_selector(selector)
        total: Any = 0
        for element, _ in self._traverse():
            value = read(element)
            if is_numeric(value):
                total = add_numeric(total, value)
        return total

    def avg(self, selector: Selector) -> float:
        """
        Average the selected values.

        The denominator is the total element count by default, so elements
        without a numeric value still count. With
        average_denominator=qualifying only numeric values count.

        Returns:
            The average, or NaN when the denominator is zero
        """
        read = resolve_selector(selector)
        total: Any = 0
        seen = 0
        qualifying = 0
        for element, _ in self._traverse():
            seen += 1
            value = read(element)
            if is_numeric(value):
                total = add_numeric(total, value)
                qualifying += 1

        if self._config.average_denominator is AverageDenominator.QUALIFYING:
            divisor = qualifying
        else:
            divisor = seen

        if divisor == 0:
            return float("nan")
        return total / divisor

    def max(self, selector: Selector) -> Any:
        """Largest numeric selected value, or None if nothing qualifies."""
        return self._extreme(selector, lambda candidate, best: candidate > best)

    def min(self, selector: Selector) -> Any:
        """Smallest numeric selected value, or None if nothing qualifies."""
        return self._extreme(selector, lambda candidate, best: candidate < best)

    def _extreme(
        self,
        selector: Selector,
        replaces: Callable[[Any, Any], bool],
    ) -> Any:
        read = resolve_selector(selector)
        has_value = False
        best: Any = None
        for element, _ in self._traverse():
            value = read(element)
            if not is_numeric(value):
                continue
            if not has_value or replaces(value, best):
                best = value
                has_value = True
        return best
