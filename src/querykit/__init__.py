"""
querykit - Ordered Containers with a Shared Query Surface.

An in-memory collection library providing a list, a stack and a queue that
all share one query/aggregation surface (filter, sort, first/last,
existence checks, numeric reductions, projection), plus a unique-key map
built on the list.

Architecture:
    - One cursor protocol drives every traversal
    - Operators are written once and inherited by each variant
    - Configuration-driven edge cases via YAML

Main Components:
    - domain: Sort direction, map entries, result objects, exceptions
    - interfaces: Protocols for the cursor and the query surface
    - core: Cursor, selectors and the shared operator set
    - collections: OrderedList, Stack, Queue, KeyedMap
    - config: Configuration models and loaders
    - validation: Field-level provers

Example:
    >>> from querykit import OrderedList, SortDirection
    >>> people = OrderedList([{"name": "ada", "age": 36}, {"name": "alan", "age": 41}])
    >>> people.order_by("age", SortDirection.DESCENDING).first_or_default(lambda p: True)
    {'name': 'alan', 'age': 41}

"""

import logging

from querykit.collections import KeyedMap, OrderedList, Queue, Stack
from querykit.config import CollectionsConfig, load_config
from querykit.core import OrderedCollection
from querykit.domain import (
    MISSING,
    CollectionError,
    DuplicateKeyError,
    EmptyCollectionError,
    KeyValueEntry,
    OperationResult,
    OperationStatus,
    OutOfRangeError,
    SortDirection,
)

__version__ = "0.1.0"

__all__ = [
    "configure_logging",
    "KeyedMap",
    "OrderedList",
    "Queue",
    "Stack",
    "OrderedCollection",
    "CollectionsConfig",
    "load_config",
    "MISSING",
    "CollectionError",
    "DuplicateKeyError",
    "EmptyCollectionError",
    "KeyValueEntry",
    "OperationResult",
    "OperationStatus",
    "OutOfRangeError",
    "SortDirection",
]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for querykit.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import querykit
        >>> querykit.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("querykit").setLevel(level)
