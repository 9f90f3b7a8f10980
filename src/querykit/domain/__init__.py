"""
Domain Layer - Core Types Shared by Every Container.

This package contains the small domain model the containers operate on.
Nothing here depends on the container implementations.

Entities:
    - SortDirection: Ordering direction for order_by
    - KeyValueEntry: Immutable key/value pairing stored by KeyedMap

Value Objects:
    - OperationStatus: Outcome of a map mutation
    - OperationResult: Non-fatal result channel for map mutations
    - MISSING: Sentinel for a field selector that found nothing

Exceptions:
    - CollectionError and its subclasses (see exceptions module)
"""

from querykit.domain.entities import KeyValueEntry, SortDirection
from querykit.domain.exceptions import (
    CollectionError,
    DuplicateKeyError,
    EmptyCollectionError,
    OutOfRangeError,
)
from querykit.domain.value_objects import MISSING, OperationResult, OperationStatus

__all__ = [
    "KeyValueEntry",
    "SortDirection",
    "CollectionError",
    "DuplicateKeyError",
    "EmptyCollectionError",
    "OutOfRangeError",
    "MISSING",
    "OperationResult",
    "OperationStatus",
]
