"""
Core Package - Cursor and Shared Operator Set.

    - SequentialCursor: positional iterator over a backing list
    - OrderedCollection: every query/aggregation operator, written once
      against the cursor and inherited by each container variant
    - selectors: field selector resolution and numeric qualification
"""

from querykit.core.cursor import SequentialCursor
from querykit.core.ordered_collection import OrderedCollection
from querykit.core.selectors import Selector, add_numeric, is_numeric, resolve_selector

__all__ = [
    "SequentialCursor",
    "OrderedCollection",
    "Selector",
    "add_numeric",
    "is_numeric",
    "resolve_selector",
]
