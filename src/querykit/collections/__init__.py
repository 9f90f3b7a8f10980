"""
Collections Package - Concrete Container Variants.

    - OrderedList: append, remove by value, indexed access
    - Stack: LIFO push/pop
    - Queue: FIFO enqueue/dequeue
    - KeyedMap: unique-key map composed over an OrderedList of entries

All variants inherit the query/aggregation operators from
querykit.core.OrderedCollection.
"""

from querykit.collections.keyed_map import KeyedMap
from querykit.collections.ordered_list import OrderedList
from querykit.collections.queue import Queue
from querykit.collections.stack import Stack

__all__ = ["KeyedMap", "OrderedList", "Queue", "Stack"]
