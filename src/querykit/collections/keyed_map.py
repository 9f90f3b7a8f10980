"""
Keyed Map - Unique Keys over a List of Entries.

The map composes one OrderedList of KeyValueEntry objects. Keys are kept
unique by a linear scan before every insert, so lookups, inserts and
removals are all O(n) in the number of entries.

Design Notes:
    - Keys are compared with ==, they do not need to be hashable
    - A duplicate insert is reported through OperationResult, never
      silently overwritten, unless the config asks for an exception
    - The entry list and its cursor are never handed out
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Optional, Tuple, TypeVar

from querykit.collections.ordered_list import OrderedList
from querykit.config.models import CollectionsConfig
from querykit.domain.entities import KeyValueEntry
from querykit.domain.exceptions import DuplicateKeyError
from querykit.domain.value_objects import OperationResult

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class KeyedMap(Generic[K, V]):
    """Map with unique keys, kept in insertion order."""

    def __init__(
        self,
        entries: Optional[Iterable[Tuple[K, V]]] = None,
        config: Optional[CollectionsConfig] = None,
    ) -> None:
        """
        Initialize the map.

        Args:
            entries: Optional (key, value) pairs, inserted through add_item
                     so duplicates are rejected the same way
            config: Behaviour settings, passed on to the entry list
        """
        self._config = config or CollectionsConfig()
        self._entries: OrderedList[KeyValueEntry[K, V]] = OrderedList(
            config=self._config
        )
        for key, value in entries or ():
            self.add_item(key, value)

    @property
    def count(self) -> int:
        return self._entries.count

    def __len__(self) -> int:
        return self._entries.count

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{e.key!r}: {e.value!r}" for e in self._entries)
        return f"KeyedMap({{{pairs}}})"

    def contains_key(self, key: object) -> bool:
        return self._entries.any(lambda entry: entry.key == key)

    def get_by_key(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """
        Look up the value stored under key.

        Args:
            key: Key to find (compared with ==)
            default: Returned when no entry has this key

        Returns:
            The stored value or default
        """
        entry = self._entries.first_or_default(lambda e: e.key == key)
        if entry is None:
            return default
        return entry.value

    def get_key_by_index(self, index: int) -> K:
        """
        Raises:
            OutOfRangeError: If index is outside [0, count)
        """
        return self._entries.get_at_index(index).key

    def get_value_by_index(self, index: int) -> V:
        """
        Raises:
            OutOfRangeError: If index is outside [0, count)
        """
        return self._entries.get_at_index(index).value

    def add_item(self, key: K, value: V) -> OperationResult:
        """
        Insert a new entry unless the key is already present.

        Args:
            key: Key of the new entry
            value: Value of the new entry

        Returns:
            OperationResult with status OK or DUPLICATE_KEY

        Raises:
            DuplicateKeyError: If the key exists and raise_on_duplicate_key
                               is enabled
        """
        if self.contains_key(key):
            logger.log(
                self._config.duplicate_key_log_level_number,
                f"Unable to add item to map: key {key!r} already exists",
            )
            if self._config.raise_on_duplicate_key:
                raise DuplicateKeyError(key)
            return OperationResult.duplicate_key(key)

        self._entries.add(KeyValueEntry(key, value))
        return OperationResult.ok(key)

    def remove_item(self, key: K) -> OperationResult:
        """
        Remove the entry stored under key.

        Returns:
            OperationResult with status OK, or NOT_FOUND when no entry
            has this key (the map is left unchanged)
        """
        index = self._entries.find_index(lambda e: e.key == key)
        if index < 0:
            logger.debug(f"KeyedMap.remove_item: key {key!r} not found")
            return OperationResult.not_found(key)
        self._entries.remove_at_index(index)
        return OperationResult.ok(key)

    def get_keys(self) -> OrderedList[K]:
        """New list of all keys in entry order."""
        return self._entries.convert(lambda e: e.key)

    def get_values(self) -> OrderedList[V]:
        """New list of all values in entry order."""
        return self._entries.convert(lambda e: e.value)
