"""
SortedContainer abstract base class for ordered multi-value indexes.
"""

from abc import abstractmethod
from typing import Any

from bptree.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for ordered key-value indexes.

    Keys may be any mutually orderable objects. Inserting an existing key
    keeps the earlier values: every value is stored, in insertion order.
    Inherits range iteration capabilities from RangeIterable.

    Implementations:
    - BPlusTree: leaf-chained B+ tree with logarithmic descent
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Add a value under a key.

        Args:
            key: The key to index the value by. Must not be None.
            value: The value to store.

        Raises:
            InvalidKeyError: If key is None.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Any | None:
        """
        Retrieve the first value stored under a key.

        Args:
            key: The key to look up.

        Returns:
            The earliest value inserted under key, or None if the key is
            absent or None.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def range_search(self, key: Any, comparator: str) -> list[Any]:
        """
        Collect the values whose keys compare to key as requested.

        Args:
            key: The query key.
            comparator: One of "<=", "==", ">=".

        Returns:
            Matching values in ascending key order. Empty for a None key or
            an unrecognised comparator.
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if at least one value is stored under a key.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of insertions performed.

        Returns:
            The count of insert calls, duplicates included.

        Time complexity: O(1)
        """
        pass
