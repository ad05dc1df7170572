"""
In-memory B+ tree index over orderable keys.

This package provides an ordered multi-value index with:
- insert(key, value) - O(log N), duplicate keys keep every value
- get(key) - O(log N), first value stored under key
- range_search(key, comparator) - "<=", "==" or ">=" scans in key order
- size() - number of insertions performed
- Ordered sync and async traversal over the leaf chain
"""

from bptree.models.comparator import Comparator
from bptree.models.exceptions import InvalidKeyError, TreeInvariantError
from bptree.models.sortedcontainers import BPlusTree

__all__ = ["BPlusTree", "Comparator", "InvalidKeyError", "TreeInvariantError"]
