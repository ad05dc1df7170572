"""
B+ Tree implementation for ordered multi-value indexing.

Point lookups and range searches descend in O(log N); full and bounded
traversals walk the leaf chain in key order.
"""

import logging
from collections import deque
from collections.abc import AsyncIterator, Iterator
from typing import Any

from bptree.interfaces.sorted_container import SortedContainer
from bptree.models.comparator import Comparator
from bptree.models.exceptions import InvalidKeyError, TreeInvariantError
from bptree.models.nodes import InternalNode, LeafNode, Node

logger = logging.getLogger(__name__)


class BPlusTree(SortedContainer):
    """
    B+ Tree implementation of SortedContainer.

    Properties maintained:
    1. Keys within every node are strictly ascending
    2. Every internal node has one more child than keys
    3. Each separator equals the first leaf key of its right-hand subtree
    4. Leaves form one doubly-linked chain in ascending key order
    5. The tree only grows in height at the root
    """

    DEFAULT_BRANCHING_FACTOR = 3

    # A factor of 1 leaves the root overflowing after every split
    MIN_BRANCHING_FACTOR = 2

    def __init__(self, branching_factor: int = DEFAULT_BRANCHING_FACTOR) -> None:
        """
        Initialize an empty tree.

        Args:
            branching_factor: Maximum children per internal node and value
                buckets per leaf. Fixed for the lifetime of the tree.
        """
        if isinstance(branching_factor, bool) or not isinstance(branching_factor, int):
            raise TypeError(
                f"branching_factor must be an int, got {type(branching_factor).__name__}"
            )
        if branching_factor < self.MIN_BRANCHING_FACTOR:
            raise ValueError(
                f"branching_factor must be at least {self.MIN_BRANCHING_FACTOR}, "
                f"got {branching_factor}"
            )

        self._branching_factor = branching_factor
        self._root: Node = LeafNode(self)
        self._size: int = 0

    @property
    def branching_factor(self) -> int:
        return self._branching_factor

    @property
    def root(self) -> Node:
        return self._root

    def insert(self, key: Any, value: Any) -> None:
        """Add value under key. O(log N)"""
        if key is None:
            raise InvalidKeyError(key)
        self._root.insert(key, value)
        self._size += 1

    def batch_insert(self, kvs: list[tuple[Any, Any]]) -> None:
        """
        Insert multiple key-value pairs in order.

        Args:
            kvs: List of (key, value) tuples.

        Raises:
            InvalidKeyError: If any key is None. Nothing is inserted.
        """
        for key, _ in kvs:
            if key is None:
                raise InvalidKeyError(key)
        for key, value in kvs:
            self.insert(key, value)

    def get(self, key: Any) -> Any | None:
        """Retrieve the first value under key. O(log N)"""
        if key is None:
            return None
        values = self._root.range_search(key, Comparator.EQ)
        if not values:
            return None
        return values[0]

    def range_search(self, key: Any, comparator: str) -> list[Any]:
        mode = Comparator.parse(comparator)
        if mode is None:
            logger.debug(f"Ignoring range search with comparator {comparator!r}")
            return []
        if key is None:
            return []
        return self._root.range_search(key, mode)

    def has(self, key: Any) -> bool:
        if key is None:
            return False
        return key in self._root.find_leaf(key).keys

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def grow(self) -> None:
        """
        Split the overflowing root under a new internal root.

        This is the only place the tree gains a level.
        """
        old_root = self._root
        sibling = old_root.split()
        new_root = InternalNode(self)
        new_root.keys.append(sibling.get_first_leaf_key())
        new_root.children.append(old_root)
        new_root.children.append(sibling)
        self._root = new_root
        logger.debug(f"Root split, tree height is now {self.height()}")

    def height(self) -> int:
        """Return the number of levels, counting the leaves."""
        levels = 1
        node = self._root
        while isinstance(node, InternalNode):
            node = node.children[0]
            levels += 1
        return levels

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self._root.find_leaf(start), start, end)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncRangeIterator(self._root.find_leaf(start), start, end)

    def dump(self) -> str:
        """
        Render the tree level by level.

        Each line is one level; the children of each parent are grouped in
        braces, e.g. "{[4]}\\n{[3], [4, 5]}\\n".
        """
        lines = []
        level: deque[list[Node]] = deque([[self._root]])
        while level:
            next_level: deque[list[Node]] = deque()
            groups = []
            for nodes in level:
                groups.append("{" + ", ".join(str(node) for node in nodes) + "}")
                for node in nodes:
                    if isinstance(node, InternalNode):
                        next_level.append(node.children)
            lines.append(", ".join(groups) + "\n")
            level = next_level
        return "".join(lines)

    def __str__(self) -> str:
        return self.dump()

    def check(self) -> None:
        """
        Verify the structural invariants of the whole tree.

        Raises:
            TreeInvariantError: Naming the first violated invariant.
        """
        leaves: list[LeafNode] = []
        self._check_node(self._root, None, None, leaves)

        if leaves[0].previous is not None:
            raise TreeInvariantError("leftmost leaf has a previous link", leaves[0])
        if leaves[-1].next is not None:
            raise TreeInvariantError("rightmost leaf has a next link", leaves[-1])
        for left, right in zip(leaves, leaves[1:]):
            if left.next is not right:
                raise TreeInvariantError("leaf chain broken", left)
            if right.previous is not left:
                raise TreeInvariantError("leaf chain back-link broken", right)

        chained_keys = [key for leaf in leaves for key in leaf.keys]
        if any(a >= b for a, b in zip(chained_keys, chained_keys[1:])):
            raise TreeInvariantError("leaf chain keys are not globally ascending")

    def _check_node(
        self,
        node: Node,
        low: Any | None,
        high: Any | None,
        leaves: list[LeafNode],
    ) -> None:
        keys = node.keys
        if any(a >= b for a, b in zip(keys, keys[1:])):
            raise TreeInvariantError("keys not ascending", node)
        for key in keys:
            if low is not None and key < low:
                raise TreeInvariantError(f"{key!r} below lower bound {low!r}", node)
            if high is not None and key >= high:
                raise TreeInvariantError(f"{key!r} not below upper bound {high!r}", node)

        if isinstance(node, LeafNode):
            if len(node.values) != len(keys):
                raise TreeInvariantError("keys and value buckets differ in length", node)
            if not all(node.values):
                raise TreeInvariantError("empty value bucket", node)
            leaves.append(node)
            return

        if len(node.children) != len(keys) + 1:
            raise TreeInvariantError("child count is not key count plus one", node)
        for i, separator in enumerate(keys):
            first = node.children[i + 1].get_first_leaf_key()
            if first != separator:
                raise TreeInvariantError(
                    f"separator {separator!r} differs from first leaf key {first!r}", node
                )
        bounds = [low, *keys, high]
        for i, child in enumerate(node.children):
            self._check_node(child, bounds[i], bounds[i + 1], leaves)


class _LeafCursor:
    """Position within the leaf chain: a leaf, a key slot and a bucket offset."""

    def __init__(self, leaf: LeafNode | None, start: Any | None, end: Any | None) -> None:
        self._leaf = leaf
        self._slot = 0
        self._offset = 0
        self._start = start
        self._end = end

    def _advance(self) -> tuple[Any, Any] | None:
        """Return the next key-value pair, or None once the range is exhausted."""
        while self._leaf is not None:
            if self._slot >= len(self._leaf.keys):
                self._leaf = self._leaf.next
                self._slot = 0
                continue

            key = self._leaf.keys[self._slot]
            if self._start is not None and key < self._start:
                self._slot += 1
                continue
            if self._end is not None and key >= self._end:
                self._leaf = None
                break

            bucket = self._leaf.values[self._slot]
            value = bucket[self._offset]
            self._offset += 1
            if self._offset >= len(bucket):
                self._slot += 1
                self._offset = 0
            return key, value
        return None


class _RangeIterator(_LeafCursor, Iterator[tuple[Any, Any]]):
    """Iterator walking the leaf chain of a B+ Tree."""

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        item = self._advance()
        if item is None:
            raise StopIteration
        return item


class _AsyncRangeIterator(_LeafCursor, AsyncIterator[tuple[Any, Any]]):
    """Async iterator walking the leaf chain of a B+ Tree (in-memory, no I/O)."""

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        item = self._advance()
        if item is None:
            raise StopAsyncIteration
        return item
