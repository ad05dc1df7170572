"""
Internal and leaf nodes of the B+ tree.

Nodes hold a reference to the tree that owns them so every level of an
insert can read the branching factor and re-check the current root.
"""

import bisect
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from bptree.models.comparator import Comparator

if TYPE_CHECKING:
    from bptree.models.sortedcontainers.b_plus_tree import BPlusTree

logger = logging.getLogger(__name__)


class Node(ABC):
    """
    Base class for tree nodes.

    Attributes:
        tree: The owning tree (root reference and branching factor).
        keys: Strictly ascending keys, no duplicates within one node.
    """

    def __init__(self, tree: "BPlusTree") -> None:
        self.tree = tree
        self.keys: list[Any] = []

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """Store value under key somewhere below this node, splitting as needed."""
        pass

    @abstractmethod
    def get_first_leaf_key(self) -> Any | None:
        """Return the smallest key reachable from this node."""
        pass

    @abstractmethod
    def split(self) -> "Node":
        """Move the upper half of this node into a new sibling and return it."""
        pass

    @abstractmethod
    def range_search(self, key: Any, comparator: Comparator) -> list[Any]:
        """Collect the values matching comparator against key, in key order."""
        pass

    @abstractmethod
    def is_overflow(self) -> bool:
        """Whether this node holds more entries than the branching factor allows."""
        pass

    @abstractmethod
    def find_leaf(self, key: Any | None) -> "LeafNode":
        """Return the leaf key belongs in, or the leftmost leaf for None."""
        pass

    def _search(self, key: Any) -> tuple[int, bool]:
        """Binary search keys. Returns (index, found); index is the insertion point if absent."""
        index = bisect.bisect_left(self.keys, key)
        found = index < len(self.keys) and self.keys[index] == key
        return index, found

    def _check_root_overflow(self) -> None:
        if self.tree.root.is_overflow():
            self.tree.grow()

    def __str__(self) -> str:
        return str(self.keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keys!r})"


class InternalNode(Node):
    """
    Routing node holding separator keys and owned children.

    keys[i] is the first leaf key under children[i + 1]; everything under
    children[i] is smaller, everything under children[i + 1] is at least keys[i].
    """

    def __init__(self, tree: "BPlusTree") -> None:
        super().__init__(tree)
        self.children: list[Node] = []

    def get_first_leaf_key(self) -> Any | None:
        return self.children[0].get_first_leaf_key()

    def is_overflow(self) -> bool:
        return len(self.children) > self.tree.branching_factor

    def _route(self, key: Any) -> Node:
        # An exact separator match belongs to the right-hand child
        index, found = self._search(key)
        return self.children[index + 1 if found else index]

    def insert(self, key: Any, value: Any) -> None:
        child = self._route(key)
        child.insert(key, value)

        if child.is_overflow():
            sibling = child.split()
            separator = sibling.get_first_leaf_key()
            index, found = self._search(separator)
            if found:
                self.children[index + 1] = sibling
            else:
                self.keys.insert(index, separator)
                self.children.insert(index + 1, sibling)

        self._check_root_overflow()

    def split(self) -> "InternalNode":
        begin = len(self.keys) // 2 + 1
        sibling = InternalNode(self.tree)
        sibling.keys = self.keys[begin:]
        sibling.children = self.children[begin:]

        # keys[begin - 1] moves up to the parent and stays in neither half
        del self.keys[begin - 1:]
        del self.children[begin:]

        logger.debug(f"Split internal node: {self} | {sibling}")
        return sibling

    def range_search(self, key: Any, comparator: Comparator) -> list[Any]:
        if comparator is Comparator.LE:
            return self.children[0].range_search(key, comparator)
        return self._route(key).range_search(key, comparator)

    def find_leaf(self, key: Any | None) -> "LeafNode":
        if key is None:
            return self.children[0].find_leaf(None)
        return self._route(key).find_leaf(key)


class LeafNode(Node):
    """
    Data node holding keys and their value buckets.

    values[i] lists every value inserted under keys[i], oldest first.
    next/previous chain all leaves in ascending key order; they are
    relational links only, the parent's children list owns the node.
    """

    def __init__(self, tree: "BPlusTree") -> None:
        super().__init__(tree)
        self.values: list[list[Any]] = []
        self.next: LeafNode | None = None
        self.previous: LeafNode | None = None

    def get_first_leaf_key(self) -> Any | None:
        if not self.keys:
            return None
        return self.keys[0]

    def is_overflow(self) -> bool:
        return len(self.values) > self.tree.branching_factor

    def insert(self, key: Any, value: Any) -> None:
        index, found = self._search(key)
        if found:
            self.values[index].append(value)
        else:
            self.keys.insert(index, key)
            self.values.insert(index, [value])

        self._check_root_overflow()

    def split(self) -> "LeafNode":
        mid = (len(self.keys) + 1) // 2
        sibling = LeafNode(self.tree)
        sibling.keys = self.keys[mid:]
        sibling.values = self.values[mid:]
        del self.keys[mid:]
        del self.values[mid:]

        # Splice the sibling into the chain right after this leaf
        sibling.next = self.next
        sibling.previous = self
        if self.next is not None:
            self.next.previous = sibling
        self.next = sibling

        logger.debug(f"Split leaf node: {self} | {sibling}")
        return sibling

    def range_search(self, key: Any, comparator: Comparator) -> list[Any]:
        result: list[Any] = []
        leaf: LeafNode | None = self
        while leaf is not None:
            for tree_key, bucket in zip(leaf.keys, leaf.values):
                if comparator.exhausted(tree_key, key):
                    return result
                if comparator.matches(tree_key, key):
                    result.extend(bucket)
            leaf = leaf.next
        return result

    def find_leaf(self, key: Any | None) -> "LeafNode":
        return self
