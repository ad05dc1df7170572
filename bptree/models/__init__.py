"""
Data models for the index.
"""

from bptree.models.comparator import Comparator
from bptree.models.exceptions import InvalidKeyError, TreeInvariantError
from bptree.models.nodes import InternalNode, LeafNode, Node

__all__ = [
    "Comparator",
    "InvalidKeyError",
    "TreeInvariantError",
    "Node",
    "InternalNode",
    "LeafNode",
]
