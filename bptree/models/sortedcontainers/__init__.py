"""
Sorted container implementations for the index.
"""

from bptree.models.sortedcontainers.b_plus_tree import BPlusTree

__all__ = ["BPlusTree"]
