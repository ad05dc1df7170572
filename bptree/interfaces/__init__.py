"""
Abstract base classes and protocols for the index.
"""

from bptree.interfaces.range_iterable import RangeIterable
from bptree.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
