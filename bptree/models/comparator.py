"""
Comparator for range searches over the index.
"""

from enum import Enum
from typing import Any


class Comparator(str, Enum):
    """Range search mode, valued by its textual operator."""

    LE = "<="  # Every key at most the query
    EQ = "=="  # Exactly the query
    GE = ">="  # Every key at least the query

    @classmethod
    def parse(cls, raw: Any) -> "Comparator | None":
        """Return the comparator spelled by raw, or None if unrecognised."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            return None

    def matches(self, tree_key: Any, query: Any) -> bool:
        """Whether a stored key satisfies this comparator against query."""
        if self is Comparator.EQ:
            return tree_key == query
        if self is Comparator.LE:
            return tree_key <= query
        return tree_key >= query

    def exhausted(self, tree_key: Any, query: Any) -> bool:
        """
        Whether no key at or after tree_key can match any more.

        Keys are visited in ascending order, so once a key passes the query
        neither "==" nor "<=" can produce another result.
        """
        return self is not Comparator.GE and tree_key > query
