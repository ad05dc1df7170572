"""
Custom exceptions for the index.
"""


class InvalidKeyError(ValueError):
    """
    Raised when a write receives a key that cannot be indexed.

    The tree is left untouched: the check runs before any mutation.
    """

    def __init__(self, key: object = None):
        """
        Initialize invalid key error.

        Args:
            key: The rejected key.
        """
        self.key = key
        super().__init__(f"Cannot index key {key!r}: keys must not be None")


class TreeInvariantError(Exception):
    """
    Raised by the structural audit when the tree shape is inconsistent.

    This indicates a bug in the split or promotion logic, never bad input.
    """

    def __init__(self, invariant: str, node: object = None):
        """
        Initialize invariant error.

        Args:
            invariant: Description of the violated property.
            node: The node where the violation was found, if any.
        """
        self.invariant = invariant
        self.node = node
        location = f" at node {node}" if node is not None else ""
        super().__init__(f"Tree invariant violated{location}: {invariant}")
