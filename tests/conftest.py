"""
Shared pytest fixtures for B+ tree tests.
"""

import random

import pytest

from bptree import BPlusTree


@pytest.fixture
def tree():
    """Provide an empty tree with the default branching factor."""
    return BPlusTree()


@pytest.fixture
def populated_tree():
    """Provide a tree holding keys 1..23 ascending, each valued by its string."""
    tree = BPlusTree(3)
    for i in range(1, 24):
        tree.insert(i, str(i))
    return tree


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        (5, "five"),
        (4, "four"),
        (3, "three"),
        (6, "six"),
        (7, "seven"),
    ]


@pytest.fixture
def random_entries():
    """Provide a reproducible shuffled workload with duplicate keys."""
    rng = random.Random(1234)
    return [(rng.randint(0, 150), f"value{i}") for i in range(600)]
