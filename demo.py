"""
Demo driver: fill a B+ tree with random picks and run a range search.

Usage:
    LOG_LEVEL=DEBUG python demo.py --inserts 400 --branching-factor 3 --seed 7
"""

import argparse
import logging
import os
import random

from bptree import BPlusTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

SAMPLE_KEYS = (0.0, 0.5, 0.2, 0.8)
QUERY_KEY = 0.2


def run_demo(
    inserts: int = 400,
    branching_factor: int = BPlusTree.DEFAULT_BRANCHING_FACTOR,
    seed: int | None = None,
) -> tuple[BPlusTree, list[float]]:
    """
    Insert random sample keys (each stored as its own value) and filter by ">=".

    Returns:
        The populated tree and the values found at or above QUERY_KEY.
    """
    rng = random.Random(seed)
    tree = BPlusTree(branching_factor)
    for _ in range(inserts):
        key = rng.choice(SAMPLE_KEYS)
        tree.insert(key, key)
        logger.debug(f"Tree structure:\n{tree}")

    filtered = tree.range_search(QUERY_KEY, ">=")
    logger.info(f"Filtered values: {filtered}")
    return tree, filtered


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="B+ tree demo driver")
    parser.add_argument(
        "--inserts",
        type=int,
        default=400,
        help="Number of random insertions (default: 400)",
    )
    parser.add_argument(
        "--branching-factor",
        type=int,
        default=BPlusTree.DEFAULT_BRANCHING_FACTOR,
        help="Branching factor of the tree",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs",
    )
    args = parser.parse_args(argv)

    try:
        tree, filtered = run_demo(args.inserts, args.branching_factor, args.seed)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid demo configuration: {e}")
        return 2

    logger.info(
        f"Inserted {tree.size()} values, tree height {tree.height()}, "
        f"{len(filtered)} values at or above {QUERY_KEY}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
