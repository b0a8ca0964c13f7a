"""
Test fixtures package for flatmerkle tests.

This package provides factory functions and golden vectors:
- common.py: Block factories, tree factories, digest helpers
- vectors.py: Pinned roots computed independently of this code

Usage:
    from fixtures import make_tree, GREETINGS

    def test_something():
        tree = make_tree(GREETINGS)
"""

from .common import (
    make_blocks,
    make_tree,
    make_failing_hash_function,
    make_counting_hash_function,
    reference_leaf,
    reference_internal,
)

from .vectors import (
    GREETINGS,
    GOLDEN_LEAVES,
    GOLDEN_ROOT_1,
    GOLDEN_ROOT_3,
    GOLDEN_ROOT_4,
    GOLDEN_ROOT_5,
    NODE_TREE_VECTORS,
)

__all__ = [
    # Common
    "make_blocks",
    "make_tree",
    "make_failing_hash_function",
    "make_counting_hash_function",
    "reference_leaf",
    "reference_internal",
    # Vectors
    "GREETINGS",
    "GOLDEN_LEAVES",
    "GOLDEN_ROOT_1",
    "GOLDEN_ROOT_3",
    "GOLDEN_ROOT_4",
    "GOLDEN_ROOT_5",
    "NODE_TREE_VECTORS",
]
