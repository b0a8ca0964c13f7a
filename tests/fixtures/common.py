"""
Common test fixtures shared by all modules.

Provides factory functions for blocks and trees, plus digest functions
with controlled behaviour for error-path tests.
"""

import hashlib
from typing import Callable, Optional, Sequence

from flatmerkle.merkle.flat_tree import FlatMerkleTree


def make_blocks(count: int, prefix: str = "block") -> list[bytes]:
    """Distinct blocks block0, block1, ..."""
    return [f"{prefix}{i}".encode() for i in range(count)]


def make_tree(
    blocks: Optional[Sequence[bytes]] = None,
    finalize: bool = True,
    **kwargs,
) -> FlatMerkleTree:
    """
    Create a FlatMerkleTree, finalized by default.

    Args:
        blocks: Initial blocks (default: four distinct blocks)
        finalize: Whether to call finalize()
        **kwargs: Passed to FlatMerkleTree
    """
    if blocks is None:
        blocks = make_blocks(4)
    tree = FlatMerkleTree(*blocks, **kwargs)
    if finalize:
        tree.finalize()
    return tree


def make_failing_hash_function(fail_after: int = 0) -> Callable[[bytes], bytes]:
    """SHA-256 that raises RuntimeError once it has been called fail_after times."""
    calls = {"count": 0}

    def failing(data: bytes) -> bytes:
        if calls["count"] >= fail_after:
            raise RuntimeError("digest write failed")
        calls["count"] += 1
        return hashlib.sha256(data).digest()

    return failing


def make_counting_hash_function() -> tuple[Callable[[bytes], bytes], list[bytes]]:
    """SHA-256 that records every payload it hashes."""
    seen: list[bytes] = []

    def counting(data: bytes) -> bytes:
        seen.append(data)
        return hashlib.sha256(data).digest()

    return counting, seen


def reference_leaf(block: bytes) -> bytes:
    """Leaf digest computed directly with hashlib."""
    return hashlib.sha256(b"\x00" + block).digest()


def reference_internal(left: bytes, right: bytes) -> bytes:
    """Internal digest computed directly with hashlib."""
    return hashlib.sha256(b"\x01" + left + right).digest()
