"""
Merkle Block and Node Model

Immutable byte wrappers for tree input (Block) and tree output (TreeNode),
plus the domain-separated hashing that turns one into the other.

Hashing Rules:
1. Leaf digest:     H(0x00 || block_bytes)
2. Internal digest: H(0x01 || left_digest || right_digest)

The one-byte prefixes keep leaf and internal digests in disjoint domains,
so the bytes of an internal node can never be presented as a leaf (or the
reverse) to forge a proof.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from flatmerkle.crypto.hashing import DigestFunction
from flatmerkle.schemas.errors import HashComputationException, NilBlockException


LEAF_PREFIX: bytes = b"\x00"
INTERNAL_PREFIX: bytes = b"\x01"


BlockLike = Union["Block", bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Block:
    """
    An opaque unit of input data.

    Identity is byte-equality. Mutable buffers are copied on the way in,
    so later changes by the caller cannot reach the tree.
    """
    data: bytes

    @classmethod
    def coerce(cls, value: Optional[BlockLike]) -> "Block":
        """
        Normalize a caller-supplied value into a Block.

        Raises:
            NilBlockException: If value is None
            TypeError: If value is not a bytes-like object
        """
        if value is None:
            raise NilBlockException()
        if isinstance(value, Block):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls(bytes(value))
        raise TypeError(
            f"Block must be bytes-like, got {type(value).__name__}"
        )

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def hex(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class TreeNode:
    """
    A single digest slot of a Merkle tree.

    Only produced by hash_leaf() and hash_internal(). The wrapped bytes are
    immutable, so every value handed to a caller is already detached from
    the tree's node array.
    """
    digest: bytes

    def __bytes__(self) -> bytes:
        return self.digest

    def __len__(self) -> int:
        return len(self.digest)

    def copy(self) -> bytes:
        """Return the digest bytes for a caller."""
        return bytes(self.digest)

    def hex(self) -> str:
        return self.digest.hex()


def _digest(
    payload: bytes,
    hash_function: DigestFunction,
    expected_size: Optional[int],
) -> TreeNode:
    try:
        digest = hash_function(payload)
    except Exception as e:
        raise HashComputationException(
            f"Digest computation failed: {e}",
            details={"payload_size": len(payload)},
        ) from e

    if not isinstance(digest, (bytes, bytearray)):
        raise HashComputationException(
            f"Digest function returned {type(digest).__name__}, expected bytes"
        )
    if expected_size is not None and len(digest) != expected_size:
        raise HashComputationException(
            f"Digest function returned {len(digest)} bytes, expected {expected_size}",
            details={"expected_size": expected_size, "actual_size": len(digest)},
        )
    return TreeNode(bytes(digest))


def hash_leaf(
    block: BlockLike,
    hash_function: DigestFunction,
    expected_size: Optional[int] = None,
) -> TreeNode:
    """
    Compute the leaf digest of a block: H(0x00 || block).

    Args:
        block: Block to hash
        hash_function: Digest function
        expected_size: Required digest length, if known

    Returns:
        Leaf TreeNode

    Raises:
        HashComputationException: If the digest function fails or returns
            a digest of the wrong length
    """
    return _digest(LEAF_PREFIX + bytes(Block.coerce(block)), hash_function, expected_size)


def hash_internal(
    left: Union[TreeNode, bytes],
    right: Union[TreeNode, bytes],
    hash_function: DigestFunction,
    expected_size: Optional[int] = None,
) -> TreeNode:
    """
    Compute the digest of an internal node: H(0x01 || left || right).

    Args:
        left: Left child digest
        right: Right child digest
        hash_function: Digest function
        expected_size: Required digest length, if known

    Returns:
        Internal TreeNode
    """
    return _digest(
        INTERNAL_PREFIX + bytes(left) + bytes(right),
        hash_function,
        expected_size,
    )


__all__ = [
    "LEAF_PREFIX",
    "INTERNAL_PREFIX",
    "BlockLike",
    "Block",
    "TreeNode",
    "hash_leaf",
    "hash_internal",
]
