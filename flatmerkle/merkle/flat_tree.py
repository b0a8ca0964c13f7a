"""
Flat Merkle Tree
Array-backed Merkle tree with a build phase, a one-time finalize, and
inclusion proofs.

The tree is stored as a flat list in level order: root at index 0, the
children of index i at 2i+1 and 2i+2, the parent of index i at (i-1)//2.
With n leaves (n even after padding) the list holds exactly 2n-1 digests and
the last n slots are the leaves in block order.

Lifecycle:
1. Building: blocks are appended with insert() (or passed to the constructor)
2. finalize(): pads an odd block count by duplicating the last block,
   hashes leaves and internal nodes, caches the root
3. Immutable: root_hash(), proof() and verify() may be called any number
   of times; insert() and finalize() are rejected

Thread Safety:
No locking is done. Callers must own the tree exclusively while building.
After finalize() nothing is mutated, so concurrent readers are safe.

Verification Caveat:
verify() checks a proof against this tree's own stored nodes. It does not
compare anything with a root received from elsewhere. To check inclusion
in a commitment published by a third party, also compare root_hash() with
that root (see MerkleVerifier.verify_against_root).
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from flatmerkle.config.runtime import TreeConfig, get_default_config
from flatmerkle.crypto.hashing import DigestFunction, digest_size, to_hex
from flatmerkle.merkle.models import (
    Block,
    BlockLike,
    TreeNode,
    hash_internal,
    hash_leaf,
)
from flatmerkle.schemas.errors import (
    AlreadyFinalizedException,
    BlockNotFoundException,
    EmptyTreeException,
    HashComputationException,
    NilBlockException,
    NotFinalizedException,
    VerificationMismatchException,
)


logger = logging.getLogger(__name__)


def left_child(index: int) -> int:
    return 2 * index + 1


def right_child(index: int) -> int:
    return 2 * index + 2


def parent(index: int) -> int:
    return (index - 1) // 2


def sibling(index: int) -> int:
    """
    Index of the other child of the same parent.

    Left children sit at odd indices and right children at even ones.
    """
    if index % 2 == 0:
        return index - 1
    return index + 1


def is_left_child(index: int) -> bool:
    return index % 2 == 1


class FlatMerkleTree:
    """
    Merkle tree over an ordered list of blocks, backed by a flat node array.

    The root is order sensitive: the same blocks in a different order give
    a different root.

    Example:
        >>> tree = FlatMerkleTree(b"Hello", b"Hi")
        >>> tree.insert(b"Hey")
        >>> tree.finalize()
        >>> proof = tree.proof(b"Hi")
        >>> tree.verify(b"Hi", proof)
    """

    def __init__(
        self,
        *blocks: BlockLike,
        hash_function: Optional[DigestFunction] = None,
        config: Optional[TreeConfig] = None,
    ) -> None:
        """
        Create a tree in the building phase.

        Args:
            *blocks: Optional initial blocks, in order
            hash_function: Digest function; overrides config
            config: Tree configuration; defaults to get_default_config()

        Raises:
            NilBlockException: If any initial block is None
        """
        if hash_function is None:
            config = config or get_default_config()
            hash_function = config.hash_function
            self.hash_algorithm = config.hash_algorithm
        else:
            self.hash_algorithm = getattr(hash_function, "__name__", "custom")

        self._hash_function: DigestFunction = hash_function
        self._digest_size: Optional[int] = None
        self._blocks: list[Block] = [Block.coerce(b) for b in blocks]
        self._original_count = 0
        self._nodes: list[TreeNode] = []
        self._root: Optional[TreeNode] = None
        self._finalized = False

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "building"
        return f"FlatMerkleTree(blocks={len(self._blocks)}, state={state})"

    def __str__(self) -> str:
        return self.to_display_string()

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    @property
    def block_count(self) -> int:
        """Number of blocks, including the padding duplicate once finalized."""
        return len(self._blocks)

    @property
    def digest_size(self) -> Optional[int]:
        """Digest length in bytes; None until finalized."""
        return self._digest_size

    @property
    def blocks(self) -> tuple[bytes, ...]:
        return tuple(b.data for b in self._blocks)

    @property
    def nodes(self) -> tuple[bytes, ...]:
        """Node digests in level order; empty until finalized."""
        return tuple(node.copy() for node in self._nodes)

    def to_display_string(self) -> str:
        """
        Root hash as 0x-prefixed hex.

        Returns:
            "0x..." once finalized, otherwise an empty string
        """
        if not self._finalized:
            return ""
        return to_hex(self._root.copy())

    def root_hash(self) -> bytes:
        """
        Return the root digest.

        Raises:
            NotFinalizedException: If finalize() has not been called
        """
        if not self._finalized:
            raise NotFinalizedException("invalid root hash: Merkle tree not finalized")
        return self._root.copy()

    def insert(self, block: BlockLike) -> None:
        """
        Append a block.

        Raises:
            NilBlockException: If block is None
            AlreadyFinalizedException: If the tree is finalized
        """
        if block is None:
            raise NilBlockException("Block to insert cannot be None")
        if self._finalized:
            raise AlreadyFinalizedException()
        self._blocks.append(Block.coerce(block))

    def finalize(self) -> None:
        """
        Hash the tree and move it into the immutable phase.

        An odd block count is padded by appending a second copy of the last
        block. Leaf digests fill the last n slots of the node array and
        internal digests are computed bottom-up by post-order recursion.

        Nothing is committed until every digest has been computed, so a
        failure leaves the tree exactly as it was before the call.

        Raises:
            AlreadyFinalizedException: If called a second time
            EmptyTreeException: If no blocks were inserted
            HashComputationException: If the digest function fails
        """
        if self._finalized:
            raise AlreadyFinalizedException()
        if not self._blocks:
            raise EmptyTreeException("Failed to finalize: Merkle tree cannot be empty; insert some blocks")

        size = self._measure_digest_size()

        original_count = len(self._blocks)
        blocks = list(self._blocks)
        if len(blocks) % 2 != 0:
            blocks.append(blocks[-1])

        # A full binary tree over n leaves has 2n - 1 nodes
        nodes: list[Optional[TreeNode]] = [None] * (2 * len(blocks) - 1)

        # Leaves take the last n slots; slots before them are internal nodes
        offset = len(nodes) - len(blocks)
        for position, block in enumerate(blocks):
            nodes[offset + position] = hash_leaf(block, self._hash_function, size)

        root = self._hash_subtree(nodes, 0, size)

        self._blocks = blocks
        self._original_count = original_count
        self._nodes = nodes
        self._digest_size = size
        self._root = root
        self._finalized = True

        logger.debug(
            "Finalized tree: %d blocks (%d after padding), %d nodes, root=%s",
            original_count, len(blocks), len(nodes), to_hex(root.digest),
        )

    def leaf_index(self, block: BlockLike) -> int:
        """
        Node-array index of the leaf for a block.

        Matches by byte-equality against the originally inserted blocks.
        When several blocks share the same bytes, the earliest one wins.

        Raises:
            NilBlockException: If block is None
            NotFinalizedException: If the tree is not finalized
            BlockNotFoundException: If no inserted block matches
        """
        if block is None:
            raise NilBlockException()
        self._require_finalized()
        return self._find_leaf(Block.coerce(block))

    def proof(self, block: BlockLike) -> list[bytes]:
        """
        Build the inclusion proof for a block.

        Args:
            block: A block that was inserted before finalize()

        Returns:
            Sibling digests ordered from the leaf level up to, but not
            including, the root

        Raises:
            NilBlockException: If block is None
            NotFinalizedException: If the tree is not finalized
            BlockNotFoundException: If the block was never inserted
        """
        index = self.leaf_index(block)

        proof: list[bytes] = []
        while index > 0:
            proof.append(self._nodes[sibling(index)].copy())
            index = parent(index)

        logger.debug("Built proof with %d siblings", len(proof))
        return proof

    def verify(self, block: BlockLike, proof: Sequence[bytes]) -> None:
        """
        Check a proof against this tree's stored nodes.

        Starting from the block's leaf digest, each proof entry is combined
        with the current digest (current on the left when it is a left
        child) and the result must equal the stored parent digest.

        Returns normally when every proof entry matches. This is only a
        consistency check against this tree; it does not check any root
        supplied from outside.

        Raises:
            NilBlockException: If block is None
            NotFinalizedException: If the tree is not finalized
            BlockNotFoundException: If the block was never inserted
            VerificationMismatchException: On the first step that does not
                reconstruct the stored parent
        """
        self._require_finalized()
        if block is None:
            raise NilBlockException()

        block = Block.coerce(block)
        index = self._find_leaf(block)
        current = hash_leaf(block, self._hash_function, self._digest_size)

        for step, proof_node in enumerate(proof):
            if index == 0:
                raise VerificationMismatchException(
                    f"invalid proof at index {step} for block {block.hex()}; "
                    f"proof has {len(proof)} entries but the path ended at the root",
                    step=step,
                    computed=current.copy(),
                    expected=self._root.copy(),
                )

            sibling_bytes = b"" if proof_node is None else bytes(proof_node)
            if is_left_child(index):
                reconstructed = hash_internal(current, sibling_bytes, self._hash_function, self._digest_size)
            else:
                reconstructed = hash_internal(sibling_bytes, current, self._hash_function, self._digest_size)

            parent_index = parent(index)
            expected = self._nodes[parent_index]

            if reconstructed.digest != expected.digest:
                logger.warning(
                    "Proof step %d mismatch at node %d: got %s, want %s",
                    step, parent_index, reconstructed.hex(), expected.hex(),
                )
                raise VerificationMismatchException(
                    f"invalid proof at index {step} for block {block.hex()}; "
                    f"got: {reconstructed.hex()}, want: {expected.hex()}",
                    step=step,
                    computed=reconstructed.copy(),
                    expected=expected.copy(),
                )

            current = expected
            index = parent_index

    def _require_finalized(self) -> None:
        if not self._finalized:
            raise NotFinalizedException()

    def _find_leaf(self, block: Block) -> int:
        for position in range(self._original_count):
            if self._blocks[position] == block:
                return len(self._nodes) - len(self._blocks) + position

        raise BlockNotFoundException(
            f"block does not exist: {block.hex()}",
            block_hex=to_hex(block.data),
        )

    def _measure_digest_size(self) -> int:
        try:
            return digest_size(self._hash_function)
        except Exception as e:
            raise HashComputationException(f"Digest computation failed: {e}") from e

    def _hash_subtree(self, nodes: list[Optional[TreeNode]], index: int, size: int) -> TreeNode:
        # Every index with a left child also has a right one (2n - 1 slots)
        if left_child(index) >= len(nodes):
            return nodes[index]

        left = self._hash_subtree(nodes, left_child(index), size)
        right = self._hash_subtree(nodes, right_child(index), size)
        nodes[index] = hash_internal(left, right, self._hash_function, size)
        return nodes[index]


__all__ = [
    "FlatMerkleTree",
    "left_child",
    "right_child",
    "parent",
    "sibling",
    "is_left_child",
]
