"""
Node-Graph Merkle Tree
Pointer-linked Merkle tree built once from hashable content objects.

This tree exposes only its root and a full recursive recompute check.
It has no insert, finalize or proof operations; use FlatMerkleTree for
inclusion proofs.

Hashing Rules:
1. Leaf hash: item.calculate_hash() (the content decides how it hashes)
2. Parent hash: H(left || right)
3. Padding: an odd leaf count duplicates the last leaf (marked dup=True);
   an odd intermediate level pairs its last node with itself

Security Note:
Unlike FlatMerkleTree there is no leaf/internal domain prefix here, so an
internal digest could be replayed as leaf content. This is kept as is:
adding prefixes would change every root this tree has ever produced.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

from flatmerkle.crypto.hashing import DigestFunction, sha256
from flatmerkle.schemas.errors import EmptyTreeException, HashComputationException


logger = logging.getLogger(__name__)


class Storable(Protocol):
    """
    Protocol for content stored in a node-graph tree.
    """

    def calculate_hash(self) -> bytes:
        """Digest of this item."""
        ...

    def equals(self, other: Any) -> bool:
        """Content equality with another item."""
        ...


@dataclass(frozen=True)
class BytesContent:
    """Storable wrapping raw bytes, hashed with a plain digest."""
    data: bytes
    hash_function: DigestFunction = sha256

    def calculate_hash(self) -> bytes:
        return self.hash_function(self.data)

    def equals(self, other: Any) -> bool:
        return isinstance(other, BytesContent) and self.data == other.data

    def __str__(self) -> str:
        return self.data.decode("utf-8", errors="replace")


class Node:
    """A node of a node-graph tree; leaves carry the stored item."""

    def __init__(
        self,
        hash: bytes,
        tree: "MerkleTree",
        item: Optional[Storable] = None,
        left: Optional["Node"] = None,
        right: Optional["Node"] = None,
        dup: bool = False,
        leaf: bool = False,
    ) -> None:
        self.hash = hash
        self.tree = tree
        self.item = item
        self.left = left
        self.right = right
        self.parent: Optional[Node] = None
        self.dup = dup
        self.leaf = leaf

    def verify_node(self) -> bytes:
        """
        Recompute this node's hash from the leaves below it.

        Stored hashes are ignored; every leaf item is hashed again.
        """
        if self.leaf:
            return self.tree._content_hash(self.item)

        left = self.left.verify_node()
        right = self.right.verify_node()
        return self.tree._hash_pair(left, right)

    def __str__(self) -> str:
        return f"{self.leaf} {self.dup} {self.hash.hex()} {self.item}"


class MerkleTree:
    """
    Merkle tree built once from an ordered list of Storable items.

    Attributes:
        root: Root node
        leaves: Leaf nodes in content order, including the padding duplicate
    """

    def __init__(
        self,
        content: Sequence[Storable],
        hash_function: Optional[DigestFunction] = None,
    ) -> None:
        """
        Build the tree.

        Args:
            content: Non-empty ordered sequence of items
            hash_function: Digest for parent hashes (default: SHA-256)

        Raises:
            EmptyTreeException: If content is empty
            HashComputationException: If any hash cannot be computed
        """
        if not content:
            raise EmptyTreeException("cannot make a merkle tree without any contents")

        self._hash_function: DigestFunction = hash_function or sha256
        self.root, self.leaves = self._build_tree(content)
        self._merkle_root = self.root.hash

        logger.debug("Built node tree over %d items", len(content))

    @property
    def merkle_root(self) -> bytes:
        """Root hash as computed at build time (not re-verified)."""
        return self._merkle_root

    def verify_tree(self) -> bool:
        """
        Recompute the whole tree and compare with the stored root.

        Returns:
            True if the recomputed root equals merkle_root
        """
        return self.root.verify_node() == self._merkle_root

    def _build_tree(self, content: Sequence[Storable]) -> tuple[Node, list[Node]]:
        leaves = [
            Node(hash=self._content_hash(item), tree=self, item=item, leaf=True)
            for item in content
        ]

        if len(leaves) % 2 == 1:
            last = leaves[-1]
            leaves.append(Node(hash=last.hash, tree=self, item=last.item, dup=True, leaf=True))

        return self._build_intermediate(leaves), leaves

    def _build_intermediate(self, nodes: list[Node]) -> Node:
        parents: list[Node] = []
        for i in range(0, len(nodes), 2):
            left = nodes[i]
            right = nodes[i + 1] if i + 1 < len(nodes) else left

            node = Node(
                hash=self._hash_pair(left.hash, right.hash),
                tree=self,
                left=left,
                right=right,
            )
            left.parent = node
            right.parent = node
            parents.append(node)

            if len(nodes) == 2:
                return node

        return self._build_intermediate(parents)

    def _hash_pair(self, left: bytes, right: bytes) -> bytes:
        try:
            return self._hash_function(left + right)
        except Exception as e:
            raise HashComputationException(f"Digest computation failed: {e}") from e

    def _content_hash(self, item: Storable) -> bytes:
        try:
            return item.calculate_hash()
        except Exception as e:
            raise HashComputationException(
                f"Content hash computation failed: {e}",
                details={"item": str(item)},
            ) from e


__all__ = [
    "Storable",
    "BytesContent",
    "Node",
    "MerkleTree",
]
