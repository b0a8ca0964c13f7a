"""
Merkle Trees and Commitments
Deterministic Merkle tree construction + proof generation/verification.

This module provides:
- FlatMerkleTree: Array-backed tree with insert/finalize/proof/verify
- MerkleTree: Pointer-linked tree built once, root and full re-verify only
- Block, TreeNode: Byte wrappers for input blocks and digests
- MerkleProver, MerkleVerifier: Proof packaging and trusted-root checks

Canonical Commitment Rules (FlatMerkleTree):
1. Leaf hashing: H(0x00 || block)
2. Internal hashing: H(0x01 || left || right)
3. Padding: Duplicate the last block if the block count is odd
4. Empty tree: finalize() raises EmptyTreeException

Usage:
    from flatmerkle.merkle import FlatMerkleTree

    tree = FlatMerkleTree(b"Hello", b"Hi", b"Hey", b"Hola")
    tree.finalize()

    root = tree.root_hash()
    proof = tree.proof(b"Hey")
    tree.verify(b"Hey", proof)
"""
from .models import (
    LEAF_PREFIX,
    INTERNAL_PREFIX,
    Block,
    TreeNode,
    hash_leaf,
    hash_internal,
)

from .flat_tree import (
    FlatMerkleTree,
    left_child,
    right_child,
    parent,
    sibling,
    is_left_child,
)

from .node_tree import (
    Storable,
    BytesContent,
    Node,
    MerkleTree,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Model
    "LEAF_PREFIX",
    "INTERNAL_PREFIX",
    "Block",
    "TreeNode",
    "hash_leaf",
    "hash_internal",
    # Flat tree
    "FlatMerkleTree",
    "left_child",
    "right_child",
    "parent",
    "sibling",
    "is_left_child",
    # Node-graph tree
    "Storable",
    "BytesContent",
    "Node",
    "MerkleTree",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]
