"""
Merkle Proofs Convenience Wrappers
Thin wrappers around FlatMerkleTree for packaging and checking proofs.

This module provides class-based interfaces:
- MerkleProver: Generate InclusionProof models
- MerkleVerifier: Verify proofs, optionally against a trusted root

FlatMerkleTree.verify() only checks a proof against the tree's own nodes.
verify_against_root() adds the comparison with an externally supplied
root that a caller needs when the root came from a third party.
"""
from __future__ import annotations

import hmac
import logging
from typing import Sequence

from flatmerkle.crypto.hashing import to_hex
from flatmerkle.merkle.flat_tree import FlatMerkleTree
from flatmerkle.merkle.models import Block, BlockLike
from flatmerkle.schemas.errors import RootMismatchException, VerificationMismatchException
from flatmerkle.schemas.proof import InclusionProof


logger = logging.getLogger(__name__)


class MerkleProver:
    """
    Convenience class for generating inclusion proofs.

    Example:
        >>> tree = FlatMerkleTree(b"a", b"b", b"c")
        >>> tree.finalize()
        >>> proof = MerkleProver.prove(tree, b"b")
        >>> proof.block
        '0x62'
    """

    @staticmethod
    def prove(tree: FlatMerkleTree, block: BlockLike) -> InclusionProof:
        """
        Generate an inclusion proof model for a block.

        Args:
            tree: Finalized tree
            block: Block to prove

        Returns:
            InclusionProof with the siblings, leaf index and root

        Raises:
            NotFinalizedException: If the tree is not finalized
            BlockNotFoundException: If the block is not in the tree
        """
        siblings = tree.proof(block)
        return InclusionProof.from_bytes(
            block=bytes(Block.coerce(block)),
            leaf_index=tree.leaf_index(block),
            siblings=siblings,
            root=tree.root_hash(),
            algorithm=tree.hash_algorithm,
        )


class MerkleVerifier:
    """
    Convenience class for verifying inclusion proofs.
    """

    @staticmethod
    def verify(tree: FlatMerkleTree, block: BlockLike, proof: Sequence[bytes]) -> bool:
        """
        Verify a proof against the tree's stored nodes.

        Returns:
            True if the proof reconstructs the stored path, False on a
            mismatch. Lifecycle and lookup errors are still raised.
        """
        try:
            tree.verify(block, proof)
        except VerificationMismatchException:
            return False
        return True

    @staticmethod
    def verify_against_root(
        tree: FlatMerkleTree,
        block: BlockLike,
        proof: Sequence[bytes],
        trusted_root: bytes,
    ) -> None:
        """
        Verify a proof and check the tree commits to a trusted root.

        Args:
            tree: Finalized tree
            block: Block to check
            proof: Sibling digests from tree.proof()
            trusted_root: Root obtained independently of the tree

        Raises:
            VerificationMismatchException: If the proof does not match the tree
            RootMismatchException: If the tree root is not trusted_root
        """
        tree.verify(block, proof)

        root = tree.root_hash()
        if not hmac.compare_digest(root, bytes(trusted_root)):
            logger.warning(
                "Root mismatch: tree=%s trusted=%s", to_hex(root), to_hex(bytes(trusted_root))
            )
            raise RootMismatchException(
                f"tree root {to_hex(root)} does not match trusted root {to_hex(bytes(trusted_root))}",
                details={"root": to_hex(root), "trusted_root": to_hex(bytes(trusted_root))},
            )

    @staticmethod
    def verify_inclusion_proof(tree: FlatMerkleTree, proof: InclusionProof) -> None:
        """
        Verify an InclusionProof model, trusting the root it carries.

        Raises:
            VerificationMismatchException: If the proof does not match the tree
            RootMismatchException: If the tree root is not proof.root
        """
        MerkleVerifier.verify_against_root(
            tree,
            proof.block_bytes(),
            proof.sibling_bytes(),
            proof.root_bytes(),
        )


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
]
