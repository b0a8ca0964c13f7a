"""flatmerkle - Merkle tree commitments and inclusion proofs"""

from .merkle import (
    FlatMerkleTree,
    MerkleTree,
    MerkleProver,
    MerkleVerifier,
)
from .schemas import MerkleException, InclusionProof
from .config import TreeConfig

__version__ = "0.1.0"

__all__ = [
    "FlatMerkleTree",
    "MerkleTree",
    "MerkleProver",
    "MerkleVerifier",
    "MerkleException",
    "InclusionProof",
    "TreeConfig",
]
