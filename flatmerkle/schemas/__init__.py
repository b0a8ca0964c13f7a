"""
Schemas
File: __init__.py

Purpose: Export the error taxonomy and proof schema.
"""

# Error models and exceptions
from .errors import (
    AlreadyFinalizedException,
    BlockNotFoundException,
    EmptyTreeException,
    ErrorCodes,
    HashComputationException,
    MerkleError,
    MerkleException,
    NilBlockException,
    NotFinalizedException,
    RootMismatchException,
    VerificationError,
    VerificationMismatchException,
)

# Proof schema
from .proof import InclusionProof

__all__ = [
    # Errors
    "ErrorCodes",
    "MerkleError",
    "VerificationError",
    "MerkleException",
    "NilBlockException",
    "EmptyTreeException",
    "AlreadyFinalizedException",
    "NotFinalizedException",
    "BlockNotFoundException",
    "VerificationMismatchException",
    "RootMismatchException",
    "HashComputationException",
    # Proofs
    "InclusionProof",
]
