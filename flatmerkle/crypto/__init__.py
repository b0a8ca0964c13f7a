"""
Core cryptographic utilities.

Digest function resolution and hex helpers for Merkle commitments.
"""
from .hashing import (
    DigestFunction,
    DEFAULT_HASH_ALGORITHM,
    sha256,
    get_hash_function,
    digest_size,
    to_hex,
    from_hex,
)

__all__ = [
    "DigestFunction",
    "DEFAULT_HASH_ALGORITHM",
    "sha256",
    "get_hash_function",
    "digest_size",
    "to_hex",
    "from_hex",
]
