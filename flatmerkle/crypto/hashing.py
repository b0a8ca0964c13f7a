"""
Digest Functions
Pluggable fixed-output hashing for Merkle commitments.

This module provides:
- SHA-256 hashing for raw bytes (the default digest)
- Resolution of hashlib algorithm names into digest functions
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Only fixed-length digests are accepted; SHAKE variants are rejected
- Always hash raw bytes exactly as given
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from typing import Callable


DigestFunction = Callable[[bytes], bytes]

DEFAULT_HASH_ALGORITHM = "sha256"

# hashlib algorithms whose output length is chosen by the caller
_VARIABLE_LENGTH_ALGORITHMS = frozenset({"shake_128", "shake_256"})


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def get_hash_function(name: str) -> DigestFunction:
    """
    Resolve a hashlib algorithm name into a digest function.

    Args:
        name: Algorithm name as understood by hashlib.new (e.g. "sha256",
              "sha3_256", "blake2b")

    Returns:
        Callable mapping bytes to a fixed-length digest

    Raises:
        ValueError: If the algorithm is unknown or has variable-length output
    """
    normalized = name.strip().lower()
    if normalized == DEFAULT_HASH_ALGORITHM:
        return sha256

    if normalized in _VARIABLE_LENGTH_ALGORITHMS:
        raise ValueError(
            f"Hash algorithm {name!r} has variable-length output; "
            f"a fixed-length digest is required"
        )

    try:
        hashlib.new(normalized)
    except ValueError as e:
        raise ValueError(f"Unsupported hash algorithm: {name!r}") from e

    def digest(data: bytes) -> bytes:
        return hashlib.new(normalized, data).digest()

    digest.__name__ = normalized
    return digest


def digest_size(hash_function: DigestFunction) -> int:
    """
    Measure the output length of a digest function.

    Args:
        hash_function: Digest function to measure

    Returns:
        Number of bytes produced per digest
    """
    return len(hash_function(b""))


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Args:
        data: Raw bytes

    Returns:
        Hex string with 0x prefix (e.g., "0x1234abcd")

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "DigestFunction",
    "DEFAULT_HASH_ALGORITHM",
    "sha256",
    "get_hash_function",
    "digest_size",
    "to_hex",
    "from_hex",
]
