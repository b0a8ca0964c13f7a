"""
Schemas - Inclusion Proof
File: proof.py

Purpose: JSON-friendly representation of an inclusion proof produced by a
finalized flat Merkle tree. Every digest is a 0x-prefixed hex string.
"""

from __future__ import annotations

import re
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flatmerkle.crypto.hashing import DEFAULT_HASH_ALGORITHM, from_hex, to_hex


_HEX_PATTERN = re.compile(r"^0x([0-9a-fA-F]{2})*$")


class InclusionProof(BaseModel):
    """
    Inclusion proof for a single block.

    The siblings are ordered from the leaf level upward and do not include
    the root. The root is carried for convenience only: a verifier that
    wants to trust it must compare it against a root obtained elsewhere.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    algorithm: str = Field(default=DEFAULT_HASH_ALGORITHM, min_length=1)
    block: str = Field(..., description="Proven block (0x hex)")
    leaf_index: int = Field(..., ge=0, description="Index of the leaf in the node array")
    siblings: list[str] = Field(default_factory=list, description="Sibling digests, leaf level first")
    root: str = Field(..., description="Root digest of the tree the proof came from")

    @field_validator("block", "root", mode="after")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Ensure digests and blocks are 0x-prefixed hex."""
        if not _HEX_PATTERN.match(v):
            raise ValueError(f"Expected 0x-prefixed hex, got: {v[:10]}...")
        return v.lower()

    @field_validator("siblings", mode="after")
    @classmethod
    def validate_siblings(cls, v: list[str]) -> list[str]:
        for sibling in v:
            if not _HEX_PATTERN.match(sibling):
                raise ValueError(f"Expected 0x-prefixed hex sibling, got: {sibling[:10]}...")
        return [sibling.lower() for sibling in v]

    @classmethod
    def from_bytes(
        cls,
        block: bytes,
        leaf_index: int,
        siblings: Sequence[bytes],
        root: bytes,
        algorithm: str = DEFAULT_HASH_ALGORITHM,
    ) -> "InclusionProof":
        """Build a proof model from raw digests."""
        return cls(
            algorithm=algorithm,
            block=to_hex(block),
            leaf_index=leaf_index,
            siblings=[to_hex(s) for s in siblings],
            root=to_hex(root),
        )

    def block_bytes(self) -> bytes:
        return from_hex(self.block)

    def sibling_bytes(self) -> list[bytes]:
        """Decode the sibling digests back to bytes."""
        return [from_hex(s) for s in self.siblings]

    def root_bytes(self) -> bytes:
        return from_hex(self.root)
