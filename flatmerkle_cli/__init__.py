"""
flatmerkle CLI

Command-line interface for computing Merkle roots and inclusion proofs.

Usage:
    python -m flatmerkle_cli root a.txt b.txt c.txt
    python -m flatmerkle_cli proof --block-file b.txt a.txt b.txt c.txt --json
    python -m flatmerkle_cli verify --proof proof.json a.txt b.txt c.txt --root 0x...
"""

__version__ = "0.1.0"
