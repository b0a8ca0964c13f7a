"""
CLI command modules.
"""

from flatmerkle_cli.commands import root, proof, verify

__all__ = ["root", "proof", "verify"]
