"""
CLI Verify Command

Verify an inclusion proof against a tree rebuilt from the given blocks,
and optionally against a trusted root.

Usage:
    flatmerkle verify (--block TEXT | --block-file PATH) --sibling HEX... FILE...
    flatmerkle verify --proof proof.json FILE... [--root HEX] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from flatmerkle.crypto.hashing import from_hex
from flatmerkle.merkle.merkle_proofs import MerkleVerifier
from flatmerkle.schemas.errors import (
    BlockNotFoundException,
    MerkleException,
    RootMismatchException,
    VerificationMismatchException,
)
from flatmerkle.schemas.proof import InclusionProof
from flatmerkle_cli.blocks import load_block
from flatmerkle_cli.commands.root import build_tree


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    verified: bool = False
    root: str = ""
    trusted_root_checked: bool = False
    error: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if not d["error"]:
            del d["error"]
        return d


def _resolve_inputs(args: Namespace) -> tuple[bytes, list[bytes], bytes | None]:
    """Collect block, siblings and trusted root from the arguments."""
    trusted_root = from_hex(args.root) if args.root else None

    if args.proof:
        proof = InclusionProof.model_validate_json(Path(args.proof).read_text(encoding="utf-8"))
        if args.block is not None or args.block_file:
            block = load_block(args.block, args.block_file)
        else:
            block = proof.block_bytes()
        return block, proof.sibling_bytes(), trusted_root

    block = load_block(args.block, args.block_file)
    siblings = [from_hex(s) for s in (args.sibling or [])]
    return block, siblings, trusted_root


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"verified: {str(summary.verified).lower()}")
    if summary.root:
        print(f"root: {summary.root}")
    if summary.trusted_root_checked:
        print("trusted_root: checked")
    if summary.error:
        print(f"error: {summary.error.get('message', '')}")


def verify_cmd(args: Namespace) -> int:
    """Handle verify command."""
    try:
        block, siblings, trusted_root = _resolve_inputs(args)
        tree = build_tree(args)
    except (MerkleException, FileNotFoundError, ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = VerifySummary(root=tree.to_display_string())

    try:
        if trusted_root is not None:
            MerkleVerifier.verify_against_root(tree, block, siblings, trusted_root)
            summary.trusted_root_checked = True
        else:
            tree.verify(block, siblings)
        summary.verified = True
    except (VerificationMismatchException, RootMismatchException, BlockNotFoundException) as e:
        logger.info(f"Verification failed: {e}")
        summary.error = e.to_error_model().model_dump()

    if args.json or args.cli_config.default_output_format == "json":
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    return EXIT_SUCCESS if summary.verified else EXIT_VERIFICATION_FAILED
