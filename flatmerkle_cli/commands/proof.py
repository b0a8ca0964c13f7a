"""
CLI Proof Command

Generate an inclusion proof for one block.

Usage:
    flatmerkle proof (--block TEXT | --block-file PATH) FILE... [--lines] [--json]
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace

from flatmerkle.merkle.merkle_proofs import MerkleProver
from flatmerkle.schemas.errors import MerkleException
from flatmerkle_cli.blocks import load_block
from flatmerkle_cli.commands.root import build_tree


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def proof_cmd(args: Namespace) -> int:
    """Handle proof command."""
    try:
        block = load_block(args.block, args.block_file)
        tree = build_tree(args)
        proof = MerkleProver.prove(tree, block)
    except (MerkleException, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Generated proof with {len(proof.siblings)} siblings")

    if args.json or args.cli_config.default_output_format == "json":
        print(proof.model_dump_json(indent=2))
    else:
        for sibling in proof.siblings:
            print(sibling)

    return EXIT_SUCCESS
