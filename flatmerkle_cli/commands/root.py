"""
CLI Root Command

Compute the Merkle root of a list of blocks.

Usage:
    flatmerkle root FILE... [--lines] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from flatmerkle.merkle.flat_tree import FlatMerkleTree
from flatmerkle.schemas.errors import MerkleException
from flatmerkle_cli.blocks import load_blocks


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def build_tree(args: Namespace) -> FlatMerkleTree:
    """Load blocks from the command arguments and finalize a tree."""
    blocks = load_blocks(args.files, lines=args.lines)
    tree = FlatMerkleTree(*blocks, config=args.cli_config.tree_config())
    tree.finalize()
    return tree


def root_cmd(args: Namespace) -> int:
    """Handle root command."""
    try:
        tree = build_tree(args)
    except (MerkleException, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Computed root over {len(tree)} blocks")

    if args.json or args.cli_config.default_output_format == "json":
        print(json.dumps({
            "algorithm": tree.hash_algorithm,
            "blocks": len(tree),
            "root": tree.to_display_string(),
        }, indent=2))
    else:
        print(tree.to_display_string())

    return EXIT_SUCCESS
