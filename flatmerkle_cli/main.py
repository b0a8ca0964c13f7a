"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m flatmerkle_cli root FILE... [--lines] [--json]
    python -m flatmerkle_cli proof --block TEXT FILE... [--lines] [--json]
    python -m flatmerkle_cli verify --block TEXT --sibling HEX ... FILE... [--root HEX]
    python -m flatmerkle_cli verify --proof proof.json FILE... [--root HEX]
    python -m flatmerkle_cli config --show

Environment Variables:
    FLATMERKLE_HASH_ALGORITHM   hashlib algorithm (default: sha256)
    FLATMERKLE_LOG_LEVEL        Log level (default: WARNING)
    FLATMERKLE_LOG_FILE         Optional log file
    FLATMERKLE_OUTPUT_FORMAT    "human" or "json"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from flatmerkle_cli import __version__
from flatmerkle_cli.commands import proof, root, verify
from flatmerkle_cli.config import load_config


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_block_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files",
        nargs="+",
        help="Input files; each file is one block (see --lines)",
    )
    parser.add_argument(
        "--lines",
        action="store_true",
        default=False,
        help="Treat every line of the input files as a separate block",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="flatmerkle",
        description="flatmerkle CLI - Compute Merkle roots, build and verify inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./flatmerkle.json or ~/.config/flatmerkle/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--hash-algorithm",
        type=str,
        default=None,
        help="hashlib algorithm used for leaf and node hashing (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the Merkle root of the input blocks",
    )
    _add_block_source_args(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Generate an inclusion proof for one block",
    )
    _add_block_source_args(proof_parser)
    proof_block = proof_parser.add_mutually_exclusive_group(required=True)
    proof_block.add_argument("--block", type=str, help="Block to prove, as UTF-8 text")
    proof_block.add_argument("--block-file", type=str, help="File whose contents are the block to prove")
    proof_parser.set_defaults(func=proof.proof_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an inclusion proof",
        description="Rebuild the tree from the input blocks and check the proof against it.",
    )
    _add_block_source_args(verify_parser)
    verify_block = verify_parser.add_mutually_exclusive_group()
    verify_block.add_argument("--block", type=str, help="Block to verify, as UTF-8 text")
    verify_block.add_argument("--block-file", type=str, help="File whose contents are the block to verify")
    verify_parser.add_argument(
        "--sibling",
        action="append",
        default=None,
        help="Sibling digest (0x hex), leaf level first; repeat for each step",
    )
    verify_parser.add_argument(
        "--proof",
        type=str,
        default=None,
        help="JSON proof written by 'proof --json'",
    )
    verify_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Trusted root (0x hex) the tree must also match",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Show effective configuration",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.show:
        config = args.cli_config
        print(json.dumps({
            "hash_algorithm": config.hash_algorithm,
            "log_level": config.log_level,
            "log_file": config.log_file,
            "default_output_format": config.default_output_format,
        }, indent=2))
        return EXIT_SUCCESS

    print("Usage: flatmerkle config --show")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
        if args.hash_algorithm:
            config.hash_algorithm = args.hash_algorithm
        # Reject unknown algorithms before any command runs
        config.tree_config()
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
