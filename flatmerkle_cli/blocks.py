"""
Block loading for CLI commands.

A block is either the full contents of one file, or one line of a file
when --lines is given (line endings stripped).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence


logger = logging.getLogger(__name__)


def load_blocks(paths: Sequence[str], lines: bool = False) -> list[bytes]:
    """
    Read blocks from files.

    Args:
        paths: Input files, in block order
        lines: Treat each line of each file as a separate block

    Returns:
        Blocks in order

    Raises:
        FileNotFoundError: If an input file does not exist
    """
    blocks: list[bytes] = []
    for raw_path in paths:
        path = Path(raw_path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

        data = path.read_bytes()
        if lines:
            blocks.extend(data.splitlines())
        else:
            blocks.append(data)

    logger.debug("Loaded %d blocks from %d files", len(blocks), len(paths))
    return blocks


def load_block(block: str | None, block_file: str | None) -> bytes:
    """
    Resolve the block argument of proof/verify.

    --block is taken as UTF-8 text; --block-file as raw file contents.
    """
    if block_file:
        path = Path(block_file)
        if not path.is_file():
            raise FileNotFoundError(f"Block file not found: {path}")
        return path.read_bytes()
    if block is None:
        raise ValueError("One of --block or --block-file is required")
    return block.encode("utf-8")
