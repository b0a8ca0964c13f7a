"""
Runtime Configuration

Configuration for tree construction. The only recognised option is the
digest used for leaf and internal hashing.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from flatmerkle.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    DigestFunction,
    get_hash_function,
)

load_dotenv()


ENV_HASH_ALGORITHM = "FLATMERKLE_HASH_ALGORITHM"


@dataclass
class TreeConfig:
    """
    Configuration for Merkle tree hashing.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction

    An explicit ``hash_function`` wins over ``hash_algorithm``. It must
    return a digest of the same length for every input.
    """
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    hash_function: Optional[DigestFunction] = None

    def __post_init__(self):
        if self.hash_function is None:
            # Fail at load time on unknown or variable-length algorithms
            self.hash_function = get_hash_function(self.hash_algorithm)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - FLATMERKLE_HASH_ALGORITHM: hashlib algorithm name (default: sha256)
        """
        overrides: dict[str, Any] = {}
        if os.getenv(ENV_HASH_ALGORITHM):
            overrides["hash_algorithm"] = os.getenv(ENV_HASH_ALGORITHM)
        return overrides

    @classmethod
    def from_env(cls) -> "TreeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TreeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TreeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(hash_algorithm=data.get("hash_algorithm") or DEFAULT_HASH_ALGORITHM)

    def with_env_overrides(self) -> "TreeConfig":
        """Return a new config with environment variable overrides applied."""
        overrides = self._get_env_overrides()
        if not overrides:
            return self
        return TreeConfig(hash_algorithm=overrides["hash_algorithm"])

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {"hash_algorithm": self.hash_algorithm}


# Global default configuration
_default_config: Optional[TreeConfig] = None


def get_default_config() -> TreeConfig:
    """Get the default tree configuration."""
    global _default_config
    if _default_config is None:
        _default_config = TreeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[TreeConfig]) -> None:
    """Set the default tree configuration (None resets to the environment)."""
    global _default_config
    _default_config = config
