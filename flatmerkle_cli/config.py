"""
CLI Configuration

Configuration management for the flatmerkle CLI.
Supports environment variables and configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from flatmerkle.config.runtime import TreeConfig
from flatmerkle.crypto.hashing import DEFAULT_HASH_ALGORITHM


# Environment variable prefix
ENV_PREFIX = "FLATMERKLE_"


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Hashing
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"

    def tree_config(self) -> TreeConfig:
        """Tree configuration for the selected hash algorithm."""
        return TreeConfig(hash_algorithm=self.hash_algorithm)


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables."""
    config = CLIConfig()

    config.hash_algorithm = os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM", config.hash_algorithm)
    config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", config.log_level)
    config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    config.default_output_format = os.getenv(
        f"{ENV_PREFIX}OUTPUT_FORMAT", config.default_output_format
    )

    return config


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    config = CLIConfig()
    config.hash_algorithm = data.get("hash_algorithm", config.hash_algorithm)
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)
    config.default_output_format = data.get("default_output_format", config.default_output_format)

    return config


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        default_paths = [
            Path.cwd() / "flatmerkle.json",
            Path.home() / ".config" / "flatmerkle" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    env_config = load_config_from_env()

    # Merge env into config (env takes precedence)
    if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
        config.hash_algorithm = env_config.hash_algorithm
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = env_config.log_level
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = env_config.log_file
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = env_config.default_output_format

    return config
