"""
Pytest configuration and shared fixtures for flatmerkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")
_vectors = importlib.import_module("fixtures.vectors")

make_blocks = _common.make_blocks
make_tree = _common.make_tree

GREETINGS = _vectors.GREETINGS


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def clean_default_config(monkeypatch):
    """Keep tests independent of FLATMERKLE_* variables in the environment."""
    from flatmerkle.config.runtime import set_default_config

    for name in [
        "FLATMERKLE_HASH_ALGORITHM",
        "FLATMERKLE_LOG_LEVEL",
        "FLATMERKLE_LOG_FILE",
        "FLATMERKLE_OUTPUT_FORMAT",
    ]:
        monkeypatch.delenv(name, raising=False)

    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def greetings_tree():
    """Finalized tree over ["Hello", "Hi", "Hey", "Hola"]."""
    return make_tree(GREETINGS)


@pytest.fixture
def building_tree():
    """Tree with three blocks, not yet finalized."""
    return make_tree(make_blocks(3), finalize=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
