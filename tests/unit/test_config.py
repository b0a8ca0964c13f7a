"""
Configuration Unit Tests
Tests for flatmerkle/config/runtime.py and flatmerkle_cli/config.py
"""
import json

import pytest

from flatmerkle.config.runtime import (
    ENV_HASH_ALGORITHM,
    TreeConfig,
    get_default_config,
    set_default_config,
)
from flatmerkle.crypto.hashing import sha256
from flatmerkle.merkle.flat_tree import FlatMerkleTree
from flatmerkle_cli.config import CLIConfig, load_config, load_config_from_file


class TestTreeConfig:
    """Tests for TreeConfig loading."""

    def test_defaults(self):
        config = TreeConfig()

        assert config.hash_algorithm == "sha256"
        assert config.hash_function is sha256
        assert config.to_dict() == {"hash_algorithm": "sha256"}

    def test_invalid_algorithm_fails_fast(self):
        with pytest.raises(ValueError):
            TreeConfig(hash_algorithm="md17")

    def test_from_dict_partial(self):
        assert TreeConfig.from_dict({}).hash_algorithm == "sha256"
        assert TreeConfig.from_dict({"hash_algorithm": "sha512"}).hash_algorithm == "sha512"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "tree.yaml"
        path.write_text("hash_algorithm: sha3_256\n")

        config = TreeConfig.from_yaml(path)

        assert config.hash_algorithm == "sha3_256"
        assert len(config.hash_function(b"")) == 32

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert TreeConfig.from_yaml(path).hash_algorithm == "sha256"

    def test_from_yaml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TreeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv(ENV_HASH_ALGORITHM, "sha512")

        assert TreeConfig.from_env().hash_algorithm == "sha512"
        assert TreeConfig().with_env_overrides().hash_algorithm == "sha512"

    def test_no_env_overrides_returns_same(self):
        config = TreeConfig()

        assert config.with_env_overrides() is config


class TestDefaultConfig:
    def test_default_follows_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_HASH_ALGORITHM, "sha512")
        set_default_config(None)

        tree = FlatMerkleTree(b"a")
        tree.finalize()

        assert get_default_config().hash_algorithm == "sha512"
        assert tree.hash_algorithm == "sha512"
        assert tree.digest_size == 64

    def test_set_default_config(self):
        set_default_config(TreeConfig(hash_algorithm="sha224"))

        assert FlatMerkleTree(b"a").hash_algorithm == "sha224"


class TestCLIConfig:
    """Tests for CLI configuration loading."""

    def test_defaults(self):
        config = CLIConfig()

        assert config.hash_algorithm == "sha256"
        assert config.log_level == "WARNING"
        assert config.default_output_format == "human"
        assert config.tree_config().hash_function is sha256

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "flatmerkle.json"
        path.write_text(json.dumps({"hash_algorithm": "sha512", "log_level": "DEBUG"}))

        config = load_config_from_file(path)

        assert config.hash_algorithm == "sha512"
        assert config.log_level == "DEBUG"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "flatmerkle.json"
        path.write_text(json.dumps({"hash_algorithm": "sha512"}))
        monkeypatch.setenv("FLATMERKLE_HASH_ALGORITHM", "sha224")
        monkeypatch.setenv("FLATMERKLE_OUTPUT_FORMAT", "json")

        config = load_config(path)

        assert config.hash_algorithm == "sha224"
        assert config.default_output_format == "json"

    def test_default_path_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "flatmerkle.json").write_text(json.dumps({"log_level": "ERROR"}))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert load_config().log_level == "ERROR"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")
