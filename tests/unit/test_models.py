"""
Block/Node Model Unit Tests
Tests for flatmerkle/merkle/models.py
"""
import hashlib

import pytest

from flatmerkle.crypto.hashing import sha256
from flatmerkle.merkle.models import (
    INTERNAL_PREFIX,
    LEAF_PREFIX,
    Block,
    TreeNode,
    hash_internal,
    hash_leaf,
)
from flatmerkle.schemas.errors import HashComputationException, NilBlockException


class TestBlock:
    """Tests for Block coercion and equality."""

    def test_coerce_bytes(self):
        block = Block.coerce(b"abc")

        assert block.data == b"abc"
        assert bytes(block) == b"abc"
        assert len(block) == 3

    def test_coerce_copies_bytearray(self):
        buf = bytearray(b"abc")
        block = Block.coerce(buf)
        buf[0] = ord("x")

        assert block.data == b"abc"

    def test_coerce_memoryview(self):
        assert Block.coerce(memoryview(b"abc")) == Block(b"abc")

    def test_coerce_block_is_identity(self):
        block = Block(b"abc")

        assert Block.coerce(block) is block

    def test_coerce_none_raises(self):
        with pytest.raises(NilBlockException):
            Block.coerce(None)

    @pytest.mark.parametrize("value", ["text", 42, [b"a"]])
    def test_coerce_rejects_non_bytes(self, value):
        with pytest.raises(TypeError):
            Block.coerce(value)

    def test_equality_is_by_bytes(self):
        assert Block(b"x") == Block(bytes(bytearray(b"x")))
        assert Block(b"x") != Block(b"y")

    def test_block_is_immutable(self):
        block = Block(b"x")

        with pytest.raises(AttributeError):
            block.data = b"y"


class TestTreeNode:
    def test_copy_returns_bytes(self):
        node = TreeNode(sha256(b"x"))

        assert node.copy() == sha256(b"x")
        assert isinstance(node.copy(), bytes)
        assert node.hex() == sha256(b"x").hex()
        assert len(node) == 32


class TestDomainSeparatedHashing:
    """Tests for hash_leaf() and hash_internal()."""

    def test_prefixes(self):
        assert LEAF_PREFIX == b"\x00"
        assert INTERNAL_PREFIX == b"\x01"

    def test_hash_leaf(self):
        node = hash_leaf(b"Hello", sha256)

        assert node.digest == hashlib.sha256(b"\x00Hello").digest()

    def test_hash_internal(self):
        left, right = sha256(b"l"), sha256(b"r")

        node = hash_internal(TreeNode(left), right, sha256)

        assert node.digest == hashlib.sha256(b"\x01" + left + right).digest()

    def test_leaf_and_internal_differ_on_same_bytes(self):
        """The same payload hashes differently as a leaf and as a node."""
        left, right = sha256(b"l"), sha256(b"r")

        assert hash_leaf(left + right, sha256) != hash_internal(left, right, sha256)

    def test_internal_order_matters(self):
        a, b = sha256(b"a"), sha256(b"b")

        assert hash_internal(a, b, sha256) != hash_internal(b, a, sha256)

    def test_digest_failure_wrapped(self):
        def broken(data: bytes) -> bytes:
            raise OSError("write failed")

        with pytest.raises(HashComputationException) as exc_info:
            hash_leaf(b"x", broken)

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_non_bytes_digest_rejected(self):
        with pytest.raises(HashComputationException):
            hash_leaf(b"x", lambda data: hashlib.sha256(data).hexdigest())

    def test_wrong_size_rejected(self):
        with pytest.raises(HashComputationException, match="expected 64"):
            hash_leaf(b"x", sha256, expected_size=64)
