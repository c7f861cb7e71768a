"""Tests for hash backends."""

import hashlib

import blake3
import pytest

from primitives.field import elements_to_bytes
from primitives.hashing import HASHERS, HashFunction, get_hasher


class TestHashBackends:
    """Digest sizes and backend resolution."""

    @pytest.mark.parametrize("hash_fn, size", [
        (HashFunction.BLAKE3_192, 24),
        (HashFunction.BLAKE3_256, 32),
        (HashFunction.SHA3_256, 32),
    ])
    def test_digest_size(self, hash_fn: HashFunction, size: int) -> None:
        """Each backend produces its documented digest size."""
        hasher = get_hasher(hash_fn)
        assert hasher.digest_size == size
        assert len(hasher.hash(b"abc")) == size

    def test_resolve_by_name(self) -> None:
        """String selectors resolve to the same table as enum members."""
        assert get_hasher("sha3_256") is HASHERS[HashFunction.SHA3_256]

    def test_unknown_name(self) -> None:
        """Unknown selectors are rejected."""
        with pytest.raises(ValueError):
            get_hasher("md5")

    def test_matches_libraries(self) -> None:
        """Backends are thin wrappers over hashlib and blake3."""
        assert get_hasher(HashFunction.SHA3_256).hash(b"abc") == hashlib.sha3_256(b"abc").digest()
        assert get_hasher(HashFunction.BLAKE3_256).hash(b"abc") == blake3.blake3(b"abc").digest()

    def test_blake3_192_is_truncated_output(self) -> None:
        """BLAKE3/192 is a prefix of the BLAKE3 output stream."""
        short = get_hasher(HashFunction.BLAKE3_192).hash(b"abc")
        assert short == blake3.blake3(b"abc").digest()[:24]

    def test_backends_differ(self) -> None:
        """Different backends give different digests for the same input."""
        digests = {h.hash(b"abc") for h in HASHERS.values()}
        assert len(digests) == len(HASHERS)

    def test_merge_and_elements(self) -> None:
        """merge hashes the concatenation; hash_elements hashes the canonical encoding."""
        hasher = get_hasher(HashFunction.BLAKE3_256)
        assert hasher.merge(b"a", b"b") == hasher.hash(b"ab")
        assert hasher.hash_elements([1, 2]) == hasher.hash(elements_to_bytes([1, 2]))
        assert elements_to_bytes([1]) == b"\x01" + b"\x00" * 7
