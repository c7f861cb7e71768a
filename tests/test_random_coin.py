"""Tests for the Fiat-Shamir random coin and proof-of-work grinding."""

import pytest

from primitives.hashing import HashFunction, get_hasher
from primitives.random_coin import RandomCoin, find_pow_nonce

HASHER = get_hasher(HashFunction.BLAKE3_256)


class TestRandomCoin:
    """Seeding and reseeding."""

    def test_deterministic(self) -> None:
        """Same seed, same state."""
        a = RandomCoin(HASHER, b"seed")
        b = RandomCoin(HASHER, b"seed")
        assert a.seed == b.seed == HASHER.hash(b"seed")

    def test_seed_changes_state(self) -> None:
        """Different seeds give different states and work counts."""
        a = RandomCoin(HASHER, b"seed-a")
        b = RandomCoin(HASHER, b"seed-b")
        assert a.seed != b.seed
        assert [a.check_leading_zeros(n) for n in range(64)] != [b.check_leading_zeros(n) for n in range(64)]

    def test_reseed_changes_state(self) -> None:
        """Reseeding folds data into the seed."""
        coin = RandomCoin(HASHER, b"seed")
        before = coin.seed
        coin.reseed(b"data")
        assert coin.seed != before
        assert coin.seed == HASHER.merge(before, b"data")


class TestGrinding:
    """Proof-of-work nonce search."""

    def test_zero_factor(self) -> None:
        """No work required: nonce 0."""
        assert find_pow_nonce(RandomCoin(HASHER, b"seed"), 0) == 0

    @pytest.mark.parametrize("grinding_factor", [1, 4, 8])
    def test_nonce_meets_factor(self, grinding_factor: int) -> None:
        """The nonce found is the smallest meeting the factor."""
        coin = RandomCoin(HASHER, b"seed")
        nonce = find_pow_nonce(coin, grinding_factor)
        assert coin.check_leading_zeros(nonce) >= grinding_factor
        assert all(coin.check_leading_zeros(n) < grinding_factor for n in range(nonce))

    def test_leading_zeros_deterministic(self) -> None:
        """Leading zero count only depends on seed and nonce."""
        a = RandomCoin(HASHER, b"seed")
        b = RandomCoin(HASHER, b"seed")
        assert [a.check_leading_zeros(n) for n in range(10)] == [b.check_leading_zeros(n) for n in range(10)]
