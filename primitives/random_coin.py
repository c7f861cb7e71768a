"""Fiat-Shamir random coin and proof-of-work grinding.

The coin is a hash chain: every reseed folds new data into the seed. Prover
and verifier replay the same sequence of reseeds, so they agree on the seed
the proof-of-work nonce is ground against.
"""

from itertools import count

from primitives.hashing import Hasher

# Bits of digest used for leading-zero counting
_WORD_BITS = 64


class RandomCoin:
    """Deterministic pseudorandom source seeded from public proof data."""

    def __init__(self, hasher: Hasher, seed: bytes) -> None:
        self.hasher = hasher
        self.seed = hasher.hash(seed)

    def reseed(self, data: bytes) -> None:
        """Absorb data into the seed."""
        self.seed = self.hasher.merge(self.seed, data)

    def check_leading_zeros(self, nonce: int) -> int:
        """Number of leading zero bits of H(seed || nonce)."""
        digest = self.hasher.merge(self.seed, nonce.to_bytes(8, "little"))
        value = int.from_bytes(digest[:_WORD_BITS // 8], "big")
        return _WORD_BITS - value.bit_length()


def find_pow_nonce(coin: RandomCoin, grinding_factor: int) -> int:
    """Smallest nonce whose hash with the coin seed has grinding_factor leading zeros.

    The search is a plain loop, so it takes about 2^grinding_factor hashes.
    Factors in the low twenties are the practical ceiling; the bound allows up
    to 32, which this search will not finish in reasonable time.
    """
    for nonce in count():
        if coin.check_leading_zeros(nonce) >= grinding_factor:
            return nonce
