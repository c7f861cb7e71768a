"""Primitives - Field, hash backends and Fiat-Shamir randomness."""

from primitives.field import (
    FF,
    GOLDILOCKS_PRIME,
    elements_to_bytes,
    is_power_of_two,
    log2,
)
from primitives.hashing import (
    HASHERS,
    HashFunction,
    Hasher,
    get_hasher,
)
from primitives.random_coin import RandomCoin, find_pow_nonce

__all__ = [
    # Field
    "FF",
    "GOLDILOCKS_PRIME",
    "elements_to_bytes",
    "is_power_of_two",
    "log2",
    # Hashing
    "HASHERS",
    "HashFunction",
    "Hasher",
    "get_hasher",
    # Random coin
    "RandomCoin",
    "find_pow_nonce",
]
