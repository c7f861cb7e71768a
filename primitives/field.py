"""Goldilocks field GF(p).

Uses galois library for all field arithmetic. FF is the field type shared by
traces, assertions and public inputs.
"""

from typing import Iterable

import galois

# --- Field Construction ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) - Goldilocks prime field."""

# Canonical encoding width of a field element
ELEMENT_BYTES = 8


# --- Integer Helpers ---

def is_power_of_two(n: int) -> bool:
    """True when n is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


def log2(n: int) -> int:
    """Exact log2 of a power of two."""
    assert is_power_of_two(n), f"{n} is not a power of two"
    return n.bit_length() - 1


# --- Serialization Boundary ---

def elements_to_bytes(values: Iterable) -> bytes:
    """Little-endian canonical encoding of field elements (or plain ints)."""
    return b"".join(int(v).to_bytes(ELEMENT_BYTES, "little") for v in values)
