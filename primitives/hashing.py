"""Hash backends selectable at run time.

Each backend is a function table (`Hasher`) looked up from a `HashFunction`
selector. The proving engine only ever sees the table.
"""

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Union

import blake3

from primitives.field import elements_to_bytes


# --- Selector ---

class HashFunction(Enum):
    """Hash backends an example can be proved with."""
    BLAKE3_192 = "blake3_192"
    BLAKE3_256 = "blake3_256"
    SHA3_256 = "sha3_256"


# --- Function Table ---

@dataclass(frozen=True)
class Hasher:
    """Hash function table bound to one backend."""
    hash_fn: HashFunction
    digest_size: int
    digest: Callable[[bytes], bytes]

    def hash(self, data: bytes) -> bytes:
        return self.digest(data)

    def merge(self, left: bytes, right: bytes) -> bytes:
        """Hash of the concatenation of two digests."""
        return self.digest(left + right)

    def hash_elements(self, values: Iterable) -> bytes:
        """Hash a sequence of field elements in canonical encoding."""
        return self.digest(elements_to_bytes(values))


def _blake3_192(data: bytes) -> bytes:
    return blake3.blake3(data).digest(length=24)


def _blake3_256(data: bytes) -> bytes:
    return blake3.blake3(data).digest()


def _sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


HASHERS: dict[HashFunction, Hasher] = {
    HashFunction.BLAKE3_192: Hasher(HashFunction.BLAKE3_192, 24, _blake3_192),
    HashFunction.BLAKE3_256: Hasher(HashFunction.BLAKE3_256, 32, _blake3_256),
    HashFunction.SHA3_256: Hasher(HashFunction.SHA3_256, 32, _sha3_256),
}


def get_hasher(hash_fn: Union[HashFunction, str]) -> Hasher:
    """Resolve a selector (enum member or its string value) to its function table.

    Raises:
        ValueError: If the name does not match any backend
    """
    return HASHERS[HashFunction(hash_fn)]
