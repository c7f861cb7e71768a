"""STARK proof artifact and the commitment/coin helpers both sides replay."""

from dataclasses import dataclass
from typing import List

from primitives.field import elements_to_bytes
from primitives.hashing import Hasher
from primitives.random_coin import RandomCoin
from protocol.options import ProofOptions
from protocol.trace import TraceInfo


@dataclass
class StarkProof:
    """Proof produced by the reference engine.

    The engine is transparent: the whole trace travels with the proof, bound
    by a hash commitment and a proof-of-work nonce.

    Attributes:
        options: Options the proof was generated with
        trace_info: Declared trace shape
        trace: Trace values as plain-int columns
        commitment: Hash commitment to options, trace_info and trace
        pow_nonce: Proof-of-work nonce
    """
    options: ProofOptions
    trace_info: TraceInfo
    trace: List[List[int]]
    commitment: bytes
    pow_nonce: int


def commit_trace(
    hasher: Hasher,
    options: ProofOptions,
    trace_info: TraceInfo,
    columns: List[List[int]],
) -> bytes:
    """Hash commitment to the proof options, the trace shape and its column values."""
    context = [
        options.num_queries,
        options.blowup_factor,
        options.grinding_factor,
        options.fri_folding_factor,
        options.fri_remainder_max_degree,
        trace_info.width,
        trace_info.length,
    ]
    root = hasher.hash_elements(context)
    for column in columns:
        root = hasher.merge(root, hasher.hash_elements(column))
    return root


def seed_coin(hasher: Hasher, commitment: bytes, pub_elements: List[int]) -> RandomCoin:
    """Public coin bound to the commitment, reseeded with the public inputs."""
    coin = RandomCoin(hasher, commitment)
    coin.reseed(elements_to_bytes(pub_elements))
    return coin
