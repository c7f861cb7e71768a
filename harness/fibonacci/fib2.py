"""Fibonacci sequence, two terms per trace row.

Row i holds terms 2i+1 and 2i+2, so a sequence of n terms needs n/2 rows and
the n-th term sits in column 1 of the last row.
"""

from typing import List

from harness.base import SequenceExample
from harness.config import ExampleOptions
from harness.fibonacci.utils import compute_fib_term
from primitives.field import FF, is_power_of_two
from protocol.air import Air
from protocol.assertions import Assertion
from protocol.prover import ProvingEngine
from protocol.trace import TraceTable

TRACE_WIDTH = 2


class Fib2Air(Air):
    """next[0] = cur[0] + cur[1], next[1] = next[0] + cur[1]."""

    def evaluate_transition(self, current: FF, nxt: FF) -> List[FF]:
        return [
            nxt[0] - (current[0] + current[1]),
            nxt[1] - (nxt[0] + current[1]),
        ]

    def get_assertions(self) -> List[Assertion]:
        return [
            Assertion.single(0, 0, 1),
            Assertion.single(1, 0, 1),
            Assertion.single(1, self.last_step, self.pub_inputs),
        ]


class Fib2Prover(ProvingEngine):
    air_class = Fib2Air

    def build_trace(self, sequence_length: int) -> TraceTable:
        assert is_power_of_two(sequence_length), "sequence length must be a power of 2"

        def init(state):
            state[0] = FF(1)
            state[1] = FF(1)

        def update(_, state):
            state[0] = state[0] + state[1]
            state[1] = state[0] + state[1]

        return TraceTable.fill(TRACE_WIDTH, sequence_length // 2, init, update)

    def get_pub_inputs(self, trace: TraceTable) -> FF:
        return trace.get(1, trace.length - 1)


class Fib2Example(SequenceExample):
    engine_class = Fib2Prover
    description = "Fibonacci sequence"

    def compute_result(self, sequence_length: int) -> FF:
        return compute_fib_term(sequence_length)


def get_example(options: ExampleOptions, sequence_length: int) -> Fib2Example:
    proof_options, hash_fn = options.to_proof_options(28, 8)
    return Fib2Example(sequence_length, proof_options, hash_fn)
