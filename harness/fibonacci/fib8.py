"""Fibonacci sequence, eight terms per trace row.

The whole first row is pinned by assertions since transitions only
constrain rows after it.
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

TRACE_WIDTH = 8

FIRST_ROW = [1, 1, 2, 3, 5, 8, 13, 21]


class Fib8Air(Air):

    def evaluate_transition(self, current: FF, nxt: FF) -> List[FF]:
        result = [
            nxt[0] - (current[6] + current[7]),
            nxt[1] - (current[7] + nxt[0]),
        ]
        for i in range(2, TRACE_WIDTH):
            result.append(nxt[i] - (nxt[i - 2] + nxt[i - 1]))
        return result

    def get_assertions(self) -> List[Assertion]:
        assertions = [Assertion.single(i, 0, v) for i, v in enumerate(FIRST_ROW)]
        assertions.append(Assertion.single(TRACE_WIDTH - 1, self.last_step, self.pub_inputs))
        return assertions


class Fib8Prover(ProvingEngine):
    air_class = Fib8Air

    def build_trace(self, sequence_length: int) -> TraceTable:
        assert is_power_of_two(sequence_length), "sequence length must be a power of 2"

        def init(state):
            for i, v in enumerate(FIRST_ROW):
                state[i] = FF(v)

        def update(_, state):
            state[0] = state[6] + state[7]
            state[1] = state[7] + state[0]
            for i in range(2, TRACE_WIDTH):
                state[i] = state[i - 2] + state[i - 1]

        return TraceTable.fill(TRACE_WIDTH, sequence_length // TRACE_WIDTH, init, update)

    def get_pub_inputs(self, trace: TraceTable) -> FF:
        return trace.get(TRACE_WIDTH - 1, trace.length - 1)


class Fib8Example(SequenceExample):
    engine_class = Fib8Prover
    description = "Fibonacci sequence"
    min_sequence_length = TRACE_WIDTH

    def compute_result(self, sequence_length: int) -> FF:
        return compute_fib_term(sequence_length)


def get_example(options: ExampleOptions, sequence_length: int) -> Fib8Example:
    proof_options, hash_fn = options.to_proof_options(28, 8)
    return Fib8Example(sequence_length, proof_options, hash_fn)
