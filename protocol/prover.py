"""Proving engine interface and reference proof generation.

A concrete engine supplies the problem side (trace construction, public
inputs, AIR class). Proving and verification are shared and only depend on
the hash backend chosen at construction.
"""

from abc import ABC, abstractmethod
from typing import List, Union

from primitives.field import FF
from primitives.hashing import HashFunction, get_hasher
from primitives.random_coin import find_pow_nonce
from protocol.air import Air
from protocol.assertions import Assertion
from protocol.errors import UnsatisfiedTrace
from protocol.options import AcceptableOptions, ProofOptions
from protocol.proof import StarkProof, commit_trace, seed_coin
from protocol.trace import TraceTable
from protocol.validation import check_assertion, validate_trace_length
from protocol.verifier import verify


class ProvingEngine(ABC):
    """Engine capability set: build_trace, prove, verify."""

    air_class: type[Air]

    def __init__(self, hash_fn: Union[HashFunction, str]) -> None:
        self.hasher = get_hasher(hash_fn)

    # --- Problem Side ---

    @abstractmethod
    def build_trace(self, sequence_length: int) -> TraceTable:
        """Execute the computation and record it as a trace."""
        pass

    @abstractmethod
    def get_pub_inputs(self, trace: TraceTable) -> FF:
        """Extract the public inputs a verifier needs from the trace."""
        pass

    # --- Proving ---

    def prove(self, trace: TraceTable, options: ProofOptions) -> StarkProof:
        """Generate a proof that trace satisfies the engine's AIR.

        Raises:
            TraceAssertionError: An assertion does not fit the trace shape
            UnsatisfiedTrace: The trace violates an assertion or transition
        """
        trace_info = trace.info
        pub_inputs = self.get_pub_inputs(trace)
        air = self.air_class(trace_info, pub_inputs, options)

        # --- Validate trace shape ---
        assertions = air.get_assertions()
        for assertion in assertions:
            check_assertion(assertion, trace_info.width, trace_info.length)
        validate_trace_length(trace_info.length)

        # --- Validate trace against AIR ---
        _validate_trace(air, assertions, trace)

        # --- Commit ---
        columns = trace.to_lists()
        commitment = commit_trace(self.hasher, options, trace_info, columns)

        # --- Grinding (proof-of-work) ---
        coin = seed_coin(self.hasher, commitment, air.pub_inputs_to_elements(pub_inputs))
        pow_nonce = find_pow_nonce(coin, options.grinding_factor)

        return StarkProof(
            options=options,
            trace_info=trace_info,
            trace=columns,
            commitment=commitment,
            pow_nonce=pow_nonce,
        )

    # --- Verification ---

    def verify(self, proof: StarkProof, pub_inputs: FF, acceptable_options: AcceptableOptions) -> None:
        """Verify a proof against public inputs; raises VerificationError on rejection."""
        verify(proof, pub_inputs, acceptable_options, self.air_class, self.hasher)


def _validate_trace(air: Air, assertions: List[Assertion], trace: TraceTable) -> None:
    """Check every assertion and every transition on the full trace."""
    for assertion in assertions:
        for step, value in assertion.steps(trace.length):
            actual = trace.get(assertion.column, step)
            if actual != value:
                raise UnsatisfiedTrace(
                    f"assertion on column {assertion.column} failed at step {step}: "
                    f"expected {int(value)}, but was {int(actual)}"
                )

    for step in range(trace.length - 1):
        evaluations = air.evaluate_transition(trace.get_row(step), trace.get_row(step + 1))
        if any(int(v) != 0 for v in evaluations):
            raise UnsatisfiedTrace(f"transition constraints not satisfied at step {step}")
