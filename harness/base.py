"""Example harness contract.

Every example goes through the same cycle:

    example = SomeExample(sequence_length, options, hash_fn)  # construct
    proof = example.prove()
    example.verify(proof)                    # must succeed (completeness)
    example.verify_with_wrong_inputs(proof)  # must raise (soundness)

Construction failures on problem parameters are programmer errors and are
raised as AssertionError. Invalid options raise ProofError. Engine and
verifier errors propagate unchanged.
"""

import time
from abc import ABC, abstractmethod
from typing import Union

from primitives.field import FF, is_power_of_two, log2
from primitives.hashing import HashFunction
from protocol.options import AcceptableOptions, ProofOptions
from protocol.proof import StarkProof
from protocol.prover import ProvingEngine
from protocol.validation import validate_proof_options


class Example(ABC):
    """Prove/verify contract shared by all examples."""

    @abstractmethod
    def prove(self) -> StarkProof:
        """Build the execution trace and prove it."""
        pass

    @abstractmethod
    def verify(self, proof: StarkProof) -> None:
        """Verify against the correct public input; raises VerificationError."""
        pass

    @abstractmethod
    def verify_with_wrong_inputs(self, proof: StarkProof) -> None:
        """Verify against a corrupted public input; must raise VerificationError."""
        pass


class SequenceExample(Example):
    """Example proving the n-th term of a sequence computed by a trace.

    Subclasses set engine_class and description and implement compute_result.
    """

    engine_class: type[ProvingEngine]
    description: str = "sequence"
    min_sequence_length: int = 2

    def __init__(
        self,
        sequence_length: int,
        options: ProofOptions,
        hash_fn: Union[HashFunction, str] = HashFunction.BLAKE3_256,
    ) -> None:
        assert is_power_of_two(sequence_length), "sequence length must be a power of 2"
        assert sequence_length >= self.min_sequence_length, \
            f"sequence length must be at least {self.min_sequence_length}"
        validate_proof_options(options)

        self.sequence_length = sequence_length
        self.options = options
        self.hash_fn = HashFunction(hash_fn)
        self.engine = self.engine_class(self.hash_fn)

        # compute the expected public input
        start = time.perf_counter()
        self.result = self.compute_result(sequence_length)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(f"Computed {self.description} up to {sequence_length}th term in {elapsed_ms:.0f} ms")

    @abstractmethod
    def compute_result(self, sequence_length: int) -> FF:
        """Reference computation of the public input."""
        pass

    def prove(self) -> StarkProof:
        start = time.perf_counter()
        trace = self.engine.build_trace(self.sequence_length)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(
            f"Generated execution trace of {trace.width} registers and "
            f"2^{log2(trace.length)} steps in {elapsed_ms:.0f} ms"
        )
        return self.engine.prove(trace, self.options)

    def verify(self, proof: StarkProof) -> None:
        acceptable_options = AcceptableOptions((proof.options,))
        self.engine.verify(proof, self.result, acceptable_options)

    def verify_with_wrong_inputs(self, proof: StarkProof) -> None:
        acceptable_options = AcceptableOptions((proof.options,))
        self.engine.verify(proof, self.result + FF(1), acceptable_options)
