"""Reference proof verification.

Verification consists of several phases:
1. Options check - The proof's options must be in bounds and in the acceptable set
2. Shape check - Trace values must match the declared trace shape
3. Commitment check - Recompute the commitment over options and trace
4. Proof-of-work check - The nonce must meet the grinding factor
5. Boundary check - Every assertion must hold for these public inputs
6. Transition check - Constraints must hold between every pair of adjacent rows

The whole trace travels with the proof, so the transition check covers every
step; num_queries is validated and committed to, but draws no positions.
"""

from typing import List

from primitives.field import FF, GOLDILOCKS_PRIME, is_power_of_two
from primitives.hashing import Hasher
from protocol.air import Air
from protocol.errors import (
    BoundaryConstraintFailed,
    InconsistentTraceCommitment,
    InconsistentTraceShape,
    InsufficientProofOfWork,
    ProofError,
    TraceAssertionError,
    TransitionConstraintFailed,
    UnacceptableProofOptions,
)
from protocol.options import AcceptableOptions
from protocol.proof import StarkProof, commit_trace, seed_coin
from protocol.trace import TraceInfo, TraceTable
from protocol.validation import check_assertion, validate_proof_options


def verify(
    proof: StarkProof,
    pub_inputs: FF,
    acceptable_options: AcceptableOptions,
    air_class: type[Air],
    hasher: Hasher,
) -> None:
    """Verify a proof.

    Args:
        proof: Proof to verify
        pub_inputs: Public inputs the proof is claimed to be valid for
        acceptable_options: Options the verifier accepts
        air_class: AIR the trace must satisfy
        hasher: Hash backend the proof was generated with

    Raises:
        VerificationError: The subclass names the first failed phase
    """
    options = proof.options
    trace_info = proof.trace_info

    # --- Check options ---
    try:
        validate_proof_options(options)
    except ProofError as e:
        raise UnacceptableProofOptions() from e
    if not acceptable_options.accepts(options):
        raise UnacceptableProofOptions()

    # --- Check trace shape ---
    if not _is_well_formed(trace_info, proof.trace):
        raise InconsistentTraceShape()

    # --- Check commitment ---
    if commit_trace(hasher, options, trace_info, proof.trace) != proof.commitment:
        raise InconsistentTraceCommitment()

    # --- Check proof-of-work ---
    air = air_class(trace_info, pub_inputs, options)
    coin = seed_coin(hasher, proof.commitment, air.pub_inputs_to_elements(pub_inputs))
    if coin.check_leading_zeros(proof.pow_nonce) < options.grinding_factor:
        raise InsufficientProofOfWork()

    # --- Check boundary assertions ---
    trace = TraceTable(FF(proof.trace))
    for assertion in air.get_assertions():
        try:
            check_assertion(assertion, trace_info.width, trace_info.length)
        except TraceAssertionError as e:
            raise InconsistentTraceShape() from e
        for step, value in assertion.steps(trace_info.length):
            if trace.get(assertion.column, step) != value:
                raise BoundaryConstraintFailed(assertion.column, step)

    # --- Check transitions ---
    for step in range(trace_info.length - 1):
        evaluations = air.evaluate_transition(trace.get_row(step), trace.get_row(step + 1))
        if any(int(v) != 0 for v in evaluations):
            raise TransitionConstraintFailed(step)


def _is_well_formed(trace_info: TraceInfo, columns: List[List[int]]) -> bool:
    """Declared shape matches the values, length is a power of two, values are canonical."""
    if trace_info.width < 1 or not is_power_of_two(trace_info.length):
        return False
    if len(columns) != trace_info.width:
        return False
    for column in columns:
        if len(column) != trace_info.length:
            return False
        if any(not 0 <= v < GOLDILOCKS_PRIME for v in column):
            return False
    return True
