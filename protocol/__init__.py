"""Protocol - Option and trace-shape validation, and the reference proving engine."""

from protocol.options import (
    FRI_MAX_FOLDING_FACTOR,
    FRI_MAX_REMAINDER_DEGREE,
    FRI_MIN_FOLDING_FACTOR,
    MAX_BLOWUP_FACTOR,
    MAX_GRINDING_FACTOR,
    MAX_NUM_QUERIES,
    MIN_BLOWUP_FACTOR,
    AcceptableOptions,
    ProofOptions,
)
from protocol.errors import (
    BlowupFactor,
    BoundaryConstraintFailed,
    FoldingFactor,
    FriRemainder,
    GrindingFactor,
    InconsistentTraceCommitment,
    InconsistentTraceShape,
    InsufficientProofOfWork,
    ProofError,
    ProverError,
    QueriesNumber,
    TraceAssertionError,
    TraceLengthNotExact,
    TraceLengthNotPowerOfTwo,
    TraceLengthTooShort,
    TraceWidthTooShort,
    TransitionConstraintFailed,
    UnacceptableProofOptions,
    UnsatisfiedTrace,
    VerificationError,
)
from protocol.assertions import Assertion
from protocol.validation import check_assertion, validate_proof_options, validate_trace_length
from protocol.trace import TraceInfo, TraceTable
from protocol.air import Air
from protocol.proof import StarkProof
from protocol.verifier import verify
from protocol.prover import ProvingEngine

__all__ = [
    # Options
    "ProofOptions",
    "AcceptableOptions",
    "MAX_NUM_QUERIES",
    "MIN_BLOWUP_FACTOR",
    "MAX_BLOWUP_FACTOR",
    "MAX_GRINDING_FACTOR",
    "FRI_MIN_FOLDING_FACTOR",
    "FRI_MAX_FOLDING_FACTOR",
    "FRI_MAX_REMAINDER_DEGREE",
    # Assertion errors
    "TraceAssertionError",
    "TraceWidthTooShort",
    "TraceLengthNotPowerOfTwo",
    "TraceLengthTooShort",
    "TraceLengthNotExact",
    # Proof option errors
    "ProofError",
    "QueriesNumber",
    "BlowupFactor",
    "GrindingFactor",
    "FoldingFactor",
    "FriRemainder",
    # Engine errors
    "ProverError",
    "UnsatisfiedTrace",
    "VerificationError",
    "UnacceptableProofOptions",
    "InconsistentTraceShape",
    "InconsistentTraceCommitment",
    "InsufficientProofOfWork",
    "BoundaryConstraintFailed",
    "TransitionConstraintFailed",
    # Validation
    "validate_proof_options",
    "validate_trace_length",
    "check_assertion",
    # Engine
    "Assertion",
    "TraceInfo",
    "TraceTable",
    "Air",
    "StarkProof",
    "ProvingEngine",
    "verify",
]
