"""Error taxonomies for trace assertions, proof options, proving and verification.

Structural and parametric errors are closed families of exception subclasses.
Each carries the numeric values needed for diagnosis as attributes and in
`args`, and two errors compare equal when type and payload match.
"""

from protocol.options import (
    FRI_MAX_FOLDING_FACTOR,
    FRI_MAX_REMAINDER_DEGREE,
    FRI_MIN_FOLDING_FACTOR,
    MAX_BLOWUP_FACTOR,
    MAX_GRINDING_FACTOR,
    MAX_NUM_QUERIES,
    MIN_BLOWUP_FACTOR,
)


class _StructuredError(Exception):
    """Exception compared by type and payload."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


# --- Assertion Errors ---

class TraceAssertionError(_StructuredError):
    """An assertion is incompatible with the trace it is checked against."""


class TraceWidthTooShort(TraceAssertionError):
    """The trace has no column the assertion refers to."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"expected trace width to be at least {self.expected}, but was {self.actual}"


class TraceLengthNotPowerOfTwo(TraceAssertionError):
    """The trace length is not a power of two."""

    def __init__(self, actual: int) -> None:
        super().__init__(actual)
        self.actual = actual

    def __str__(self) -> str:
        return f"expected trace length to be a power of two, but was {self.actual}"


class TraceLengthTooShort(TraceAssertionError):
    """The trace has no step the assertion refers to."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"expected trace length to be at least {self.expected}, but was {self.actual}"


class TraceLengthNotExact(TraceAssertionError):
    """A sequence assertion implies a trace length different from the actual one."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"expected trace length to be exactly {self.expected}, but was {self.actual}"


# --- Proof Option Errors ---

class ProofError(_StructuredError):
    """A proof option is out of its protocol bounds."""

    def __init__(self, value: int) -> None:
        super().__init__(value)
        self.value = value


class QueriesNumber(ProofError):
    def __str__(self) -> str:
        return (f"Number of queries must be greater than 0 and smaller than {MAX_NUM_QUERIES}, "
                f"but {self.value} was found.")


class BlowupFactor(ProofError):
    def __str__(self) -> str:
        return (f"Blowup factor must be a power of 2, cannot be smaller than {MIN_BLOWUP_FACTOR} "
                f"and greater than {MAX_BLOWUP_FACTOR}, but {self.value} was found.")


class GrindingFactor(ProofError):
    def __str__(self) -> str:
        return (f"Grinding factor cannot be greater than {MAX_GRINDING_FACTOR}, "
                f"but {self.value} was found.")


class FoldingFactor(ProofError):
    def __str__(self) -> str:
        return (f"FRI folding factor must be a power of 2, cannot be smaller than {FRI_MIN_FOLDING_FACTOR} "
                f"and greater than {FRI_MAX_FOLDING_FACTOR}, but {self.value} was found.")


class FriRemainder(ProofError):
    def __str__(self) -> str:
        return (f"FRI polynomial remainder degree must be one less than a power of two and cannot be "
                f"greater than {FRI_MAX_REMAINDER_DEGREE}, but {self.value} was found.")


# --- Engine Errors ---

class ProverError(Exception):
    """Proof generation failed."""


class UnsatisfiedTrace(ProverError):
    """The execution trace does not satisfy its own AIR."""


class VerificationError(_StructuredError):
    """A proof was rejected by the verifier."""


class UnacceptableProofOptions(VerificationError):
    def __str__(self) -> str:
        return "proof was generated with unacceptable options"


class InconsistentTraceShape(VerificationError):
    def __str__(self) -> str:
        return "trace values in the proof do not match the declared trace shape"


class InconsistentTraceCommitment(VerificationError):
    def __str__(self) -> str:
        return "trace commitment does not match the committed trace values"


class InsufficientProofOfWork(VerificationError):
    def __str__(self) -> str:
        return "proof-of-work nonce does not meet the grinding factor"


class BoundaryConstraintFailed(VerificationError):
    def __init__(self, column: int, step: int) -> None:
        super().__init__(column, step)
        self.column = column
        self.step = step

    def __str__(self) -> str:
        return f"boundary constraint on column {self.column} failed at step {self.step}"


class TransitionConstraintFailed(VerificationError):
    def __init__(self, step: int) -> None:
        super().__init__(step)
        self.step = step

    def __str__(self) -> str:
        return f"transition constraints failed at step {self.step}"
