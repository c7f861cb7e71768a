"""Proof options and their global bounds."""

from dataclasses import dataclass

# --- Bounds ---

MAX_NUM_QUERIES = 255
MIN_BLOWUP_FACTOR = 2
MAX_BLOWUP_FACTOR = 128
MAX_GRINDING_FACTOR = 32
FRI_MIN_FOLDING_FACTOR = 2
FRI_MAX_FOLDING_FACTOR = 16
FRI_MAX_REMAINDER_DEGREE = 255


# --- Data Structures ---

@dataclass(frozen=True)
class ProofOptions:
    """Protocol security parameters, fixed for one prove/verify cycle.

    The reference engine validates all five and binds them into the trace
    commitment; it runs no FRI, so only grinding_factor changes the work done.

    Attributes:
        num_queries: Number of FRI query positions
        blowup_factor: Trace domain to LDE domain ratio (power of 2)
        grinding_factor: Proof-of-work difficulty in leading zero bits
        fri_folding_factor: Per-round FRI degree reduction (power of 2)
        fri_remainder_max_degree: Max degree of the FRI remainder (2^k - 1)
    """
    num_queries: int
    blowup_factor: int
    grinding_factor: int
    fri_folding_factor: int
    fri_remainder_max_degree: int


@dataclass(frozen=True)
class AcceptableOptions:
    """Exact set of proof options a verifier will accept."""
    option_set: tuple[ProofOptions, ...]

    def accepts(self, options: ProofOptions) -> bool:
        return options in self.option_set
