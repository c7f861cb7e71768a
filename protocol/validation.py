"""Validation of proof options and assertion/trace shapes.

Both validators are pure and raise the first failing check. The order of
checks is fixed, so a caller always sees the same single diagnostic for a
given input:

- options: queries, blowup, grinding, folding, remainder
- assertions: width, power-of-two length, then exact length for sequence
  assertions or minimum length for single and periodic ones
"""

from primitives.field import is_power_of_two
from protocol.assertions import Assertion
from protocol.errors import (
    BlowupFactor,
    FoldingFactor,
    FriRemainder,
    GrindingFactor,
    QueriesNumber,
    TraceLengthNotExact,
    TraceLengthNotPowerOfTwo,
    TraceLengthTooShort,
    TraceWidthTooShort,
)
from protocol.options import (
    FRI_MAX_FOLDING_FACTOR,
    FRI_MAX_REMAINDER_DEGREE,
    FRI_MIN_FOLDING_FACTOR,
    MAX_BLOWUP_FACTOR,
    MAX_GRINDING_FACTOR,
    MAX_NUM_QUERIES,
    MIN_BLOWUP_FACTOR,
    ProofOptions,
)


# --- Proof Options ---

def validate_proof_options(options: ProofOptions) -> None:
    """Check all option bounds.

    Raises:
        QueriesNumber, BlowupFactor, GrindingFactor, FoldingFactor, FriRemainder:
            The first violated bound, in that order
    """
    if not 0 < options.num_queries < MAX_NUM_QUERIES:
        raise QueriesNumber(options.num_queries)

    blowup = options.blowup_factor
    if not is_power_of_two(blowup) or not MIN_BLOWUP_FACTOR <= blowup <= MAX_BLOWUP_FACTOR:
        raise BlowupFactor(blowup)

    if not 0 <= options.grinding_factor <= MAX_GRINDING_FACTOR:
        raise GrindingFactor(options.grinding_factor)

    folding = options.fri_folding_factor
    if not is_power_of_two(folding) or not FRI_MIN_FOLDING_FACTOR <= folding <= FRI_MAX_FOLDING_FACTOR:
        raise FoldingFactor(folding)

    # Remainder degree must be 2^k - 1
    remainder = options.fri_remainder_max_degree
    if not is_power_of_two(remainder + 1) or remainder > FRI_MAX_REMAINDER_DEGREE:
        raise FriRemainder(remainder)


# --- Trace Shape ---

def validate_trace_length(trace_length: int) -> None:
    """Raise TraceLengthNotPowerOfTwo unless trace_length is a power of two."""
    if not is_power_of_two(trace_length):
        raise TraceLengthNotPowerOfTwo(trace_length)


def check_assertion(assertion: Assertion, trace_width: int, trace_length: int) -> None:
    """Check that an assertion can be placed against a trace of the given shape.

    Raises:
        TraceWidthTooShort: Column is outside the trace
        TraceLengthNotPowerOfTwo: Trace length is not a power of two
        TraceLengthNotExact: Sequence assertion implies a different trace length
        TraceLengthTooShort: Single step, or periodic stride, lies past the trace end
    """
    if assertion.column >= trace_width:
        raise TraceWidthTooShort(assertion.column + 1, trace_width)

    validate_trace_length(trace_length)

    if assertion.is_sequence():
        expected = assertion.stride * len(assertion.values)
        if expected != trace_length:
            raise TraceLengthNotExact(expected, trace_length)
    elif assertion.is_periodic():
        # at least one full period
        if assertion.stride > trace_length:
            raise TraceLengthTooShort(assertion.stride, trace_length)
    elif assertion.first_step >= trace_length:
        raise TraceLengthTooShort(assertion.first_step + 1, trace_length)
