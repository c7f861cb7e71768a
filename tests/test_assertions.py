"""Tests for assertions and trace shape validation."""

import pytest

from primitives.field import FF
from protocol.assertions import Assertion
from protocol.errors import (
    TraceAssertionError,
    TraceLengthNotExact,
    TraceLengthNotPowerOfTwo,
    TraceLengthTooShort,
    TraceWidthTooShort,
)
from protocol.validation import check_assertion, validate_trace_length


def _check_error(assertion: Assertion, width: int, length: int) -> TraceAssertionError:
    with pytest.raises(TraceAssertionError) as excinfo:
        check_assertion(assertion, width, length)
    return excinfo.value


class TestAssertionConstruction:
    """Assertion constructors and their preconditions."""

    def test_single(self) -> None:
        """Single assertions have stride 0 and one value."""
        a = Assertion.single(1, 5, 42)
        assert a.is_single() and not a.is_periodic() and not a.is_sequence()
        assert a.stride == 0
        assert a.values[0] == FF(42)

    def test_periodic(self) -> None:
        """Periodic assertions repeat one value."""
        a = Assertion.periodic(0, 1, 4, 7)
        assert a.is_periodic()
        assert [(s, int(v)) for s, v in a.steps(16)] == [(1, 7), (5, 7), (9, 7), (13, 7)]

    def test_sequence(self) -> None:
        """Sequence assertions pin one value per step."""
        a = Assertion.sequence(2, 0, 2, [1, 2, 3, 4])
        assert a.is_sequence()
        assert a.get_num_steps(8) == 4
        assert [(s, int(v)) for s, v in a.steps(8)] == [(0, 1), (2, 2), (4, 3), (6, 4)]

    def test_stride_must_be_power_of_two(self) -> None:
        """Non power-of-two strides are programmer errors."""
        with pytest.raises(AssertionError):
            Assertion.periodic(0, 0, 3, 1)

    def test_first_step_within_stride(self) -> None:
        """First step must lie inside the first period."""
        with pytest.raises(AssertionError):
            Assertion.periodic(0, 4, 4, 1)

    def test_sequence_value_count(self) -> None:
        """Sequences need a power-of-two number (> 1) of values."""
        with pytest.raises(AssertionError):
            Assertion.sequence(0, 0, 2, [1, 2, 3])
        with pytest.raises(AssertionError):
            Assertion.sequence(0, 0, 2, [1])


class TestTraceShape:
    """Each structural violation maps to its own error with expected/actual values."""

    def test_fits(self) -> None:
        """Assertions inside the trace pass."""
        check_assertion(Assertion.single(1, 7, 0), 2, 8)
        check_assertion(Assertion.periodic(0, 1, 8, 0), 1, 8)
        check_assertion(Assertion.sequence(0, 0, 8, [1, 2, 3, 4]), 1, 32)

    def test_width_too_short(self) -> None:
        """Column c against width w <= c reports (c + 1, w)."""
        assert _check_error(Assertion.single(3, 0, 1), 3, 8) == TraceWidthTooShort(4, 3)
        assert _check_error(Assertion.single(5, 0, 1), 2, 8) == TraceWidthTooShort(6, 2)

    @pytest.mark.parametrize("assertion", [
        Assertion.single(0, 0, 1),
        Assertion.periodic(0, 0, 2, 1),
        Assertion.sequence(0, 0, 2, [1, 2]),
    ])
    def test_length_not_power_of_two(self, assertion: Assertion) -> None:
        """Length 7 is rejected regardless of the assertion kind."""
        assert _check_error(assertion, 1, 7) == TraceLengthNotPowerOfTwo(7)

    def test_length_zero(self) -> None:
        """Empty traces are not a power of two."""
        with pytest.raises(TraceLengthNotPowerOfTwo):
            validate_trace_length(0)

    def test_single_step_past_end(self) -> None:
        """Expected length is one past the referenced step."""
        assert _check_error(Assertion.single(0, 8, 1), 1, 8) == TraceLengthTooShort(9, 8)

    def test_periodic_stride_past_end(self) -> None:
        """A periodic assertion needs at least one full period."""
        assert _check_error(Assertion.periodic(0, 1, 16, 1), 1, 8) == TraceLengthTooShort(16, 8)

    def test_sequence_length_not_exact(self) -> None:
        """A sequence implying 16 rows against 32 reports (16, 32)."""
        assertion = Assertion.sequence(0, 0, 4, [1, 2, 3, 4])
        assert _check_error(assertion, 1, 32) == TraceLengthNotExact(16, 32)

    def test_sequence_shorter_trace_not_exact(self) -> None:
        """Sequences require equality, a longer implied length is also rejected."""
        assertion = Assertion.sequence(0, 0, 4, [1, 2, 3, 4])
        assert _check_error(assertion, 1, 8) == TraceLengthNotExact(16, 8)


class TestShapePrecedence:
    """Width, then power of two, then exact or minimum length."""

    def test_width_before_power_of_two(self) -> None:
        """A too-narrow trace with a bad length reports width."""
        assert _check_error(Assertion.single(2, 0, 1), 1, 7) == TraceWidthTooShort(3, 1)

    def test_power_of_two_before_too_short(self) -> None:
        """A bad length is reported before the step range."""
        assert _check_error(Assertion.single(0, 9, 1), 1, 7) == TraceLengthNotPowerOfTwo(7)

    def test_power_of_two_before_not_exact(self) -> None:
        """A bad length is reported before the sequence span."""
        assertion = Assertion.sequence(0, 0, 4, [1, 2, 3, 4])
        assert _check_error(assertion, 1, 12) == TraceLengthNotPowerOfTwo(12)

    def test_width_before_not_exact(self) -> None:
        """Width is reported before the sequence span."""
        assertion = Assertion.sequence(4, 0, 4, [1, 2, 3, 4])
        assert _check_error(assertion, 2, 32) == TraceWidthTooShort(5, 2)


class TestErrorMessages:
    """Diagnostics carry both numbers."""

    def test_messages(self) -> None:
        """Each variant renders expected and actual values."""
        assert str(TraceWidthTooShort(4, 3)) == "expected trace width to be at least 4, but was 3"
        assert str(TraceLengthNotPowerOfTwo(7)) == "expected trace length to be a power of two, but was 7"
        assert str(TraceLengthTooShort(9, 8)) == "expected trace length to be at least 9, but was 8"
        assert str(TraceLengthNotExact(16, 32)) == "expected trace length to be exactly 16, but was 32"

    def test_variants_are_distinct(self) -> None:
        """Same payload, different kind: not equal."""
        assert TraceLengthTooShort(16, 32) != TraceLengthNotExact(16, 32)
