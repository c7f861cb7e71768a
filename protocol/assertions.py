"""Boundary assertions pinning trace cells to expected values.

An assertion covers the steps `first_step + i * stride` of one column:

- single: one step (stride 0, one value)
- periodic: every `stride` steps across the whole trace, one repeated value
- sequence: `len(values)` steps spanning the whole trace, one value per step
"""

from dataclasses import dataclass
from typing import Iterator, Sequence

from primitives.field import FF, is_power_of_two


@dataclass(frozen=True)
class Assertion:
    """Assertion against one trace column."""
    column: int
    first_step: int
    stride: int
    values: tuple

    # --- Constructors ---

    @classmethod
    def single(cls, column: int, step: int, value) -> "Assertion":
        """Assert that trace[column][step] == value."""
        return cls(column, step, 0, (FF(int(value)),))

    @classmethod
    def periodic(cls, column: int, first_step: int, stride: int, value) -> "Assertion":
        """Assert value at first_step, first_step + stride, ... to the end of the trace."""
        _validate_stride(stride, first_step)
        return cls(column, first_step, stride, (FF(int(value)),))

    @classmethod
    def sequence(cls, column: int, first_step: int, stride: int, values: Sequence) -> "Assertion":
        """Assert values[i] at first_step + i * stride; the values span the whole trace."""
        _validate_stride(stride, first_step)
        assert len(values) > 1, "sequence assertion must have more than one value"
        assert is_power_of_two(len(values)), "number of values in a sequence assertion must be a power of 2"
        return cls(column, first_step, stride, tuple(FF(int(v)) for v in values))

    # --- Kind ---

    def is_single(self) -> bool:
        return self.stride == 0

    def is_periodic(self) -> bool:
        return self.stride > 0 and len(self.values) == 1

    def is_sequence(self) -> bool:
        return len(self.values) > 1

    # --- Evaluation ---

    def get_num_steps(self, trace_length: int) -> int:
        """Number of steps covered in a trace of the given length."""
        if self.is_single():
            return 1
        if self.is_periodic():
            return trace_length // self.stride
        return len(self.values)

    def steps(self, trace_length: int) -> Iterator[tuple[int, FF]]:
        """Yield (step, expected value) pairs for a trace of the given length."""
        for i in range(self.get_num_steps(trace_length)):
            value = self.values[0] if len(self.values) == 1 else self.values[i]
            yield self.first_step + i * self.stride, value


def _validate_stride(stride: int, first_step: int) -> None:
    assert is_power_of_two(stride), f"stride must be a power of 2, but was {stride}"
    assert first_step < stride, f"first step must be smaller than stride ({stride}), but was {first_step}"
