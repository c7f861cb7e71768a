"""Execution trace container."""

from dataclasses import dataclass
from typing import Callable, List

import numpy as np

from primitives.field import FF


@dataclass(frozen=True)
class TraceInfo:
    """Shape of an execution trace."""
    width: int
    length: int


class TraceTable:
    """Rectangular table of field elements: columns are registers, rows are steps.

    Values are stored column-major as an FF array of shape (width, length).
    """

    def __init__(self, columns: np.ndarray) -> None:
        assert columns.ndim == 2, "trace must be a 2D array of shape (width, length)"
        self.columns = columns

    @classmethod
    def fill(
        cls,
        width: int,
        length: int,
        init: Callable[[List[FF]], None],
        update: Callable[[int, List[FF]], None],
    ) -> "TraceTable":
        """Build a trace row by row from a mutable state of `width` elements.

        `init` writes the first row; `update(step, state)` turns row `step`
        into row `step + 1` in place.
        """
        state = [FF(0)] * width
        init(state)
        rows = [[int(v) for v in state]]
        for step in range(length - 1):
            update(step, state)
            rows.append([int(v) for v in state])
        return cls(FF([list(col) for col in zip(*rows)]))

    @property
    def width(self) -> int:
        return self.columns.shape[0]

    @property
    def length(self) -> int:
        return self.columns.shape[1]

    @property
    def info(self) -> TraceInfo:
        return TraceInfo(self.width, self.length)

    def get(self, column: int, step: int) -> FF:
        return self.columns[column, step]

    def get_row(self, step: int) -> FF:
        return self.columns[:, step]

    def to_lists(self) -> List[List[int]]:
        """Plain-int column lists (for embedding in a proof)."""
        return [[int(v) for v in col] for col in self.columns]
