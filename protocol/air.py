"""Base class for Algebraic Intermediate Representations.

An AIR describes what a valid execution trace looks like: transition
constraints relating each row to the next, and boundary assertions pinning
specific cells to values derived from the public inputs.

Example:
    class CounterAir(Air):
        def evaluate_transition(self, current, nxt):
            return [nxt[0] - current[0] - FF(1)]

        def get_assertions(self):
            return [Assertion.single(0, 0, 0)]
"""

from abc import ABC, abstractmethod
from typing import List

from primitives.field import FF
from protocol.assertions import Assertion
from protocol.options import ProofOptions
from protocol.trace import TraceInfo


class Air(ABC):
    """AIR bound to one trace shape, one public input and one set of options."""

    def __init__(self, trace_info: TraceInfo, pub_inputs: FF, options: ProofOptions) -> None:
        self.trace_info = trace_info
        self.pub_inputs = pub_inputs
        self.options = options

    @property
    def trace_length(self) -> int:
        return self.trace_info.length

    @property
    def last_step(self) -> int:
        return self.trace_info.length - 1

    @abstractmethod
    def evaluate_transition(self, current: FF, nxt: FF) -> List[FF]:
        """Evaluate transition constraints between two consecutive rows.

        Args:
            current: Row at step i
            nxt: Row at step i + 1

        Returns:
            One value per constraint; all zero when the transition is valid
        """
        pass

    @abstractmethod
    def get_assertions(self) -> List[Assertion]:
        """Boundary assertions, possibly depending on the public inputs."""
        pass

    @staticmethod
    def pub_inputs_to_elements(pub_inputs: FF) -> List[int]:
        """Flatten public inputs for the Fiat-Shamir seed."""
        return [int(pub_inputs)]
