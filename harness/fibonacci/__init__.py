"""Fibonacci-family examples."""

from harness.fibonacci import fib2, fib8, mulfib2
from harness.fibonacci.fib2 import Fib2Air, Fib2Example, Fib2Prover
from harness.fibonacci.fib8 import Fib8Air, Fib8Example, Fib8Prover
from harness.fibonacci.mulfib2 import MulFib2Air, MulFib2Example, MulFib2Prover
from harness.fibonacci.utils import compute_fib_term, compute_mulfib_term

__all__ = [
    "fib2",
    "fib8",
    "mulfib2",
    "Fib2Air",
    "Fib2Example",
    "Fib2Prover",
    "Fib8Air",
    "Fib8Example",
    "Fib8Prover",
    "MulFib2Air",
    "MulFib2Example",
    "MulFib2Prover",
    "compute_fib_term",
    "compute_mulfib_term",
]
