"""Example harness: problem definitions wired to the proving engine."""

from typing import Callable

from harness.base import Example, SequenceExample
from harness.config import ExampleOptions
from harness.fibonacci import fib2, fib8, mulfib2

# Registry mapping example names to their factories
EXAMPLE_REGISTRY: dict[str, Callable[[ExampleOptions, int], Example]] = {
    "fib2": fib2.get_example,
    "fib8": fib8.get_example,
    "mulfib2": mulfib2.get_example,
}


def get_example(name: str, options: ExampleOptions, sequence_length: int) -> Example:
    """Construct an example by name.

    Raises:
        KeyError: If no example is registered under name
        AssertionError: If sequence_length violates the example's preconditions
        ProofError: If the resolved proof options are out of bounds
    """
    if name not in EXAMPLE_REGISTRY:
        raise KeyError(
            f"No example named '{name}'. "
            f"Available: {list(EXAMPLE_REGISTRY.keys())}"
        )
    return EXAMPLE_REGISTRY[name](options, sequence_length)


__all__ = [
    "Example",
    "SequenceExample",
    "ExampleOptions",
    "EXAMPLE_REGISTRY",
    "get_example",
]
