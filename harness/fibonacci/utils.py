"""Reference computations for the Fibonacci family."""

from primitives.field import FF


def compute_fib_term(n: int) -> FF:
    """n-th term of 1, 1, 2, 3, 5, ..."""
    t0, t1 = FF(1), FF(1)
    for _ in range(n - 1):
        t0, t1 = t1, t0 + t1
    return t0


def compute_mulfib_term(n: int) -> FF:
    """n-th term of 1, 2, 2, 4, 8, 32, ... where each term is the product of the previous two."""
    t0, t1 = FF(1), FF(2)
    for _ in range(n - 1):
        t0, t1 = t1, t0 * t1
    return t0
