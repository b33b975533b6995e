"""Classic recursive number and sequence exercises."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def factorial(n: int) -> int:
    """n! for n >= 0."""
    _require_non_negative("n", n)
    return 1 if n == 0 else n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def first_occurrence(values: Sequence[int], key: int) -> int:
    """Index of the first element equal to ``key``, or -1."""
    return next((i for i, value in enumerate(values) if value == key), -1)


def last_occurrence(values: Sequence[int], key: int) -> int:
    """Index of the last element equal to ``key``, or -1."""
    return next(
        (i for i in range(len(values) - 1, -1, -1) if values[i] == key), -1
    )


def count_digits(n: int) -> int:
    """Number of decimal digits of ``n``; zero has none."""
    n = abs(n)
    return 0 if n == 0 else count_digits(n // 10) + 1


def power(base: int, exponent: int) -> int:
    """``base`` raised to the non-negative integer ``exponent``."""
    _require_non_negative("exponent", exponent)
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def count_down(n: int) -> list[int]:
    """The numbers n, n-1, ..., 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """The numbers 1, 2, ..., n."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return list(range(1, n + 1))


def sum_to(n: int) -> int:
    """Sum of the integers 0..n."""
    _require_non_negative("n", n)
    return sum(range(n + 1))


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value of items whose weights fit in ``capacity``, each item
    taken at most once."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    _require_non_negative("capacity", capacity)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        without = best(count - 1, room)
        weight = weights[count - 1]
        if weight <= room:
            return max(values[count - 1] + best(count - 1, room - weight), without)
        return without

    return best(len(weights), capacity)