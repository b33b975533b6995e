"""Small algorithms over lists of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def arrange(n: int) -> list[int]:
    """Return 1..n with odd numbers rising from the front and even numbers
    falling towards the back, e.g. 1 3 5 ... 6 4 2."""
    if n < 0:
        raise ValueError("n must not be negative")
    odds = list(range(1, n + 1, 2))
    evens = list(range(2, n + 1, 2))
    return odds + evens[::-1]


def duplicate_number(values: Sequence[int]) -> int | None:
    """Return the earliest element that occurs again later in the sequence,
    or None if every element is distinct."""
    counts = Counter(values)
    return next((value for value in values if counts[value] > 1), None)


def longest_arithmetic_run(values: Sequence[int]) -> int:
    """Length of the longest run of consecutive elements with a constant
    difference between neighbours."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    best = current = 2
    previous_diff = values[0] - values[1]
    for before, after in zip(values[1:], values[2:]):
        diff = after - before
        if diff == previous_diff:
            current += 1
        else:
            previous_diff = diff
            current = 2
        best = max(best, current)
    return best


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Elements of ``first`` that can be matched with an unused element of
    ``second``, in the order they appear in ``first``."""
    available = Counter(second)
    result = []
    for value in first:
        if available[value] > 0:
            available[value] -= 1
            result.append(value)
    return result


def largest(values: Iterable[int]) -> int:
    """The largest element."""
    try:
        return max(values)
    except ValueError:
        raise ValueError("largest() of an empty sequence") from None


def running_maxima(values: Iterable[int]) -> list[int]:
    """The maximum of every prefix of ``values``."""
    return list(accumulate(values, max))


def pair_sum_count(values: Sequence[int], target: int) -> int:
    """Number of index pairs i < j whose elements add up to ``target``."""
    return sum(1 for a, b in combinations(values, 2) if a + b == target)


def second_largest(values: Iterable[int]) -> int:
    """The second largest element; an equal copy of the largest counts."""
    top: int | None = None
    second: int | None = None
    for value in values:
        if top is None or value > top:
            second, top = top, value
        elif second is None or value > second:
            second = value
    if second is None:
        raise ValueError("at least two values are needed")
    return second


def array_sum(values: Iterable[int]) -> int:
    """Sum of all elements."""
    return sum(values)


def subarray_sums(values: Sequence[int]) -> list[int]:
    """Sums of every contiguous subarray, grouped by start index and growing
    towards the end."""
    return [
        total
        for start in range(len(values))
        for total in accumulate(values[start:])
    ]


def swap_alternate(values: Sequence[int]) -> list[int]:
    """Swap each element with its neighbour in pairs; an odd last element
    stays in place."""
    result = list(values)
    result[0:len(result) - 1:2], result[1::2] = result[1::2], result[0:len(result) - 1:2]
    return result


def triple_sum_count(values: Sequence[int], target: int) -> int:
    """Number of index triples i < j < k whose elements add up to ``target``."""
    return sum(1 for triple in combinations(values, 3) if sum(triple) == target)


def unique_elements(values: Iterable[int]) -> list[int]:
    """Each distinct element once, in order of first appearance."""
    return list(dict.fromkeys(values))


def sorted_unique(values: Iterable[int]) -> list[int]:
    """The distinct elements in ascending order."""
    return sorted(set(values))