"""Searching, sorting and rearranging lists of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest


def push_zeros_to_end(values: Iterable[int]) -> list[int]:
    """Move every zero to the end, keeping the other elements in order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def binary_search(values: Sequence[int], key: int) -> int:
    """Index of ``key`` in the ascending sequence ``values``, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by bubble sort."""
    items = list(values)
    n = len(items)
    for rnd in range(n - 1):
        for i in range(n - rnd - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def linear_search(values: Iterable[int], key: int) -> int:
    """Index of the first element equal to ``key``, or -1."""
    return next((i for i, value in enumerate(values) if value == key), -1)


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences; on ties the element of ``second``
    comes first."""
    result = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def rotate(values: Sequence[int], d: int) -> list[int]:
    """Rotate left by ``d`` places, 0 <= d <= len(values)."""
    if not 0 <= d <= len(values):
        raise ValueError(f"rotation {d} out of range for {len(values)} elements")
    items = list(values)
    return items[d:] + items[:d]


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by repeatedly moving the smallest remaining
    element to the front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a list holding only 0, 1 and 2 in a single pass."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        value = items[mid]
        if value == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
        else:
            raise ValueError(f"unexpected value {value!r}; only 0, 1 and 2 allowed")
    return items


def sort_0_and_1(values: Iterable[int]) -> list[int]:
    """Move every 1 after the other elements, which keep their order."""
    items = list(values)
    others = [value for value in items if value != 1]
    return others + [1] * (len(items) - len(others))


def add_digit_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two numbers given as lists of decimal digits, most significant
    first, and return the digits of the sum."""
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    digits.reverse()
    if carry:
        digits.insert(0, carry)
    return digits