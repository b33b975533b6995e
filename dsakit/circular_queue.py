"""A first-in, first-out queue kept in a ring buffer that doubles when full."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class CircularQueue(Generic[T]):
    """A queue over a fixed-size ring of slots.

    When every slot is taken the ring is replaced by one twice as large,
    with the elements laid out again from its start.
    """

    def __init__(self, capacity: int = 5, items: Iterable[T] = ()) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[T | None] = [None] * capacity
        self._first = 0
        self._size = 0
        for item in items:
            self.enqueue(item)

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)

    def enqueue(self, element: T) -> None:
        """Add ``element`` at the back."""
        if self._size == len(self._slots):
            ordered = list(self)
            self._slots = [*ordered, *([None] * len(ordered))]
            self._first = 0
        self._slots[(self._first + self._size) % len(self._slots)] = element
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the element at the front."""
        if self._size == 0:
            raise QueueEmptyError("queue is empty")
        element = self._slots[self._first]
        self._slots[self._first] = None
        self._first = (self._first + 1) % len(self._slots)
        self._size -= 1
        if self._size == 0:
            self._first = 0
        return element  # type: ignore[return-value]

    def front(self) -> T:
        """Return the element at the front without removing it."""
        if self._size == 0:
            raise QueueEmptyError("queue is empty")
        return self._slots[self._first]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Elements from front to back."""
        capacity = len(self._slots)
        for offset in range(self._size):
            yield self._slots[(self._first + offset) % capacity]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r})"