"""A last-in, first-out stack, either bounded or growing on demand."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a bounded stack that is full."""


class Stack(Generic[T]):
    """A stack of elements.

    With a ``capacity`` the stack refuses pushes once it holds that many
    elements; without one it grows as needed.
    """

    def __init__(self, capacity: int | None = None, items: Iterable[T] = ()) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []
        for item in items:
            self.push(item)

    def push(self, element: T) -> None:
        """Put ``element`` on top of the stack."""
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise StackFullError(f"stack is full ({self.capacity} elements)")
        self._items.append(element)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Elements from the top down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity!r}, items={self._items!r})"