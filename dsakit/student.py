"""A student record with a name and an age."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Student:
    """A student's age and name."""

    age: int
    name: str

    def copy(self) -> Student:
        """An independent copy of this student."""
        return replace(self)

    def __str__(self) -> str:
        return f"{self.name} {self.age}"