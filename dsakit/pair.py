"""A pair of two values of possibly different types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
V = TypeVar("V")


@dataclass
class Pair(Generic[T, V]):
    """Two values, ``x`` and ``y``; either may itself be a pair."""

    x: T
    y: V