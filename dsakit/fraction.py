"""A mutable fraction of two integers with hand-rolled simplification."""

from __future__ import annotations

import math


class Fraction:
    """A numerator over a denominator.

    Operations that change the value are followed by :meth:`simplify`.
    Equality compares the stored numerator and denominator as they are, so
    ``2 / 4`` and ``1 / 2`` are not equal until simplified.
    """

    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        self.numerator = numerator
        self.denominator = denominator

    def simplify(self) -> None:
        """Divide both parts by their greatest common divisor.

        Only a divisor between 1 and the smaller of the two parts is looked
        for, so a fraction with a part below 1 is left as it is.
        """
        if min(self.numerator, self.denominator) >= 1:
            divisor = math.gcd(self.numerator, self.denominator)
            self.numerator //= divisor
            self.denominator //= divisor

    def _sum_parts(self, other: Fraction) -> tuple[int, int]:
        common = self.denominator * other.denominator
        numerator = (common // self.denominator) * self.numerator + (
            common // other.denominator
        ) * other.numerator
        return numerator, common

    def add(self, other: Fraction) -> None:
        """Add ``other`` to this fraction in place."""
        self.numerator, self.denominator = self._sum_parts(other)
        self.simplify()

    def multiply(self, other: Fraction) -> None:
        """Multiply this fraction by ``other`` in place."""
        self.numerator *= other.numerator
        self.denominator *= other.denominator
        self.simplify()

    def increment(self) -> Fraction:
        """Add one in place and return this fraction."""
        self.numerator += self.denominator
        self.simplify()
        return self

    def __add__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        result = Fraction(*self._sum_parts(other))
        result.simplify()
        return result

    def __mul__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        result = Fraction(
            self.numerator * other.numerator, self.denominator * other.denominator
        )
        result.simplify()
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return (
            self.numerator == other.numerator
            and self.denominator == other.denominator
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.numerator} / {self.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"