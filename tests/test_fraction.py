from fractions import Fraction as Exact

import pytest

from dsakit.fraction import Fraction


def _value(f: Fraction) -> Exact:
    return Exact(f.numerator, f.denominator)


def test_str_format():
    assert str(Fraction(15, 4)) == "15 / 4"


def test_add_in_place_gives_simplified_sum():
    f1 = Fraction(10, 2)
    f2 = Fraction(15, 4)
    f1.add(f2)
    assert str(f1) == "35 / 4"
    assert str(f2) == "15 / 4"


def test_add_keeps_exact_value():
    f1 = Fraction(3, 10)
    f1.add(Fraction(7, 15))
    assert _value(f1) == Exact(3, 10) + Exact(7, 15)
    assert Exact(f1.numerator, f1.denominator).denominator == f1.denominator


def test_plus_operator_matches_add_and_leaves_operands():
    f1 = Fraction(10, 2)
    f2 = Fraction(15, 4)
    f3 = f1 + f2
    in_place = Fraction(10, 2)
    in_place.add(f2)
    assert f3 == in_place
    assert f1 == Fraction(10, 2)
    assert f2 == Fraction(15, 4)


def test_multiply_in_place():
    f1 = Fraction(10, 2)
    f1.multiply(Fraction(15, 4))
    assert _value(f1) == Exact(10, 2) * Exact(15, 4)
    assert f1.denominator == _value(f1).denominator


def test_times_operator_matches_multiply():
    f1 = Fraction(10, 2)
    f2 = Fraction(15, 4)
    product = f1 * f2
    in_place = Fraction(10, 2)
    in_place.multiply(f2)
    assert product == in_place
    assert f1 == Fraction(10, 2)


def test_equality_compares_stored_parts():
    assert Fraction(10, 2) != Fraction(15, 4)
    assert Fraction(2, 4) != Fraction(1, 2)
    assert Fraction(1, 2) == Fraction(1, 2)


def test_simplify_divides_by_gcd():
    f = Fraction(12, 18)
    f.simplify()
    assert f == Fraction(2, 3)


def test_simplify_leaves_non_positive_parts():
    f = Fraction(0, 5)
    f.simplify()
    assert f == Fraction(0, 5)
    g = Fraction(-4, 8)
    g.simplify()
    assert g == Fraction(-4, 8)


def test_increment_adds_one_and_returns_self():
    f1 = Fraction(10, 2)
    result = f1.increment()
    assert result is f1
    assert str(f1) == "6 / 1"


def test_increment_chains():
    f1 = Fraction(10, 2)
    f1.increment().increment()
    assert str(f1) == "7 / 1"


def test_zero_denominator_rejected():
    with pytest.raises(ZeroDivisionError):
        Fraction(1, 0)


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        Fraction(1, 2) + 1
    with pytest.raises(TypeError):
        Fraction(1, 2) * "x"