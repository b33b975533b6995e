from dsakit.pair import Pair


def test_nested_pair_access():
    inner = Pair(5, 16)
    outer = Pair(inner, 10)
    assert (outer.x.x, outer.x.y, outer.y) == (5, 16, 10)


def test_nested_pair_other_values():
    outer = Pair(Pair(70, 80), 90)
    assert outer.x.x == 70
    assert outer.x.y == 80
    assert outer.y == 90


def test_fields_can_be_set():
    p = Pair(0, "a")
    p.x = 100
    p.y = "b"
    assert (p.x, p.y) == (100, "b")


def test_equality_by_value():
    assert Pair(1, Pair(2, 3)) == Pair(1, Pair(2, 3))
    assert not Pair(1, 2) == Pair(2, 1)


def test_mixed_types():
    p = Pair(100, 34.21)
    assert p.x == 100
    assert p.y == 34.21