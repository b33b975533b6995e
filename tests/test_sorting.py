import pytest

from dsakit.sorting import (
    add_digit_arrays,
    binary_search,
    bubble_sort,
    insertion_sort,
    linear_search,
    merge_sorted,
    push_zeros_to_end,
    rotate,
    selection_sort,
    sort_0_and_1,
    sort_012,
)

SAMPLES = [
    [],
    [1],
    [3, 5, 6, 2, 1],
    [5, -1, 5, 0, 2, 2, 9],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
]


def test_push_zeros_to_end():
    assert push_zeros_to_end([0, 1, 0, 3, 12]) == [1, 3, 12, 0, 0]


def test_push_zeros_preserves_counts():
    values = [0, 0, 4, 0, 7]
    result = push_zeros_to_end(values)
    assert sorted(result) == sorted(values)
    assert result[result.index(0):] == [0] * values.count(0)


def test_binary_search_finds_every_element():
    values = [1, 3, 5, 7, 9, 11]
    for index, value in enumerate(values):
        assert binary_search(values, value) == index


def test_binary_search_missing():
    assert binary_search([1, 3, 5], 4) == -1
    assert binary_search([], 4) == -1


@pytest.mark.parametrize("sorter", [bubble_sort, insertion_sort, selection_sort])
@pytest.mark.parametrize("values", SAMPLES)
def test_sorts_agree_with_sorted(sorter, values):
    original = list(values)
    assert sorter(values) == sorted(values)
    assert values == original


def test_selection_sort_source_example():
    assert selection_sort([3, 5, 6, 2, 1]) == [1, 2, 3, 5, 6]


def test_linear_search_first_index():
    assert linear_search([4, 2, 1, 2], 2) == 1


def test_linear_search_missing():
    assert linear_search([4, 2, 1], 8) == -1


@pytest.mark.parametrize(
    "first, second",
    [([1, 3], [2, 4]), ([], [1, 2]), ([1, 2], []), ([1, 1, 5], [1, 4, 6, 8])],
)
def test_merge_sorted(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


def test_rotate_source_example():
    assert rotate([1, 2, 3, 4, 5, 6], 2) == [3, 4, 5, 6, 1, 2]


@pytest.mark.parametrize("d", [0, 6])
def test_rotate_identity(d):
    values = [1, 2, 3, 4, 5, 6]
    assert rotate(values, d) == values


def test_rotate_out_of_range():
    with pytest.raises(ValueError):
        rotate([1, 2, 3], 4)
    with pytest.raises(ValueError):
        rotate([1, 2, 3], -1)


def test_sort_012_source_example():
    assert sort_012([1, 0, 2, 0, 1]) == [0, 0, 1, 1, 2]


def test_sort_012_invariant():
    values = [2, 2, 1, 0, 2, 0, 1, 1, 0]
    assert sort_012(values) == sorted(values)


def test_sort_012_rejects_other_values():
    with pytest.raises(ValueError):
        sort_012([0, 3, 1])


def test_sort_0_and_1_source_example():
    assert sort_0_and_1([1, 0, 1, 0, 0]) == [0, 0, 0, 1, 1]


def test_add_digit_arrays_carry_out():
    assert add_digit_arrays([9, 9], [1]) == [1, 0, 0]


def test_add_digit_arrays_unequal_lengths():
    assert add_digit_arrays([1, 2, 3], [4, 5]) == [1, 6, 8]


@pytest.mark.parametrize(
    "first, second",
    [([5, 0, 7], [9, 9, 9]), ([1], [2, 3, 4, 5]), ([8, 8], [8, 8])],
)
def test_add_digit_arrays_matches_integer_sum(first, second):
    def as_int(digits):
        return int("".join(map(str, digits)))

    assert as_int(add_digit_arrays(first, second)) == as_int(first) + as_int(second)