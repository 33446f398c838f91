import pytest

from algos.searching import binary_search, count_at_most, largest

SORTED = [1, 3, 5, 7, 9, 11, 13]


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_every_element(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


@pytest.mark.parametrize("target", [0, 2, 8, 14])
def test_binary_search_missing_returns_none(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


def test_binary_search_duplicates_hit_a_matching_slot():
    values = [2, 2, 2, 2, 4]
    assert values[binary_search(values, 2)] == 2


def test_count_at_most_unsorted_input():
    assert count_at_most([5, 1, 3], 3) == 2


def test_count_at_most_bounds():
    values = [4, 8, 15, 16, 23, 42]
    assert count_at_most(values, max(values)) == len(values)
    assert count_at_most(values, min(values) - 1) == 0


def test_count_at_most_includes_duplicates_of_target():
    values = [7, 7, 7, 1]
    assert count_at_most(values, 7) == len(values)


def test_count_at_most_empty():
    assert count_at_most([], 10) == 0


def test_largest_of_source_array():
    assert largest([214, 2134, 3456, 54]) == 3456


def test_largest_all_negative():
    values = [-5, -2, -9]
    assert largest(values) == -2


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])