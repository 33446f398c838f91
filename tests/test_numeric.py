import math

import pytest

from algos.numeric import (
    count_up,
    determinant,
    distance,
    factorial,
    factorial_digits,
    longest_zero_run,
    matrix_multiply,
    numbers_with_longest_zero_run,
    power_mod,
    receiver_checksum,
    sender_checksum,
    sum_of_factorials,
    swap_values,
)

MOD = 10**9 + 7


@pytest.mark.parametrize(
    "base, exponent, modulus",
    [(20, 2000000, MOD), (2, 10, 1000), (7, 1, 13), (123456789, 98765, MOD)],
)
def test_power_mod_agrees_with_builtin(base, exponent, modulus):
    assert power_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_power_mod_zero_exponent():
    assert power_mod(20, 0, MOD) == 1


def test_power_mod_negative_exponent_raises():
    with pytest.raises(ValueError):
        power_mod(2, -1, MOD)


def test_power_mod_zero_modulus_raises():
    with pytest.raises(ValueError):
        power_mod(2, 3, 0)


def test_determinant_identity():
    identity = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert determinant(identity) == 1


def test_determinant_single_element():
    assert determinant([[-7]]) == -7


def test_determinant_equal_rows_is_zero():
    assert determinant([[1, 2, 3], [4, 5, 6], [1, 2, 3]]) == 0


def test_determinant_row_swap_negates():
    a = [[2, 0, 1], [1, 3, 2], [1, 1, 1]]
    swapped = [a[1], a[0], a[2]]
    assert determinant(swapped) == -determinant(a)


def test_determinant_is_multiplicative():
    a = [[2, 1], [5, 3]]
    b = [[4, -2], [1, 7]]
    assert determinant(matrix_multiply(a, b)) == determinant(a) * determinant(b)


def test_determinant_non_square_raises():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])


def test_determinant_empty_raises():
    with pytest.raises(ValueError):
        determinant([])


def test_distance_source_example():
    assert math.isclose(distance(3, 4, 4, 3), math.sqrt(2))


def test_distance_symmetric_and_zero():
    assert distance(1, 2, 7, -3) == distance(7, -3, 1, 2)
    assert distance(5, 5, 5, 5) == 0


@pytest.mark.parametrize("n", [0, 1, 5, 20, 100])
def test_factorial_digits_match_math(n):
    assert factorial_digits(n) == str(math.factorial(n))


@pytest.mark.parametrize("n", [0, 1, 6, 12])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", [1, 3, 7])
def test_sum_of_factorials(n):
    assert sum_of_factorials(n) == sum(math.factorial(i) for i in range(1, n + 1))


def test_sum_of_factorials_zero():
    assert sum_of_factorials(0) == 0


def test_matrix_multiply_identity():
    a = [[1, 2, 3], [4, 5, 6]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_multiply(a, identity) == a


def test_matrix_multiply_shape():
    a = [[1, 2], [3, 4], [5, 6]]
    b = [[1, 2, 3, 4], [5, 6, 7, 8]]
    product = matrix_multiply(a, b)
    assert len(product) == 3
    assert all(len(row) == 4 for row in product)


def test_matrix_multiply_mismatch_raises():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])


def test_checksum_round_trip_is_zero():
    data = [10, 20, 30, 45]
    assert receiver_checksum(data, sender_checksum(data)) == 0


def test_sender_checksum_is_complement():
    data = [3, 9, 27]
    assert sender_checksum(data) == -sum(data) - 1


def test_checksum_detects_corruption():
    data = [10, 20, 30, 45]
    check = sender_checksum(data)
    corrupted = [10, 20, 33, 45]
    assert receiver_checksum(corrupted, check) == -3


@pytest.mark.parametrize("k", range(0, 10))
def test_longest_zero_run_power_of_two(k):
    assert longest_zero_run(int("1" + "0" * k, 2)) == k


def test_longest_zero_run_non_positive():
    assert longest_zero_run(0) == 0
    assert longest_zero_run(-8) == 0


def test_longest_zero_run_inner_gap():
    assert longest_zero_run(int("1000110", 2)) == 3


def test_numbers_with_longest_zero_run_reverse_order():
    assert numbers_with_longest_zero_run([8, 9, 24]) == [24, 8]


def test_numbers_with_longest_zero_run_empty():
    assert numbers_with_longest_zero_run([]) == []


def test_swap_values():
    assert swap_values(10, 20) == (20, 10)


def test_count_up_to_default_stop():
    values = list(count_up(95))
    assert values[0] == 95
    assert values[-1] == 100
    assert len(values) == 6


def test_count_up_past_stop_is_empty():
    assert list(count_up(101, 100)) == []