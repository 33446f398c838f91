"""Integer and matrix arithmetic: powers, determinants, checksums and friends."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent`` modulo ``modulus`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus == 0:
        raise ValueError("modulus must be non-zero")
    result = 1
    while exponent:
        if exponent % 2:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent //= 2
    return result


def _cofactor_expansion(rows: list[list[int]]) -> int:
    if len(rows) == 1:
        return rows[0][0]
    total = 0
    for column, value in enumerate(rows[0]):
        minor = [row[:column] + row[column + 1:] for row in rows[1:]]
        sign = 1 if column % 2 == 0 else -1
        total += sign * value * _cofactor_expansion(minor)
    return total


def determinant(matrix: Iterable[Iterable[int]]) -> int:
    """Determinant of a square matrix by cofactor expansion along the first row."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if size == 0:
        raise ValueError("matrix must not be empty")
    if any(len(row) != size for row in rows):
        raise ValueError("matrix must be square")
    return _cofactor_expansion(rows)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points in the plane."""
    return math.hypot(x2 - x1, y2 - y1)


def factorial(n: int) -> int:
    """Product of the integers from 1 to ``n``; 1 when ``n`` is below 2."""
    return math.prod(range(1, n + 1))


def factorial_digits(n: int) -> str:
    """Decimal digits of ``n!``, most significant first."""
    return str(factorial(n))


def sum_of_factorials(n: int) -> int:
    """Sum of ``i!`` for ``i`` from 1 to ``n``."""
    return sum(factorial(i) for i in range(1, n + 1))


def matrix_multiply(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Product of two matrices; columns of ``first`` must equal rows of ``second``."""
    inner = len(second)
    if any(len(row) != inner for row in first):
        raise ValueError(
            "number of columns of the first matrix must equal "
            "number of rows of the second"
        )
    width = len(second[0]) if second else 0
    if any(len(row) != width for row in second):
        raise ValueError("second matrix must be rectangular")
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def sender_checksum(values: Iterable[int]) -> int:
    """Bitwise complement of the sum of ``values``."""
    return ~sum(values)


def receiver_checksum(values: Iterable[int], checksum: int) -> int:
    """Complement of the sum of ``values`` plus the sender's checksum.

    Zero means no error was detected.
    """
    return ~(sum(values) + checksum)


def longest_zero_run(number: int) -> int:
    """Length of the longest run of zeros in the binary form of ``number``.

    Non-positive numbers have no zero runs and give 0.
    """
    if number <= 0:
        return 0
    return max(len(run) for run in bin(number)[2:].split("1"))


def numbers_with_longest_zero_run(numbers: Iterable[int]) -> list[int]:
    """Numbers whose longest binary zero run is the greatest, in reverse input order."""
    items = list(numbers)
    if not items:
        return []
    runs = [longest_zero_run(number) for number in items]
    best = max(runs)
    return [number for number, run in zip(reversed(items), reversed(runs)) if run == best]


def swap_values(a: int, b: int) -> tuple[int, int]:
    """Return the two values exchanged."""
    return b, a


def count_up(start: int, stop: int = 100) -> range:
    """Integers from ``start`` up to and including ``stop``."""
    return range(start, stop + 1)