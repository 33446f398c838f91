"""Array puzzles: k-sum search, permutations, key counting and fractional knapsack."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from os import PathLike
from typing import TypeVar

T = TypeVar("T")


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All unique quadruplets drawn from ``nums`` whose sum equals ``target``.

    Each quadruplet is in ascending order and the list is ordered by the
    first, then second element of each quadruplet.
    """
    values = sorted(nums)
    n = len(values)
    found: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            wanted = target - values[i] - values[j]
            left, right = j + 1, n - 1
            while left < right:
                pair = values[left] + values[right]
                if pair < wanted:
                    left += 1
                elif pair > wanted:
                    right -= 1
                else:
                    third, fourth = values[left], values[right]
                    found.append([values[i], values[j], third, fourth])
                    while left < right and values[left] == third:
                        left += 1
                    while left < right and values[right] == fourth:
                        right -= 1
    return found


def next_permutation(nums: Sequence[T]) -> list[T]:
    """The lexicographically next arrangement of ``nums``.

    The greatest arrangement wraps round to the smallest (ascending) one.
    """
    result = list(nums)
    pivot = next(
        (i for i in range(len(result) - 2, -1, -1) if result[i] < result[i + 1]),
        None,
    )
    if pivot is None:
        return result[::-1]
    swap_with = next(
        i for i in range(len(result) - 1, pivot, -1) if result[i] > result[pivot]
    )
    result[pivot], result[swap_with] = result[swap_with], result[pivot]
    result[pivot + 1:] = result[:pivot:-1]
    return result


def _permute(items: list[T], start: int) -> Iterator[list[T]]:
    if start == len(items) - 1:
        yield list(items)
        return
    for i in range(start, len(items)):
        items[i], items[start] = items[start], items[i]
        yield from _permute(items, start + 1)
        items[i], items[start] = items[start], items[i]


def permutations(values: Iterable[T]) -> Iterator[list[T]]:
    """Yield every arrangement of ``values`` in swap-and-recurse order.

    An empty input yields nothing.
    """
    items = list(values)
    if items:
        yield from _permute(items, 0)


def write_permutations(values: Iterable[object], path: str | PathLike[str]) -> int:
    """Append every permutation of ``values`` to ``path``, one per line.

    Each element is followed by a single space. Returns the number of lines written.
    """
    count = 0
    with open(path, "a", encoding="utf-8") as handle:
        for arrangement in permutations(values):
            handle.write("".join(f"{value} " for value in arrangement) + "\n")
            count += 1
    return count


def swap_arrays(first: Sequence[T], second: Sequence[T]) -> tuple[list[T], list[T]]:
    """Exchange the contents of two equally long sequences."""
    if len(first) != len(second):
        raise ValueError("arrays must have the same length")
    return list(second), list(first)


def count_keys(names: Iterable[str]) -> Counter[str]:
    """How many times each (case-sensitive) name occurs."""
    return Counter(names)


@dataclass(frozen=True)
class Item:
    """An object that may be taken whole or in part into the knapsack."""

    weight: float
    profit: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        """Profit per unit of weight."""
        return self.profit / self.weight


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Greatest profit when items may be split, filling best ratios first."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if item.weight > remaining:
            total += item.profit * (remaining / item.weight)
            break
        total += item.profit
        remaining -= item.weight
    return total