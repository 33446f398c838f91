"""Searching sorted data and simple aggregate queries over sequences."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def binary_search(values: Sequence[T], target: T) -> int | None:
    """Return the index of ``target`` in ascending ``values``, or ``None``.

    With duplicates, the index returned is the first midpoint that matches.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        current = values[mid]
        if current == target:
            return mid
        if target < current:
            high = mid - 1
        else:
            low = mid + 1
    return None


def count_at_most(values: Iterable[T], target: T) -> int:
    """Count how many of ``values`` are less than or equal to ``target``."""
    ordered = sorted(values)
    return bisect_right(ordered, target)


def largest(values: Iterable[T]) -> T:
    """Return the greatest element; raise ``ValueError`` when there is none."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)