"""Classic comparison and distribution sorts, inversion counting and timing helpers."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

_WORST_CASE_BASE = 111111
_RANDOM_LIMIT = 2**31


def merge_sorted(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Merge two sorted sequences into one sorted list.

    On equal keys the element of ``second`` is taken first.
    """
    left, right = list(first), list(second)
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_stable(left: list[T], right: list[T]) -> tuple[list[T], int]:
    """Stable merge returning the merged list and the inversions crossing it."""
    merged: list[T] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _merge_sort_counting(values: list[T]) -> tuple[list[T], int]:
    if len(values) <= 1:
        return list(values), 0
    mid = (len(values) + 1) // 2
    left, left_count = _merge_sort_counting(values[:mid])
    right, right_count = _merge_sort_counting(values[mid:])
    merged, cross = _merge_stable(left, right)
    return merged, left_count + right_count + cross


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new list holding ``values`` in ascending order (stable)."""
    return _merge_sort_counting(list(values))[0]


def count_inversions(values: Iterable[T]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    return _merge_sort_counting(list(values))[1]


def _counting_pass(values: list[int], place: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in values:
        buckets[(value // place) % 10].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers with least-significant-digit radix sort."""
    result = list(values)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(result)
    place = 1
    while largest // place > 0:
        result = _counting_pass(result, place)
        place *= 10
    return result


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy built by repeatedly selecting the minimum."""
    result = list(values)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble sort that stops as soon as a pass makes no swap."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def cocktail_sort(values: Iterable[T]) -> list[T]:
    """Bidirectional bubble (cocktail shaker) sort."""
    result = list(values)
    start, end = 0, len(result) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        start += 1
    return result


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy built by inserting each element into place."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _partition_last(items: list[T], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _partition_first(items: list[T], start: int, end: int) -> int:
    pivot = items[start]
    i = start + 1
    for j in range(start + 1, end + 1):
        if items[j] < pivot:
            items[i], items[j] = items[j], items[i]
            i += 1
    items[i - 1], items[start] = items[start], items[i - 1]
    return i - 1


def _quick_sort(
    values: Iterable[T], partition: Callable[[list[T], int, int], int]
) -> list[T]:
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(result, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return result


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort partitioning around the last element (Lomuto scheme)."""
    return _quick_sort(values, _partition_last)


def quick_sort_first_pivot(values: Iterable[T]) -> list[T]:
    """Quicksort partitioning around the first element."""
    return _quick_sort(values, _partition_first)


def _sift_down(items: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort using an in-place binary max-heap."""
    result = list(values)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def time_sort(
    sort: Callable[[Sequence[T]], list[T]], values: Sequence[T]
) -> tuple[list[T], float]:
    """Run ``sort`` on ``values`` and return the result with the CPU seconds used."""
    started = time.process_time()
    result = sort(values)
    elapsed = time.process_time() - started
    return result, elapsed


def _elapsed_microseconds(values: list[int]) -> int:
    started = time.perf_counter()
    quick_sort_first_pivot(values)
    return int((time.perf_counter() - started) * 1_000_000)


def benchmark_quick_sort(sizes: Iterable[int]) -> dict[int, dict[str, int]]:
    """Time first-pivot quicksort on best, average and worst inputs.

    Returns, for each size, the elapsed microseconds under the keys
    ``"best"`` (ascending input), ``"average"`` (random input) and
    ``"worst"`` (descending input).
    """
    report: dict[int, dict[str, int]] = {}
    for size in sizes:
        ascending = list(range(size))
        shuffled = [random.randrange(_RANDOM_LIMIT) for _ in range(size)]
        descending = [_WORST_CASE_BASE - i for i in range(size)]
        report[size] = {
            "best": _elapsed_microseconds(ascending),
            "average": _elapsed_microseconds(shuffled),
            "worst": _elapsed_microseconds(descending),
        }
    return report