"""Comparison and distribution sorts, inversion counting and merging."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "merge_sort",
    "bubble_sort",
    "cocktail_sort",
    "quick_sort",
    "quick_sort_first_pivot",
    "insertion_sort",
    "selection_sort",
    "heap_sort",
    "radix_sort",
    "count_inversions",
    "merge_sorted",
    "quick_sort_timings",
]


def _merge(left: Sequence[Any], right: Sequence[Any]) -> tuple[list[Any], int]:
    """Merge two sorted runs, returning the result and the inversions crossed."""
    merged: list[Any] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _merge_sort_counting(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return list(items), 0
    middle = (len(items) + 1) // 2
    left, left_count = _merge_sort_counting(items[:middle])
    right, right_count = _merge_sort_counting(items[middle:])
    merged, split_count = _merge(left, right)
    return merged, left_count + right_count + split_count


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the values in ascending order (stable)."""
    return _merge_sort_counting(list(values))[0]


def count_inversions(values: Iterable[Any]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    return _merge_sort_counting(list(values))[1]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops as soon as a pass makes no swap."""
    items = list(values)
    n = len(items)
    for done in range(n):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def cocktail_sort(values: Iterable[Any]) -> list[Any]:
    """Bidirectional bubble sort (cocktail shaker sort)."""
    items = list(values)
    start, end = 0, len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        start += 1
    return items


def _partition_last(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _partition_first(items: list[Any], start: int, end: int) -> int:
    pivot = items[start]
    i = start + 1
    for j in range(start + 1, end + 1):
        if items[j] < pivot:
            items[i], items[j] = items[j], items[i]
            i += 1
    items[i - 1], items[start] = items[start], items[i - 1]
    return i - 1


def _quick_sort_in_place(items: list[Any], partition) -> None:
    # An explicit stack keeps deep (worst-case) partitions off the call stack.
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort using the last element of each range as the pivot."""
    items = list(values)
    _quick_sort_in_place(items, _partition_last)
    return items


def quick_sort_first_pivot(values: Iterable[Any]) -> list[Any]:
    """Quick sort using the first element of each range as the pivot."""
    items = list(values)
    _quick_sort_in_place(items, _partition_first)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Selection sort: repeatedly move the smallest remaining value forward."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
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


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Heap sort using a max-heap."""
    items = list(values)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root)
    for last in range(n - 1, 0, -1):
        items[0], items[last] = items[last], items[0]
        _sift_down(items, last, 0)
    return items


def _counting_pass(items: list[int], place: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in items:
        buckets[(value // place) % 10].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort requires non-negative integers")
    if not items:
        return items
    largest = max(items)
    place = 1
    while largest // place > 0:
        items = _counting_pass(items, place)
        place *= 10
    return items


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences; on ties the element of ``second`` comes first."""
    a, b = list(first), list(second)
    merged: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def _time_sort(items: list[int]) -> int:
    started = time.perf_counter_ns()
    _quick_sort_in_place(items, _partition_first)
    return (time.perf_counter_ns() - started) // 1000


def quick_sort_timings(sizes: Iterable[int]) -> dict[int, dict[str, int]]:
    """Time first-pivot quick sort on best, average and worst inputs.

    Returns, for each size, the elapsed microseconds under the keys
    ``"best"`` (ascending input), ``"average"`` (random input) and
    ``"worst"`` (descending input).
    """
    timings: dict[int, dict[str, int]] = {}
    for size in sizes:
        if size < 0:
            raise ValueError("sizes must be non-negative")
        ascending = list(range(size))
        shuffled = [random.randint(0, 2**31 - 1) for _ in range(size)]
        descending = list(range(111111, 111111 - size, -1))
        timings[size] = {
            "best": _time_sort(ascending),
            "average": _time_sort(shuffled),
            "worst": _time_sort(descending),
        }
    return timings