"""Array problems: k-sums, permutations, knapsack, gaps and small utilities."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

__all__ = [
    "four_sum",
    "next_permutation",
    "permutations",
    "fractional_knapsack",
    "closest_elements",
    "missing_elements",
    "maximum",
    "swap_arrays",
    "count_up",
]


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All unique quadruplets of ``nums`` summing to ``target``, each ascending."""
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
                    low, high = values[left], values[right]
                    found.append([values[i], values[j], low, high])
                    while left < right and values[left] == low:
                        left += 1
                    while left < right and values[right] == high:
                        right -= 1
    return found


def next_permutation(nums: Iterable[Any]) -> list[Any]:
    """The lexicographically next arrangement; the last one wraps to the first."""
    items = list(nums)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]), None
    )
    if pivot is None:
        return items[::-1]
    swap_with = next(i for i in range(len(items) - 1, pivot, -1) if items[i] > items[pivot])
    items[pivot], items[swap_with] = items[swap_with], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return items


def permutations(values: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield every arrangement of ``values`` by the swap-and-recurse method.

    The first arrangement yielded is the input order itself.
    """
    items = list(values)
    last = len(items) - 1

    def walk(start: int) -> Iterator[tuple[Any, ...]]:
        if start == last:
            yield tuple(items)
            return
        for i in range(start, len(items)):
            items[i], items[start] = items[start], items[i]
            yield from walk(start + 1)
            items[i], items[start] = items[start], items[i]

    if items:
        yield from walk(0)


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Greatest profit from ``(weight, profit)`` items when items may be split."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    pairs = [(float(weight), float(profit)) for weight, profit in items]
    if any(weight <= 0 for weight, _ in pairs):
        raise ValueError("weights must be positive")
    ordered = sorted(pairs, key=lambda pair: pair[1] / pair[0], reverse=True)
    remaining = float(capacity)
    total = 0.0
    for weight, profit in ordered:
        if weight > remaining:
            total += profit * remaining / weight
            break
        total += profit
        remaining -= weight
    return total


def closest_elements(values: Iterable[int], k: int, x: int) -> list[int]:
    """The ``k`` values nearest to ``x`` (smaller wins ties), in ascending order."""
    items = list(values)
    if not 0 <= k <= len(items):
        raise ValueError("k must be between 0 and the number of values")
    nearest = heapq.nsmallest(k, items, key=lambda v: (abs(v - x), v))
    return sorted(nearest)


def missing_elements(values: Sequence[int]) -> list[int]:
    """Integers absent between the first and last of an ascending sequence."""
    missing: list[int] = []
    if not values:
        return missing
    offset = values[0]
    for index, value in enumerate(values):
        while offset < value - index:
            missing.append(index + offset)
            offset += 1
    return missing


def maximum(values: Iterable[Any]) -> Any:
    """Largest of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("maximum of an empty sequence")
    return max(items)


def swap_arrays(first: Iterable[Any], second: Iterable[Any]) -> tuple[list[Any], list[Any]]:
    """Exchange the contents of two equally long sequences."""
    a, b = list(first), list(second)
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    return b, a


def count_up(start: int, stop: int = 100) -> Iterator[int]:
    """Yield the integers from ``start`` up to and including ``stop``."""
    yield from range(start, stop + 1)