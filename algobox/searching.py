"""Binary search over sorted sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from typing import Any, Optional

__all__ = ["binary_search", "count_at_most"]


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = low + (high - low) // 2
        current = values[middle]
        if current == target:
            return middle
        if current > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def count_at_most(values: Iterable[Any], target: Any) -> int:
    """Count how many of ``values`` (in any order) are less than or equal to ``target``."""
    return bisect.bisect_right(sorted(values), target)