"""Bit manipulation helpers, XOR tricks and one's-complement checksums."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

__all__ = [
    "is_odd",
    "get_bit",
    "set_bit",
    "clear_bit",
    "update_bit",
    "clear_last_bits",
    "clear_bit_range",
    "count_set_bits",
    "to_binary_digits",
    "subsets",
    "find_single",
    "find_two_singles",
    "longest_zero_run",
    "numbers_with_longest_zero_run",
    "checksum",
    "verify_checksum",
]


def is_odd(x: int) -> bool:
    """True if the lowest bit of ``x`` is set."""
    return bool(x & 1)


def get_bit(x: int, i: int) -> int:
    """Return bit ``i`` of ``x`` (0 or 1)."""
    return (x >> i) & 1


def set_bit(x: int, i: int) -> int:
    """Return ``x`` with bit ``i`` set."""
    return x | (1 << i)


def clear_bit(x: int, i: int) -> int:
    """Return ``x`` with bit ``i`` cleared."""
    return x & ~(1 << i)


def update_bit(x: int, i: int, value: int) -> int:
    """Return ``x`` with bit ``i`` set to ``value`` (0 or 1)."""
    if value not in (0, 1):
        raise ValueError("bit value must be 0 or 1")
    return clear_bit(x, i) | (value << i)


def clear_last_bits(x: int, i: int) -> int:
    """Return ``x`` with its lowest ``i`` bits cleared."""
    return x & (~0 << i)


def clear_bit_range(x: int, i: int, j: int) -> int:
    """Return ``x`` with bits ``i`` through ``j`` (inclusive) cleared."""
    if i > j:
        raise ValueError("range start must not exceed its end")
    mask = (~0 << (j + 1)) | ((1 << i) - 1)
    return x & mask


def count_set_bits(n: int) -> int:
    """Count the set bits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return bin(n).count("1")


def to_binary_digits(n: int) -> int:
    """Return an integer whose decimal digits spell ``n`` in binary."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return int(format(n, "b"))


def subsets(text: str) -> list[str]:
    """List every subsequence of ``text``, in the order of the bitmasks 0..2**n-1.

    Bit ``j`` of the mask selects character ``j``.
    """
    return [
        "".join(char for j, char in enumerate(text) if mask >> j & 1)
        for mask in range(1 << len(text))
    ]


def find_single(values: Iterable[int]) -> int:
    """Return the one value that occurs an odd number of times among pairs."""
    return reduce(xor, values, 0)


def find_two_singles(values: Iterable[int]) -> tuple[int, int]:
    """Return the two values that appear once when all others appear twice.

    The first of the pair is the one holding the lowest bit in which the two differ.
    """
    items = list(values)
    combined = reduce(xor, items, 0)
    if combined == 0:
        raise ValueError("values do not contain two distinct unpaired numbers")
    mask = combined & -combined
    with_bit = reduce(xor, (v for v in items if v & mask), 0)
    return with_bit, combined ^ with_bit


def longest_zero_run(n: int) -> int:
    """Length of the longest run of zeros in the binary form of ``n``.

    Trailing zeros count as a run; values below 1 have none.
    """
    if n <= 0:
        return 0
    return max(len(run) for run in format(n, "b").split("1"))


def numbers_with_longest_zero_run(values: Iterable[int]) -> list[int]:
    """Values sharing the longest zero run, in reverse input order."""
    items = list(values)
    if not items:
        return []
    best = max(longest_zero_run(v) for v in items)
    return [v for v in reversed(items) if longest_zero_run(v) == best]


def checksum(values: Iterable[int]) -> int:
    """Sender checksum: bitwise complement of the sum of the values."""
    return ~sum(values)


def verify_checksum(values: Iterable[int], sender_checksum: int) -> bool:
    """True if the received values agree with the sender's checksum."""
    return ~(sum(values) + sender_checksum) == 0