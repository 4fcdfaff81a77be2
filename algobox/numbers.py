"""Number theory and arbitrary-precision arithmetic helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import combinations, zip_longest

__all__ = [
    "gcd",
    "extended_gcd",
    "modular_inverse",
    "solve_diophantine",
    "power_mod",
    "power",
    "factorize",
    "prime_sieve",
    "segmented_sieve",
    "smallest_prime_factors",
    "count_divisible_by_primes",
    "big_factorial",
    "add_big_numbers",
    "count_digits",
    "pyramid_blocks",
    "distance",
    "swap_without_temp",
    "divisors",
    "DEFAULT_PRIMES",
]

DEFAULT_PRIMES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 23, 29)

_DIGITS = frozenset("0123456789")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(x, y)`` with ``a * x + b * y == gcd(a, b)``."""
    if b == 0:
        return 1, 0
    x, y = extended_gcd(b, a % b)
    return y, x - (a // b) * y


def modular_inverse(a: int, modulus: int) -> int:
    """Return the inverse of ``a`` modulo ``modulus`` in ``[0, modulus)``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if gcd(a, modulus) != 1:
        raise ValueError(f"{a} has no inverse modulo {modulus}")
    x, _ = extended_gcd(a, modulus)
    return x % modulus


def solve_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Return one integer solution ``(x, y)`` of ``a * x + b * y == c``."""
    g = gcd(a, b)
    if g == 0 or c % g != 0:
        raise ValueError("no solution")
    k = c // g
    x, y = extended_gcd(a, b)
    return x * k, y * k


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` by binary exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus == 0:
        raise ValueError("modulus must be non-zero")
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def power(base: int, exponent: int) -> int:
    """Compute ``base ** exponent`` by binary exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def factorize(n: int) -> list[tuple[int, int]]:
    """Return the prime factorisation of ``n`` as ascending ``(prime, exponent)`` pairs."""
    if n < 1:
        raise ValueError("n must be positive")
    factors: list[tuple[int, int]] = []
    p = 2
    while p * p <= n:
        if n % p == 0:
            exponent = 0
            while n % p == 0:
                n //= p
                exponent += 1
            factors.append((p, exponent))
        p += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def prime_sieve(limit: int) -> list[int]:
    """Return all primes up to and including ``limit`` (sieve of Eratosthenes)."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return [i for i, flag in enumerate(is_prime) if flag]


def segmented_sieve(low: int, high: int) -> list[int]:
    """Return the primes in the closed range ``[low, high]``."""
    low = max(low, 2)
    if high < low:
        return []
    marks = bytearray([1]) * (high - low + 1)
    for p in prime_sieve(math.isqrt(high)):
        start = max(p * p, -(-low // p) * p)
        marks[start - low :: p] = bytes(len(range(start, high + 1, p)))
    return [low + i for i, flag in enumerate(marks) if flag]


def smallest_prime_factors(limit: int) -> list[int]:
    """Return a table whose entry ``i`` is the smallest prime factor of ``i``.

    Entries 0 and 1 are 0, since neither has a prime factor.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    table = list(range(limit + 1))
    for i in range(min(limit, 1) + 1):
        table[i] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if table[i] == i:
            for j in range(i * i, limit + 1, i):
                if table[j] == j:
                    table[j] = i
    return table


def count_divisible_by_primes(n: int, primes: Iterable[int] = DEFAULT_PRIMES) -> int:
    """Count integers in ``1..n`` divisible by at least one of ``primes``.

    Uses inclusion-exclusion over every non-empty subset of ``primes``.
    """
    chosen = list(primes)
    total = 0
    for size in range(1, len(chosen) + 1):
        sign = 1 if size % 2 else -1
        for combo in combinations(chosen, size):
            total += sign * (n // math.lcm(*combo))
    return total


def big_factorial(n: int) -> str:
    """Return ``n!`` written out in decimal."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return str(math.factorial(n))


def _check_digits(text: str) -> None:
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"not a non-negative decimal number: {text!r}")


def add_big_numbers(first: str, second: str) -> str:
    """Add two non-negative decimal strings digit by digit."""
    _check_digits(first)
    _check_digits(second)
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def count_digits(n: int) -> int:
    """Count decimal digits of ``n``; zero is counted as having none."""
    n = abs(n)
    return len(str(n)) if n else 0


def pyramid_blocks(levels: int) -> int:
    """Blocks in a stepped pyramid whose level ``k`` holds ``4 * k**2`` blocks."""
    return sum(4 * k * k for k in range(1, levels + 1))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def swap_without_temp(a: int, b: int) -> tuple[int, int]:
    """Swap two numbers using only addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def divisors(n: int) -> list[int]:
    """Return the positive divisors of ``n`` in ascending order."""
    return [d for d in range(1, n + 1) if n % d == 0]