import math

import pytest

from algobox import numbers

PAIRS = [(12, 18), (35, 64), (240, 46), (7, 7), (100, 1), (17, 5)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_matches_reference(a, b):
    result = numbers.gcd(a, b)
    assert result == math.gcd(a, b)
    assert a % result == 0 and b % result == 0


@pytest.mark.parametrize("a,b", PAIRS)
def test_extended_gcd_identity(a, b):
    x, y = numbers.extended_gcd(a, b)
    assert a * x + b * y == math.gcd(a, b)


@pytest.mark.parametrize("a,m", [(3, 11), (10, 17), (7, 26), (1, 2)])
def test_modular_inverse(a, m):
    inverse = numbers.modular_inverse(a, m)
    assert 0 <= inverse < m
    assert (a * inverse) % m == 1 % m


def test_modular_inverse_not_coprime():
    with pytest.raises(ValueError):
        numbers.modular_inverse(6, 9)


@pytest.mark.parametrize("a,b,c", [(3, 6, 9), (4, 10, 8), (7, 5, 1), (12, 18, 30)])
def test_diophantine_solution_satisfies_equation(a, b, c):
    x, y = numbers.solve_diophantine(a, b, c)
    assert a * x + b * y == c


def test_diophantine_without_solution():
    with pytest.raises(ValueError):
        numbers.solve_diophantine(4, 6, 5)


def test_power_mod_source_values():
    modulus = 10**9 + 7
    assert numbers.power_mod(20, 2000000, modulus) == pow(20, 2000000, modulus)


@pytest.mark.parametrize("base,exp,mod", [(2, 10, 1000), (3, 0, 7), (5, 117, 19), (7, 3, 1)])
def test_power_mod_matches_builtin(base, exp, mod):
    assert numbers.power_mod(base, exp, mod) == pow(base, exp, mod)


def test_power_mod_negative_exponent():
    with pytest.raises(ValueError):
        numbers.power_mod(2, -1, 5)


@pytest.mark.parametrize("base,exp", [(2, 0), (2, 31), (-3, 5), (10, 20)])
def test_power_matches_builtin(base, exp):
    assert numbers.power(base, exp) == base**exp


@pytest.mark.parametrize("n", [2, 12, 97, 360, 1024, 999983 * 2, 3 * 5 * 7 * 11])
def test_factorize_reconstructs(n):
    factors = numbers.factorize(n)
    assert math.prod(p**e for p, e in factors) == n
    primes = set(numbers.prime_sieve(n))
    assert all(p in primes for p, _ in factors)
    assert [p for p, _ in factors] == sorted(p for p, _ in factors)


def test_factorize_rejects_zero():
    with pytest.raises(ValueError):
        numbers.factorize(0)


def test_prime_sieve_small():
    assert numbers.prime_sieve(10) == [2, 3, 5, 7]


def test_prime_sieve_invariant():
    primes = set(numbers.prime_sieve(200))
    for k in range(2, 201):
        has_divisor = any(k % d == 0 for d in range(2, math.isqrt(k) + 1))
        assert (k in primes) == (not has_divisor)


@pytest.mark.parametrize("low,high", [(0, 50), (1, 10), (10, 30), (90, 130), (97, 97), (50, 40)])
def test_segmented_sieve_matches_full_sieve(low, high):
    expected = [p for p in numbers.prime_sieve(high) if p >= low]
    assert numbers.segmented_sieve(low, high) == expected


def test_smallest_prime_factors():
    table = numbers.smallest_prime_factors(300)
    primes = set(numbers.prime_sieve(300))
    for i in range(2, 301):
        factor = table[i]
        assert factor in primes
        assert i % factor == 0
        assert all(i % p for p in primes if p < factor)


@pytest.mark.parametrize("n", [1, 10, 100, 1000])
def test_count_divisible_by_default_primes(n):
    expected = sum(
        1 for k in range(1, n + 1) if any(k % p == 0 for p in numbers.DEFAULT_PRIMES)
    )
    assert numbers.count_divisible_by_primes(n) == expected


def test_count_divisible_by_given_primes():
    chosen = (2, 3, 7)
    expected = sum(1 for k in range(1, 501) if any(k % p == 0 for p in chosen))
    assert numbers.count_divisible_by_primes(500, chosen) == expected


@pytest.mark.parametrize("n", [0, 1, 5, 25, 100])
def test_big_factorial(n):
    assert numbers.big_factorial(n) == str(math.factorial(n))


def test_big_factorial_negative():
    with pytest.raises(ValueError):
        numbers.big_factorial(-1)


@pytest.mark.parametrize(
    "a,b",
    [("123", "456"), ("1", "99999999999999999999"), ("987654321987654321", "123456789"), ("0", "0")],
)
def test_add_big_numbers(a, b):
    assert numbers.add_big_numbers(a, b) == str(int(a) + int(b))
    assert numbers.add_big_numbers(b, a) == numbers.add_big_numbers(a, b)


def test_add_big_numbers_carry():
    assert numbers.add_big_numbers("999", "1") == "1000"


@pytest.mark.parametrize("bad", ["", "12a", "-5"])
def test_add_big_numbers_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        numbers.add_big_numbers(bad, "1")


@pytest.mark.parametrize("n", [1, 9, 10, 12345, -4321, 10**20])
def test_count_digits(n):
    assert numbers.count_digits(n) == len(str(abs(n)))


def test_count_digits_zero():
    assert numbers.count_digits(0) == 0


def test_pyramid_blocks():
    assert numbers.pyramid_blocks(1) == 4
    for levels in range(1, 10):
        difference = numbers.pyramid_blocks(levels) - numbers.pyramid_blocks(levels - 1)
        assert difference == 4 * levels**2


def test_distance_source_example():
    assert numbers.distance(3, 4, 4, 3) == pytest.approx(math.sqrt(2))


def test_distance_properties():
    assert numbers.distance(1, 2, 1, 2) == 0
    assert numbers.distance(-1, 5, 7, 2) == pytest.approx(numbers.distance(7, 2, -1, 5))


def test_swap_without_temp():
    assert numbers.swap_without_temp(10, 20) == (20, 10)
    assert numbers.swap_without_temp(-3, 8) == (8, -3)


@pytest.mark.parametrize("n", [1, 7, 12, 36, 97, 100])
def test_divisors(n):
    found = numbers.divisors(n)
    assert found[0] == 1 and found[-1] == n
    assert all(n % d == 0 for d in found)
    assert len(found) == sum(1 for d in range(1, n + 1) if n % d == 0)


def test_divisors_of_prime():
    assert numbers.divisors(7) == [1, 7]