import itertools
import math

import pytest

from algobox.arrays import (
    closest_elements,
    count_up,
    four_sum,
    fractional_knapsack,
    maximum,
    missing_elements,
    next_permutation,
    permutations,
    swap_arrays,
)


def test_four_sum_known_example():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]


def test_four_sum_matches_exhaustive_search():
    nums = [3, -1, 4, 1, -5, 9, 2, -6, 5, 3, 5, 0]
    target = 7
    result = four_sum(nums, target)
    expected = {
        tuple(sorted(combo))
        for combo in itertools.combinations(nums, 4)
        if sum(combo) == target
    }
    assert {tuple(q) for q in result} == expected
    assert len(result) == len(expected)
    assert all(q == sorted(q) for q in result)


def test_four_sum_duplicates_collapse():
    assert four_sum([2, 2, 2, 2, 2], 8) == [[2, 2, 2, 2]]


def test_four_sum_too_short():
    assert four_sum([1, 2, 3], 6) == []


def test_four_sum_does_not_mutate_input():
    nums = [4, 3, 2, 1]
    four_sum(nums, 10)
    assert nums == [4, 3, 2, 1]


def test_next_permutation_walks_lexicographic_order():
    current = [1, 2, 3, 4]
    seen = [tuple(current)]
    for _ in range(math.factorial(4) - 1):
        current = next_permutation(current)
        seen.append(tuple(current))
    assert seen == sorted(itertools.permutations([1, 2, 3, 4]))


def test_next_permutation_wraps_around():
    assert next_permutation([5, 4, 2, 1]) == sorted([5, 4, 2, 1])


def test_permutations_cover_all_arrangements():
    values = [1, 2, 3, 4]
    result = list(permutations(values))
    assert len(result) == math.factorial(len(values))
    assert set(result) == set(itertools.permutations(values))
    assert result[0] == tuple(values)


def test_permutations_of_empty():
    assert list(permutations([])) == []


def test_fractional_knapsack_classic():
    items = [(10, 60), (20, 100), (30, 120)]
    assert fractional_knapsack(items, 50) == pytest.approx(240.0)


def test_fractional_knapsack_everything_fits():
    items = [(1, 5), (2, 7), (3, 11)]
    assert fractional_knapsack(items, 100) == pytest.approx(5 + 7 + 11)


def test_fractional_knapsack_zero_capacity():
    assert fractional_knapsack([(4, 9)], 0) == 0.0


def test_fractional_knapsack_rejects_bad_weight():
    with pytest.raises(ValueError):
        fractional_knapsack([(0, 9)], 5)


def test_closest_elements_source_example():
    assert closest_elements([1, 2, 3, 4, 5], 4, 3) == [1, 2, 3, 4]


def test_closest_elements_too_many():
    with pytest.raises(ValueError):
        closest_elements([1, 2], 3, 1)


def test_missing_elements_documented_example():
    assert missing_elements([6, 7, 9, 10, 13, 14]) == [8, 11, 12]


def test_missing_elements_source_array():
    assert missing_elements([3, 4, 5, 6, 7, 9, 10, 13, 14, 15]) == [8, 11, 12]


def test_missing_elements_none():
    assert missing_elements([4, 5, 6]) == []


def test_maximum_source_values():
    assert maximum([214, 2134, 3456, 54]) == 3456


def test_maximum_empty():
    with pytest.raises(ValueError):
        maximum([])


def test_swap_arrays():
    first = [1, 2, 3, 4, 5, 6]
    second = [99, 88, 77, 66, 55, 44]
    assert swap_arrays(first, second) == (second, first)


def test_swap_arrays_unequal():
    with pytest.raises(ValueError):
        swap_arrays([1], [1, 2])


def test_count_up_to_default_stop():
    counted = list(count_up(95))
    assert counted[0] == 95
    assert counted[-1] == 100
    assert len(counted) == 6


def test_count_up_past_stop_is_empty():
    assert list(count_up(101)) == []