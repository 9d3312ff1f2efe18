import itertools
import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.arrays import (
    find_duplicate,
    kadane,
    longest_consecutive,
    majority_element,
    max_profit,
    max_profit_brute,
    max_subarray_sum_brute,
    merge_intervals,
    min_swaps,
    next_permutation,
    pascal_triangle,
    permutations,
    repeating_and_missing,
    subarray_with_sum,
    top_three,
    trapped_water,
)

small_ints = st.lists(st.integers(-50, 50), min_size=1, max_size=12)


@given(st.integers(2, 30), st.data())
def test_repeating_and_missing_recovers_pair(n, data):
    missing = data.draw(st.integers(1, n))
    repeating = data.draw(st.integers(1, n).filter(lambda v: v != missing))
    values = [v for v in range(1, n + 1) if v != missing] + [repeating]
    random.Random(n).shuffle(values)
    assert repeating_and_missing(values) == (repeating, missing)


def test_repeating_and_missing_rejects_full_permutation():
    with pytest.raises(ValueError):
        repeating_and_missing([3, 1, 2])


def test_longest_consecutive_driver_example():
    assert longest_consecutive([100, 200, 1, 2, 3, 4]) == 4


@given(st.integers(1, 20), st.integers(-100, 100))
def test_longest_consecutive_finds_built_run(length, start):
    values = list(range(start, start + length)) + [start - 1000, start + 1000]
    random.Random(length).shuffle(values)
    assert longest_consecutive(values) == length


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


@given(small_ints)
def test_kadane_matches_brute(values):
    assert kadane(values) == max_subarray_sum_brute(values)


@given(st.lists(st.integers(-50, -1), min_size=1, max_size=10))
def test_kadane_all_negative_is_largest_element(values):
    assert kadane(values) == max(values)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        kadane([])
    with pytest.raises(ValueError):
        max_subarray_sum_brute([])


def test_merge_intervals_driver_example():
    intervals = [[1, 3], [2, 4], [2, 6], [8, 9], [8, 10], [9, 11], [15, 18], [16, 17]]
    assert merge_intervals(intervals) == [(1, 6), (8, 11), (15, 18)]


@given(st.lists(st.tuples(st.integers(0, 50), st.integers(0, 10)), max_size=15))
def test_merge_intervals_invariants(raw):
    intervals = [(s, s + w) for s, w in raw]
    merged = merge_intervals(intervals)
    for (_, end), (start, _) in zip(merged, merged[1:]):
        assert end < start
    for s, e in intervals:
        assert any(ms <= s and e <= me for ms, me in merged)


def test_next_permutation_wraps_driver_example():
    assert next_permutation([3, 2, 1]) == [1, 2, 3]


def test_next_permutation_follows_lexicographic_order():
    ordered = [list(p) for p in itertools.permutations([1, 2, 3, 4])]
    for current, following in zip(ordered, ordered[1:]):
        assert next_permutation(current) == following
    assert next_permutation(ordered[-1]) == ordered[0]


@given(st.integers(0, 12))
def test_pascal_triangle_rows_are_binomials(rows):
    triangle = pascal_triangle(rows)
    assert len(triangle) == rows
    for i, row in enumerate(triangle):
        assert row == [math.comb(i, j) for j in range(i + 1)]
        assert sum(row) == 2**i


@given(st.lists(st.integers(0, 9), max_size=5, unique=True))
def test_permutations_cover_all_orderings(values):
    result = permutations(values)
    assert len(result) == math.factorial(len(values))
    assert sorted(map(tuple, result)) == sorted(itertools.permutations(values))
    assert result[0] == values


def test_subarray_with_sum_driver_example():
    values = [15, 2, 4, 8, 9, 5, 10, 23]
    start, end = subarray_with_sum(values, 23)
    assert sum(values[start : end + 1]) == 23


def test_subarray_with_sum_single_element():
    assert subarray_with_sum([7], 7) == (0, 0)


def test_subarray_with_sum_absent():
    assert subarray_with_sum([1, 2, 3], 100) is None


@given(st.lists(st.integers(0, 20), max_size=15))
def test_trapped_water_symmetric(heights):
    water = trapped_water(heights)
    assert water >= 0
    assert water == trapped_water(list(reversed(heights)))


@given(st.lists(st.integers(0, 20), max_size=15))
def test_trapped_water_monotone_holds_nothing(heights):
    assert trapped_water(sorted(heights)) == 0


def test_trapped_water_single_basin():
    assert trapped_water([2, 0, 2]) == 2


@given(small_ints)
def test_max_profit_matches_brute(prices):
    assert max_profit(prices) == max_profit_brute(prices)


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


@given(st.integers(-10, 10), st.lists(st.integers(-10, 10), max_size=8))
def test_majority_element_found(majority, others):
    values = others + [majority] * (len(others) + 1)
    random.Random(len(values)).shuffle(values)
    assert majority_element(values) == majority


def test_majority_element_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


def test_min_swaps_driver_example():
    assert min_swaps([2, 4, 5, 7, 1], 6) == 1


@given(st.lists(st.integers(0, 20), max_size=12), st.integers(0, 20))
def test_min_swaps_zero_when_grouped(values, k):
    grouped = [v for v in values if v <= k] + [v for v in values if v > k]
    assert min_swaps(grouped, k) == 0
    assert 0 <= min_swaps(values, k) <= sum(1 for v in values if v <= k)


@given(st.integers(1, 30), st.data())
def test_find_duplicate(n, data):
    duplicate = data.draw(st.integers(1, n))
    values = list(range(1, n + 1)) + [duplicate]
    random.Random(n).shuffle(values)
    assert find_duplicate(values) == duplicate


def test_find_duplicate_empty_raises():
    with pytest.raises(ValueError):
        find_duplicate([])


@given(st.lists(st.integers(-100, 100), min_size=3, max_size=15))
def test_top_three_are_largest(values):
    assert top_three(values) == tuple(sorted(values)[-3:])


def test_top_three_too_short():
    with pytest.raises(ValueError):
        top_three([1, 2])