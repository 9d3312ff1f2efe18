"""Array problems: sums, intervals, permutations, voting and related puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional


def repeating_and_missing(values: Sequence[int]) -> tuple[int, int]:
    """For n values drawn from 1..n with one repeated and one missing, return both.

    The result is ``(repeating, missing)``. Raises ValueError if the values
    show no repeated or missing number.
    """
    n = len(values)
    sum_gap = n * (n + 1) // 2 - sum(values)
    square_gap = n * (n + 1) * (2 * n + 1) // 6 - sum(v * v for v in values)
    if sum_gap == 0:
        raise ValueError("no repeated and missing pair can be told from these values")
    missing = (sum_gap + square_gap // sum_gap) // 2
    repeating = missing - sum_gap
    return repeating, missing


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    present = set(nums)
    longest = 0
    for num in present:
        if num - 1 in present:
            continue
        end = num
        while end + 1 in present:
            end += 1
        longest = max(longest, end - num + 1)
    return longest


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by trying every run.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("no subarray of an empty sequence")
    best = values[0]
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running += value
            best = max(best, running)
    return best


def kadane(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run, in one pass.

    Raises ValueError for an empty sequence.
    """
    best: Optional[int] = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("no subarray of an empty sequence")
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Merge overlapping ``(start, end)`` intervals into sorted disjoint ones."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted((pair[0], pair[1]) for pair in intervals):
        if not merged or merged[-1][1] < start:
            merged.append((start, end))
        else:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
    return merged


def next_permutation(values: Iterable[int]) -> list[int]:
    """The next arrangement in lexicographic order; the last one wraps to the first."""
    items = list(values)
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i < 0:
        items.reverse()
        return items
    j = len(items) - 1
    while items[j] <= items[i]:
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1 :] = reversed(items[i + 1 :])
    return items


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for i in range(rows):
        if i == 0:
            triangle.append([1])
            continue
        above = triangle[-1]
        triangle.append([1, *(a + b for a, b in zip(above, above[1:])), 1])
    return triangle


def permutations(values: Iterable[int]) -> list[list[int]]:
    """Every ordering of ``values``, produced by swapping each element into place."""
    items = list(values)
    result: list[list[int]] = []

    def place(index: int) -> None:
        if index == len(items):
            result.append(list(items))
            return
        for i in range(index, len(items)):
            items[i], items[index] = items[index], items[i]
            place(index + 1)
            items[i], items[index] = items[index], items[i]

    place(0)
    return result


def subarray_with_sum(values: Sequence[int], total: int) -> Optional[tuple[int, int]]:
    """First ``(start, end)`` indices, inclusive, of a run summing to ``total``, or None."""
    for start, first in enumerate(values):
        running = first
        if running == total:
            return start, start
        for end in range(start + 1, len(values)):
            running += values[end]
            if running == total:
                return start, end
    return None


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    if not heights:
        return 0
    left_max: list[int] = []
    tallest = heights[0]
    for height in heights:
        tallest = max(tallest, height)
        left_max.append(tallest)
    right_max: list[int] = []
    tallest = heights[-1]
    for height in reversed(heights):
        tallest = max(tallest, height)
        right_max.append(tallest)
    right_max.reverse()
    return sum(
        max(0, min(left, right) - height)
        for left, right, height in zip(left_max, right_max, heights)
    )


def max_profit(prices: Iterable[int]) -> int:
    """Best gain from one buy followed by one sell, in one pass.

    Raises ValueError for an empty sequence.
    """
    best: Optional[int] = None
    lowest: Optional[int] = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        gain = price - lowest
        best = gain if best is None else max(best, gain)
    if best is None:
        raise ValueError("no prices given")
    return best


def max_profit_brute(prices: Sequence[int]) -> int:
    """Best gain from one buy followed by one sell, trying every pair; 0 if none."""
    best = 0
    for i, buy in enumerate(prices):
        for sell in prices[i + 1 :]:
            best = max(best, sell - buy)
    return best


def majority_element(nums: Iterable[int]) -> int:
    """The element occurring more than half the time, found by Moore's voting.

    The result is only meaningful when such an element exists. Raises
    ValueError for an empty sequence.
    """
    iterator = iter(nums)
    try:
        candidate = next(iterator)
    except StopIteration:
        raise ValueError("no majority element in an empty sequence") from None
    votes = 1
    for value in iterator:
        votes += 1 if value == candidate else -1
        if votes == 0:
            candidate = value
            votes = 1
    return candidate


def min_swaps(values: Sequence[int], k: int) -> int:
    """Fewest swaps that bring every value not above ``k`` together."""
    window = sum(1 for value in values if value <= k)
    bad = sum(1 for value in values[:window] if value > k)
    fewest = bad
    for leaving, entering in zip(values, values[window:]):
        bad += (entering > k) - (leaving > k)
        fewest = min(fewest, bad)
    return fewest


def find_duplicate(values: Sequence[int]) -> int:
    """The repeated value among n + 1 values holding each of 1..n once and one twice.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("no duplicate in an empty sequence")
    n = len(values) - 1
    return sum(values) - n * (n + 1) // 2


def top_three(values: Sequence[int]) -> tuple[int, int, int]:
    """The three largest values, smallest of them first.

    Raises ValueError if there are fewer than three values.
    """
    if len(values) < 3:
        raise ValueError("need at least three values")
    a, b, c = sorted(values[:3])
    for value in values[3:]:
        if value > a:
            a = value
            if a > b:
                a, b = b, a
            if b > c:
                b, c = c, b
    return a, b, c