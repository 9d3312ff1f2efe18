"""Searching in grids and sorted sequences, and pair-sum lookups."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional


def contains_2d(matrix: Iterable[Iterable[int]], target: int) -> bool:
    """Return True if ``target`` occurs anywhere in the two-dimensional ``matrix``."""
    return any(target in row for row in matrix)


def _binary_search_range(items: Sequence[int], low: int, high: int, key: int) -> Optional[int]:
    """Binary search for ``key`` within ``items[low..high]`` (both inclusive)."""
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == key:
            return mid
        if value > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search(items: Sequence[int], key: int) -> Optional[int]:
    """Return an index of ``key`` in the sorted ``items``, or None if absent."""
    return _binary_search_range(items, 0, len(items) - 1, key)


def exponential_search(items: Sequence[int], x: int) -> Optional[int]:
    """Find ``x`` in sorted ``items`` by doubling a bound, then binary searching.

    Returns an index of ``x`` or None if it is absent.
    """
    n = len(items)
    if n == 0:
        return None
    if items[0] == x:
        return 0
    bound = 1
    while bound < n and items[bound] <= x:
        bound *= 2
    return _binary_search_range(items, bound // 2, min(bound, n - 1), x)


def interpolation_search(items: Sequence[int], x: int) -> Optional[int]:
    """Find ``x`` in sorted ``items`` by probing where it should lie.

    Returns an index of ``x`` or None if it is absent.
    """
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= x <= items[high]:
        if low == high:
            return low if items[low] == x else None
        span = items[high] - items[low]
        if span == 0:
            # Every value in the window equals x.
            return low
        pos = low + int((high - low) / span * (x - items[low]))
        if items[pos] == x:
            return pos
        if items[pos] < x:
            low = pos + 1
        else:
            high = pos - 1
    return None


def fibonacci_search(items: Sequence[int], key: int) -> Optional[int]:
    """Find ``key`` in sorted ``items`` using Fibonacci-sized steps.

    Returns an index of ``key`` or None if it is absent.
    """
    n = len(items)
    fib2, fib1 = 0, 1
    fib = fib1 + fib2
    while fib < n:
        fib2, fib1 = fib1, fib
        fib = fib1 + fib2

    offset = -1
    while fib > 1:
        i = min(offset + fib2, n - 1)
        if items[i] < key:
            fib = fib1
            fib1 = fib2
            fib2 = fib - fib1
            offset = i
        elif items[i] > key:
            fib = fib2
            fib1 = fib1 - fib2
            fib2 = fib - fib1
        else:
            return i

    if fib1 and offset + 1 < n and items[offset + 1] == key:
        return offset + 1
    return None


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return indices ``(i, j)`` with ``nums[i] + nums[j] == target`` and ``j < i``.

    The later index comes first. Returns None if no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return index, partner
        seen[value] = index
    return None


def has_pair_with_sum(items: Sequence[int], k: int) -> bool:
    """Return True if some value in sorted ``items`` has its complement ``k - value`` present.

    A value may pair with itself.
    """
    return any(binary_search(items, k - value) is not None for value in items)