"""Classic sorting algorithms returning new sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import chain


def _bitonic_merge(values: list[int], low: int, count: int, ascending: bool) -> None:
    if count > 1:
        half = count // 2
        for i in range(low, low + half):
            if ascending == (values[i] > values[i + half]):
                values[i], values[i + half] = values[i + half], values[i]
        _bitonic_merge(values, low, half, ascending)
        _bitonic_merge(values, low + half, half, ascending)


def _bitonic(values: list[int], low: int, count: int, ascending: bool) -> None:
    if count > 1:
        half = count // 2
        _bitonic(values, low, half, True)
        _bitonic(values, low + half, half, False)
        _bitonic_merge(values, low, count, ascending)


def bitonic_sort(items: Iterable[int], ascending: bool = True) -> list[int]:
    """Sort with a bitonic network; the length must be a power of two.

    Raises ValueError for any other non-zero length.
    """
    values = list(items)
    n = len(values)
    if n and n & (n - 1):
        raise ValueError(f"bitonic sort needs a power-of-two length, got {n}")
    _bitonic(values, 0, n, ascending)
    return values


def _sift_down(heap: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[int]) -> list[int]:
    """Sort ascending by building a max-heap and extracting its root repeatedly."""
    values = list(items)
    n = len(values)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(values, n, root)
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)
    return values


def pigeonhole_sort(items: Iterable[int]) -> list[int]:
    """Sort integers by dropping each into a hole for its value."""
    values = list(items)
    if not values:
        return []
    low, high = min(values), max(values)
    holes: list[list[int]] = [[] for _ in range(high - low + 1)]
    for value in values:
        holes[value - low].append(value)
    return list(chain.from_iterable(holes))


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first.

    Raises ValueError if any value is negative.
    """
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("radix sort handles non-negative integers only")
    largest = max(values)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[(value // exp) % 10].append(value)
        values = list(chain.from_iterable(buckets))
        exp *= 10
    return values


def bubble_sort_passes(items: Iterable[int]) -> Iterator[list[int]]:
    """Bubble sort, yielding a snapshot of the list after each of the n-1 passes."""
    values = list(items)
    n = len(values)
    for done in range(1, n):
        for i in range(n - done):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
        yield list(values)


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort ascending with bubble sort."""
    values = list(items)
    for snapshot in bubble_sort_passes(values):
        values = snapshot
    return values


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort ascending by inserting each element into the sorted prefix."""
    values = list(items)
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current
    return values


def sorted_merge(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Concatenate two unsorted sequences and return the result sorted."""
    return sorted([*a, *b])


def wave_sort(items: Iterable[int]) -> list[int]:
    """Arrange values so that v[0] >= v[1] <= v[2] >= v[3] ..."""
    values = sorted(items)
    for i in range(0, len(values) - 1, 2):
        values[i], values[i + 1] = values[i + 1], values[i]
    return values


def _check_012(values: list[int]) -> None:
    for value in values:
        if value not in (0, 1, 2):
            raise ValueError(f"expected only 0, 1 or 2, got {value!r}")


def sort_012(items: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag).

    Raises ValueError for any other value.
    """
    values = list(items)
    _check_012(values)
    low, mid, high = 0, 0, len(values) - 1
    while mid <= high:
        value = values[mid]
        if value == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1
    return values


def count_sort_012(items: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s by counting each value.

    Raises ValueError for any other value.
    """
    values = list(items)
    _check_012(values)
    zeros = values.count(0)
    ones = values.count(1)
    twos = len(values) - zeros - ones
    return [0] * zeros + [1] * ones + [2] * twos