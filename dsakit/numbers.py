"""Number utilities: Fibonacci terms, factorials, gcd, knapsack, bits and areas."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_PI_APPROX = 3.14
_PARITY_NAMES = ("even", "odd")


def _check_term(n: int) -> None:
    if n < 1:
        raise ValueError(f"Fibonacci terms are numbered from 1, got {n}")


def fib_recursive(n: int) -> int:
    """The n-th Fibonacci term (1-based: 0, 1, 1, 2, ...) by plain recursion."""
    _check_term(n)
    if n == 1:
        return 0
    if n == 2:
        return 1
    return fib_recursive(n - 1) + fib_recursive(n - 2)


@lru_cache(maxsize=None)
def _fib_cached(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return _fib_cached(n - 1) + _fib_cached(n - 2)


def fib_memo(n: int) -> int:
    """The n-th Fibonacci term (1-based) by recursion with remembered results."""
    _check_term(n)
    # Fill the cache bottom-up so deep terms do not exhaust the recursion limit.
    for term in range(1, n):
        _fib_cached(term)
    return _fib_cached(n)


def fib_iterative(n: int) -> int:
    """The n-th Fibonacci term (1-based) by building the series term by term."""
    _check_term(n)
    previous, current = 0, 1
    if n == 1:
        return previous
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """The product 1 * 2 * ... * n; 1 for 0. Raises ValueError for negative ``n``."""
    if n < 0:
        raise ValueError(f"factorial is not defined for negative numbers, got {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value of items, each taken at most once, within ``capacity`` weight.

    Raises ValueError if ``weights`` and ``values`` differ in length.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    @lru_cache(maxsize=None)
    def best(room: int, count: int) -> int:
        if count == 0 or room <= 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        skip = best(room, count - 1)
        if weight > room:
            return skip
        return max(value + best(room - weight, count - 1), skip)

    return best(capacity, len(weights))


def _check_bit(k: int) -> None:
    if k < 1:
        raise ValueError(f"bits are numbered from 1, got {k}")


def kth_bit(n: int, k: int) -> int:
    """The k-th least significant bit of ``n`` (k = 1 is the lowest), by shifting."""
    _check_bit(k)
    return (n >> (k - 1)) & 1


def kth_bit_by_scan(n: int, k: int) -> int:
    """The k-th least significant bit of ``n``, found by stepping through the bits."""
    _check_bit(k)
    for _ in range(k - 1):
        if n == 0:
            return 0
        n >>= 1
    return n & 1


def rectangle_area(length: int, breadth: int) -> int:
    """Area of a rectangle."""
    return length * breadth


def circle_area(radius: float) -> float:
    """The round-shape area formula 4 * 3.14 * r * r."""
    return 4 * _PI_APPROX * (radius * radius)


def triangle_area(base: float, height: float) -> float:
    """Area of a triangle: half of base times height."""
    return (base * height) / 2


def parity(n: int) -> str:
    """'even' if ``n`` is divisible by 2, otherwise 'odd'."""
    remainder = n % 2
    return _PARITY_NAMES[remainder]