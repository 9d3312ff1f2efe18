"""String algorithms: pattern search, LCS, letter counts and expression conversion."""

from __future__ import annotations

import string
from collections import Counter
from enum import Enum

_ALPHABET_SIZE = 256
_DEFAULT_PRIME = 2147483647

_PRECEDENCE = {"*": 2, "/": 2, "+": 1, "-": 1}


class CharCase(Enum):
    """Case of a single character."""

    LOWER = "lowercase"
    UPPER = "uppercase"
    OTHER = "not a letter"


def rabin_karp(pattern: str, text: str, prime: int = _DEFAULT_PRIME) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, using rolling hashes.

    Raises ValueError for an empty pattern or a non-positive modulus.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    if prime <= 0:
        raise ValueError("prime must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []
    high = pow(_ALPHABET_SIZE, m - 1, prime)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (_ALPHABET_SIZE * pattern_hash + ord(p_char)) % prime
        window_hash = (_ALPHABET_SIZE * window_hash + ord(t_char)) % prime

    matches: list[int] = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (
                _ALPHABET_SIZE * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % prime
    return matches


def lcs_length(x: str, y: str) -> int:
    """Length of the longest common subsequence of ``x`` and ``y``."""
    previous = [0] * (len(y) + 1)
    for x_char in x:
        current = [0]
        for j, y_char in enumerate(y, start=1):
            if x_char == y_char:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def most_frequent_letter(s: str) -> str:
    """Most frequent lowercase letter in ``s``; ties go to the earliest letter.

    Returns 'a' for an empty string. Raises ValueError on other characters.
    """
    counts = Counter(s)
    stray = set(counts) - set(string.ascii_lowercase)
    if stray:
        raise ValueError(f"only lowercase letters are allowed, got {sorted(stray)!r}")
    return max(string.ascii_lowercase, key=lambda letter: counts[letter])


def reverse_with_stack(s: str) -> str:
    """Reverse ``s`` by pushing every character onto a stack and popping them off."""
    stack = list(s)
    return "".join(stack.pop() for _ in range(len(stack)))


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression over + - * / to postfix.

    Every character that is not one of those operators is copied as an operand.
    """
    output: list[str] = []
    operators: list[str] = []
    for ch in infix:
        precedence = _PRECEDENCE.get(ch)
        if precedence is None:
            output.append(ch)
            continue
        while operators and precedence <= _PRECEDENCE[operators[-1]]:
            output.append(operators.pop())
        operators.append(ch)
    output.extend(reversed(operators))
    return "".join(output)


def classify_case(ch: str) -> CharCase:
    """Say whether the single ASCII character ``ch`` is lower case, upper case or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if "a" <= ch <= "z":
        return CharCase.LOWER
    if "A" <= ch <= "Z":
        return CharCase.UPPER
    return CharCase.OTHER


def letter_square(n: int) -> list[str]:
    """Rows of an n-by-n square where each cell is 'A' shifted by row + column."""
    return [
        "".join(chr(ord("A") + row + col) for col in range(n)) for row in range(n)
    ]