import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.strings import (
    CharCase,
    classify_case,
    infix_to_postfix,
    lcs_length,
    letter_square,
    most_frequent_letter,
    rabin_karp,
    reverse_with_stack,
)


def test_rabin_karp_driver_example():
    assert rabin_karp("GEEK", "GEEKS FOR GEEKS") == [0, 10]


def test_rabin_karp_small_prime_same_result():
    text = "GEEKS FOR GEEKS"
    assert rabin_karp("GEEK", text, 13) == rabin_karp("GEEK", text)


@given(st.text(alphabet="ab", min_size=1, max_size=4), st.text(alphabet="ab", max_size=40))
def test_rabin_karp_matches_are_real(pattern, text):
    found = rabin_karp(pattern, text, 7)
    assert all(text[i : i + len(pattern)] == pattern for i in found)
    assert found == sorted(set(found))
    if pattern in text:
        assert found[0] == text.index(pattern)
    else:
        assert found == []


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp("abcdef", "abc") == []


def test_rabin_karp_errors():
    with pytest.raises(ValueError):
        rabin_karp("", "abc")
    with pytest.raises(ValueError):
        rabin_karp("a", "abc", 0)


def test_lcs_driver_example():
    assert lcs_length("AGGTAB", "GXTXAYB") == 4


@given(st.text(alphabet="abc", max_size=15), st.text(alphabet="abc", max_size=15))
def test_lcs_invariants(x, y):
    result = lcs_length(x, y)
    assert result == lcs_length(y, x)
    assert result <= min(len(x), len(y))
    assert lcs_length(x, x) == len(x)
    assert lcs_length(x, "") == 0


def test_most_frequent_letter():
    assert most_frequent_letter("banana") == "a"
    assert most_frequent_letter("zzzy") == "z"


def test_most_frequent_letter_tie_goes_to_earliest():
    assert most_frequent_letter("ba") == "a"
    assert most_frequent_letter("") == "a"


def test_most_frequent_letter_rejects_other_characters():
    with pytest.raises(ValueError):
        most_frequent_letter("Abc")


def test_reverse_with_stack_example():
    assert reverse_with_stack("GeeksQuiz") == "GeeksQuiz"[::-1]


@given(st.text(max_size=50))
def test_reverse_with_stack_round_trip(s):
    assert reverse_with_stack(reverse_with_stack(s)) == s
    assert len(reverse_with_stack(s)) == len(s)


def test_infix_to_postfix_driver_example():
    assert infix_to_postfix("A*B+C-D") == "AB*C+D-"


@given(st.text(alphabet="ABCD+-*/", max_size=30))
def test_infix_to_postfix_keeps_characters(expr):
    result = infix_to_postfix(expr)
    assert sorted(result) == sorted(expr)
    operands = [c for c in expr if c not in "+-*/"]
    assert [c for c in result if c not in "+-*/"] == operands


def test_infix_without_operators_is_unchanged():
    assert infix_to_postfix("ABC") == "ABC"


@pytest.mark.parametrize(
    ("ch", "expected"),
    [
        ("a", CharCase.LOWER),
        ("z", CharCase.LOWER),
        ("A", CharCase.UPPER),
        ("Z", CharCase.UPPER),
        ("5", CharCase.OTHER),
        ("[", CharCase.OTHER),
    ],
)
def test_classify_case(ch, expected):
    assert classify_case(ch) is expected


@pytest.mark.parametrize("bad", ["", "ab"])
def test_classify_case_needs_one_character(bad):
    with pytest.raises(ValueError):
        classify_case(bad)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_letter_square_shape(n):
    square = letter_square(n)
    assert len(square) == n
    assert all(len(row) == n for row in square)
    assert square[0][0] == "A"
    for upper, lower in zip(square, square[1:]):
        assert upper[1:] == lower[:-1]


def test_letter_square_empty():
    assert letter_square(0) == []