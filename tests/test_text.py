from collections import Counter
from math import factorial, prod

import pytest

from cpsolve.text import longest_repetition, palindrome_reorder, string_permutations


@pytest.mark.parametrize("s", ["A", "ABC", "AABAC", "ZZZ", "BCAAD"])
def test_string_permutations_sorted_unique_complete(s):
    perms = string_permutations(s)
    assert perms == sorted(set(perms))
    assert all(Counter(p) == Counter(s) for p in perms)
    counts = Counter(s).values()
    assert len(perms) == factorial(len(s)) // prod(factorial(c) for c in counts)


def test_string_permutations_starts_sorted():
    perms = string_permutations("DCBA")
    assert perms[0] == "ABCD"
    assert perms[-1] == "DCBA"


@pytest.mark.parametrize("s", ["AB", "ABCD", "AAABBB"])
def test_palindrome_reorder_impossible(s):
    assert palindrome_reorder(s) is None


def test_palindrome_reorder_rejects_lowercase():
    with pytest.raises(ValueError):
        palindrome_reorder("abba")


def test_longest_repetition_sample():
    assert longest_repetition("ATTCGGGA") == 3


@pytest.mark.parametrize("letter", ["A", "C", "G", "T"])
@pytest.mark.parametrize("k", [1, 4, 9])
def test_longest_repetition_single_run(letter, k):
    assert longest_repetition(letter * k) == k


def test_longest_repetition_picks_maximum_run():
    s = "A" * 3 + "C" * 7 + "A" * 5 + "G" * 2
    assert longest_repetition(s) == 7
    assert longest_repetition(s) == longest_repetition(s[::-1])


def test_longest_repetition_rejects_empty():
    with pytest.raises(ValueError):
        longest_repetition("")