"""Puzzles over strings of characters."""

from __future__ import annotations

import string
from collections import Counter
from itertools import groupby


def _next_permutation(chars: list[str]) -> bool:
    """Advance ``chars`` to its next lexicographic order; False at the last."""
    i = len(chars) - 2
    while i >= 0 and chars[i] >= chars[i + 1]:
        i -= 1
    if i < 0:
        return False
    j = len(chars) - 1
    while chars[j] <= chars[i]:
        j -= 1
    chars[i], chars[j] = chars[j], chars[i]
    chars[i + 1 :] = reversed(chars[i + 1 :])
    return True


def string_permutations(s: str) -> list[str]:
    """All distinct orderings of ``s`` in lexicographic order."""
    chars = sorted(s)
    result = ["".join(chars)]
    while _next_permutation(chars):
        result.append("".join(chars))
    return result


def palindrome_reorder(s: str) -> str | None:
    """A palindrome made of the letters of ``s`` (A-Z), or None if none exists."""
    invalid = set(s) - set(string.ascii_uppercase)
    if invalid:
        raise ValueError(f"only letters A-Z are allowed, got {sorted(invalid)}")
    counts = Counter(s)
    half: list[str] = []
    middle = ""
    odd = 0
    for letter in string.ascii_uppercase:
        count = counts[letter]
        if count % 2:
            odd += 1
            middle = letter * count
        else:
            half.append(letter * (count // 2))
    if odd > 1:
        return None
    left = "".join(half)
    return left + middle + left[::-1]


def longest_repetition(s: str) -> int:
    """Length of the longest run of one repeated character in ``s``."""
    if not s:
        raise ValueError("string must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(s))