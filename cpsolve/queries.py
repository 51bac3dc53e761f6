"""Range queries and ordered-set puzzles."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import accumulate
from operator import xor
from typing import Iterable, Sequence

from sortedcontainers import SortedList


def _check_range(left: int, right: int, size: int) -> None:
    if not 1 <= left <= right <= size:
        raise IndexError(f"range [{left}, {right}] outside 1..{size}")


class PrefixXor:
    """Answers XOR over 1-based inclusive ranges of fixed values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = list(accumulate(values, xor, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def query(self, left: int, right: int) -> int:
        """XOR of the values at positions ``left`` through ``right``."""
        _check_range(left, right, len(self))
        return self._prefix[right] ^ self._prefix[left - 1]


class PrefixSum:
    """Answers sums over 1-based inclusive ranges of fixed values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = list(accumulate(values, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def query(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left`` through ``right``."""
        _check_range(left, right, len(self))
        return self._prefix[right] - self._prefix[left - 1]


def concert_tickets(
    prices: Iterable[int], budgets: Iterable[int]
) -> list[int | None]:
    """For each customer, the dearest ticket within budget (None if none left)."""
    available = SortedList(prices)
    sold: list[int | None] = []
    for budget in budgets:
        slot = available.bisect_right(budget)
        if slot == 0:
            sold.append(None)
        else:
            sold.append(available.pop(slot - 1))
    return sold


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """Longest unlit stretch of a street after each light is added."""
    lights = SortedList([0, length])
    gaps = SortedList([length])
    longest: list[int] = []
    for position in positions:
        if not 0 < position < length:
            raise ValueError(f"position {position} outside 1..{length - 1}")
        slot = lights.bisect_right(position)
        after, before = lights[slot], lights[slot - 1]
        gaps.discard(after - before)
        gaps.add(after - position)
        gaps.add(position - before)
        longest.append(gaps[-1])
        lights.add(position)
    return longest


def max_customers(intervals: Sequence[tuple[int, int]]) -> int:
    """Most customers present at once, given (arrival, departure) pairs."""
    starts = sorted(start for start, _ in intervals)
    ends = sorted(end for _, end in intervals)
    total = len(intervals)
    best = 0
    for moment in (point for interval in intervals for point in interval):
        left_already = bisect_left(ends, moment)
        not_arrived = total - bisect_right(starts, moment)
        best = max(best, total - left_already - not_arrived)
    return best