"""Puzzles over sequences of integers."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from itertools import accumulate
from typing import Iterable, Sequence


def collecting_rounds(values: Sequence[int]) -> int:
    """Rounds needed to collect 1..n in order, reading ``values`` left to right.

    ``values`` must be a permutation of 1..n.
    """
    if sorted(values) != list(range(1, len(values) + 1)):
        raise ValueError("values must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(values)}
    return 1 + sum(
        position[value] < position[value - 1]
        for value in range(2, len(values) + 1)
    )


def distinct_count(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))


def increasing_array_moves(values: Iterable[int]) -> int:
    """Total increments needed to make ``values`` non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def longest_unique_playlist(songs: Iterable[int]) -> int:
    """Length of the longest run of consecutive songs with no repeats."""
    last_seen: dict[int, int] = {}
    best = 0
    length = 0
    for index, song in enumerate(songs):
        previous = last_seen.get(song)
        if previous is None:
            length += 1
        else:
            length = min(length + 1, index - previous)
        last_seen[song] = index
        best = max(best, length)
    return best


def tower_count(cubes: Iterable[int]) -> int:
    """Fewest towers when each cube goes on a strictly larger top, in order."""
    tops: list[int] = []
    for cube in cubes:
        slot = bisect_right(tops, cube)
        if slot == len(tops):
            tops.append(cube)
        else:
            tops[slot] = cube
    return len(tops)


def stick_cost(lengths: Sequence[int]) -> int:
    """Minimum total change to make every stick the same length."""
    if not lengths:
        raise ValueError("lengths must not be empty")
    ordered = sorted(lengths)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        target = ordered[middle]
    else:
        target = (ordered[middle] + ordered[middle - 1]) // 2
    return sum(abs(target - length) for length in ordered)


def count_subarrays_with_sum(values: Sequence[int], target: int) -> int:
    """Number of contiguous subarrays of positive ``values`` summing to ``target``."""
    prefix = list(accumulate(values, initial=0))
    last_index = {total: index for index, total in enumerate(prefix) if index}
    count = 0
    for index, total in enumerate(prefix[1:], start=1):
        if total < target:
            continue
        if total == target:
            count += 1
        elif 0 < last_index.get(total - target, 0) < index:
            count += 1
    return count


def two_sum_positions(
    values: Sequence[int], target: int
) -> tuple[int, int] | None:
    """1-based positions of two values summing to ``target``, or None."""
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(values, start=1):
        positions[value].append(index)
    for index, value in enumerate(values, start=1):
        wanted = target - value
        if wanted == value:
            others = [p for p in positions[value] if p != index]
            if others:
                return index, others[0]
        elif positions.get(wanted):
            return index, positions[wanted][0]
    return None


def smallest_missing_sum(coins: Sequence[int]) -> int:
    """Smallest sum that no subset of ``coins`` adds up to."""
    if not coins:
        raise ValueError("coins must not be empty")
    ordered = sorted(coins)
    if ordered[0] != 1:
        return 1
    reachable = 1
    for coin in ordered[1:]:
        if coin > reachable + 1:
            break
        reachable += coin
    return reachable + 1


def gondola_count(weights: Sequence[int], limit: int) -> int:
    """Fewest gondolas holding at most two children of total weight ``limit``."""
    ordered = sorted(weights)
    light, heavy = 0, len(ordered) - 1
    gondolas = 0
    while light <= heavy:
        gondolas += 1
        if ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
    return gondolas