"""Number-theoretic and constructive puzzles over integers."""

from __future__ import annotations

from collections import deque

MOD = 10**9 + 7


def bit_strings(n: int) -> int:
    """Number of bit strings of length ``n``, modulo ``MOD``."""
    if n <= 0:
        return 1
    return pow(2, n, MOD)


def coin_piles(a: int, b: int) -> bool:
    """Whether both piles can be emptied by taking 1 and 2 coins per move."""
    high, low = max(a, b), min(a, b)
    if high > 2 * low:
        return False
    return (a + b) % 3 == 0


def count_divisors(n: int) -> int:
    """Number of positive divisors of ``n``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    total = 1
    rest = n
    factor = 2
    while factor * factor <= rest:
        exponent = 0
        while rest % factor == 0:
            rest //= factor
            exponent += 1
        total *= exponent + 1
        if rest == 1:
            break
        factor += 1
    if rest > 1:
        total *= 2
    return total


def power_mod(base: int, exponent: int) -> int:
    """``base ** exponent`` modulo ``MOD``."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return pow(base, exponent, MOD)


def digit_at(position: int) -> int:
    """Digit at 1-based ``position`` of the string 123456789101112..."""
    if position < 1:
        raise ValueError(f"position must be positive, got {position}")
    remaining = position
    width = 1
    count = 9
    start = 1
    while remaining > width * count:
        remaining -= width * count
        width += 1
        count *= 10
        start *= 10
    number = start + (remaining - 1) // width
    return int(str(number)[(remaining - 1) % width])


def spiral_value(row: int, col: int) -> int:
    """Value in the number spiral at 1-based ``row`` and ``col``."""
    if row < 1 or col < 1:
        raise ValueError("row and col must be positive")
    layer = max(row, col)
    if layer == row:
        if layer % 2 == 0:
            return layer * layer - col + 1
        return (layer - 1) ** 2 + col
    if layer % 2:
        return layer * layer - row + 1
    return (layer - 1) ** 2 + row


def collatz(n: int) -> list[int]:
    """The sequence from ``n`` down to 1 under the 3n+1 rule."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    sequence = [n]
    while n != 1:
        n = n * 3 + 1 if n % 2 else n // 2
        sequence.append(n)
    return sequence


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or None if impossible."""
    half = (n + 1) // 2 if n % 2 else n // 2
    if half % 2:
        return None
    sets: tuple[list[int], list[int]] = ([], [])
    current = 1
    if n % 2 == 0:
        sets[0].append(1)
        first = 2
    else:
        first = 1
    for value in range(first, n + 1, 2):
        if value == n:
            sets[current].append(value)
            break
        sets[current].extend((value, value + 1))
        current ^= 1
    return sets


def beautiful_permutation(n: int) -> list[int] | None:
    """Permutation of 1..n with no adjacent consecutive values, or None."""
    if n <= 3:
        return [1] if n == 1 else None
    return [*range(2, n + 1, 2), *range(1, n + 1, 2)]


def missing_number(n: int, numbers: list[int]) -> int:
    """The smallest value in 1..n absent from ``numbers`` (n - 1 values)."""
    if len(numbers) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(numbers)}")
    missing = 1
    for value in sorted(numbers):
        if value == missing:
            missing += 1
    return missing


def josephus_order(n: int) -> list[int]:
    """Removal order when every second child in a circle of 1..n leaves."""
    circle = deque(range(1, n + 1))
    order: list[int] = []
    skip = True
    while circle:
        child = circle.popleft()
        if skip:
            circle.append(child)
        else:
            order.append(child)
        skip = not skip
    return order