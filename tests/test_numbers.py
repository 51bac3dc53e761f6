from functools import lru_cache

import pytest

from cpsolve.numbers import (
    MOD,
    beautiful_permutation,
    bit_strings,
    coin_piles,
    collatz,
    count_divisors,
    digit_at,
    josephus_order,
    missing_number,
    power_mod,
    spiral_value,
    two_sets,
)


def test_bit_strings_doubles_each_step():
    for n in range(0, 60):
        assert bit_strings(n + 1) == bit_strings(n) * 2 % MOD


def test_bit_strings_matches_power_mod():
    for n in (1, 17, 1000, 10**6):
        assert bit_strings(n) == power_mod(2, n)


def test_bit_strings_non_positive_is_empty_product():
    assert bit_strings(0) == bit_strings(-4) == power_mod(2, 0)


@lru_cache(maxsize=None)
def _reachable(a, b):
    if a == 0 and b == 0:
        return True
    if a < 0 or b < 0:
        return False
    return _reachable(a - 2, b - 1) or _reachable(a - 1, b - 2)


def test_coin_piles_agrees_with_search():
    for a in range(0, 25):
        for b in range(0, 25):
            assert coin_piles(a, b) == _reachable(a, b)


def test_coin_piles_is_symmetric():
    for a, b in [(2, 1), (10, 3), (1000, 500), (7, 14)]:
        assert coin_piles(a, b) == coin_piles(b, a)


def test_count_divisors_matches_brute_force():
    for n in range(1, 400):
        expected = sum(1 for d in range(1, n + 1) if n % d == 0)
        assert count_divisors(n) == expected


@pytest.mark.parametrize("prime", [2, 3, 5, 7, 997])
@pytest.mark.parametrize("k", [1, 2, 3])
def test_count_divisors_prime_powers(prime, k):
    assert count_divisors(prime**k) == k + 1


def test_count_divisors_is_multiplicative():
    assert count_divisors(999983 * 4) == count_divisors(999983) * count_divisors(4)


def test_count_divisors_rejects_zero():
    with pytest.raises(ValueError):
        count_divisors(0)


def test_power_mod_exponent_addition():
    for base in (3, 10, 123456789):
        for x, y in [(0, 5), (7, 11), (1000, 2345)]:
            assert power_mod(base, x + y) == power_mod(base, x) * power_mod(base, y) % MOD


def test_power_mod_fermat():
    for base in (2, 3, 999999):
        assert power_mod(base, MOD - 1) == power_mod(base, 0)


def test_power_mod_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power_mod(2, -1)


def test_digit_at_matches_concatenation():
    text = "".join(str(i) for i in range(1, 3000))
    for position in range(1, len(text) + 1, 7):
        assert digit_at(position) == int(text[position - 1])


def test_digit_at_large_position_is_digit():
    assert digit_at(10**18) in range(10)


def test_digit_at_rejects_zero():
    with pytest.raises(ValueError):
        digit_at(0)


def test_spiral_values_fill_square():
    size = 12
    values = {spiral_value(r, c) for r in range(1, size + 1) for c in range(1, size + 1)}
    assert values == set(range(1, size * size + 1))


def test_spiral_consecutive_values_are_neighbours():
    size = 10
    where = {
        spiral_value(r, c): (r, c) for r in range(1, size + 1) for c in range(1, size + 1)
    }
    for value in range(1, size * size):
        (r1, c1), (r2, c2) = where[value], where[value + 1]
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_spiral_rejects_zero():
    with pytest.raises(ValueError):
        spiral_value(0, 3)


@pytest.mark.parametrize("n", [1, 2, 3, 27, 1000])
def test_collatz_follows_rule(n):
    seq = collatz(n)
    assert seq[0] == n
    assert seq[-1] == 1
    for current, nxt in zip(seq, seq[1:]):
        assert nxt == (current * 3 + 1 if current % 2 else current // 2)


def test_collatz_rejects_zero():
    with pytest.raises(ValueError):
        collatz(0)


def test_two_sets_invariants():
    for n in range(1, 80):
        result = two_sets(n)
        total = n * (n + 1) // 2
        assert (result is None) == (total % 2 == 1)
        if result is not None:
            first, second = result
            assert sorted(first + second) == list(range(1, n + 1))
            assert sum(first) == sum(second)


@pytest.mark.parametrize("n", [1, 4, 5, 10, 51])
def test_beautiful_permutation_valid(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_impossible(n):
    assert beautiful_permutation(n) is None


def test_missing_number_finds_removed_value():
    n = 20
    for removed in range(1, n + 1):
        numbers = [v for v in range(n, 0, -1) if v != removed]
        assert missing_number(n, numbers) == removed


def test_missing_number_wrong_length():
    with pytest.raises(ValueError):
        missing_number(5, [1, 2])


def test_josephus_sample():
    assert josephus_order(7) == [2, 4, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("n", [1, 2, 10, 33])
def test_josephus_invariants(n):
    order = josephus_order(n)
    assert sorted(order) == list(range(1, n + 1))
    assert order[: n // 2] == list(range(2, n + 1, 2))