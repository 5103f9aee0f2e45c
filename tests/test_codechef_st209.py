from math import gcd

import pytest

from cpsolvers.codechef_st209 import (
    bitcoin_market,
    divisible_duel,
    high_score,
    small_gcd_sort,
    tactical_conversion,
)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_bitcoin_within_limit(n):
    assert bitcoin_market(n) is True


@pytest.mark.parametrize("n", [5, 6, 100])
def test_bitcoin_over_limit(n):
    assert bitcoin_market(n) is False


def test_duel_single_even():
    assert divisible_duel(2, 2) is True


def test_duel_single_odd():
    assert divisible_duel(3, 3) is False


def test_duel_even_step_always_true():
    assert all(divisible_duel(4, b) for b in range(4, 40))


def test_duel_rejects_zero():
    with pytest.raises(ValueError):
        divisible_duel(0, 5)


def test_high_score_no_surplus():
    a, b = [1, 2], [3, 4]
    assert high_score(a, b) == sum(a) + sum(b)


def test_high_score_surplus_penalised():
    a, b = [5], [5, 5]
    assert high_score(a, b) < sum(a) + sum(b)


def test_high_score_surplus_value():
    assert high_score([5], [5, 5]) == -5


def test_high_score_empty():
    assert high_score([], []) == 0


def test_small_gcd_sort_is_permutation():
    result = small_gcd_sort(12)
    assert sorted(result) == list(range(1, 13))


def test_small_gcd_sort_gcds_non_increasing():
    n = 18
    gcds = [gcd(i, n) for i in small_gcd_sort(n)]
    assert gcds == sorted(gcds, reverse=True)


def test_small_gcd_sort_prime():
    assert small_gcd_sort(7) == [7, 1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize(
    "s, expected",
    [
        ("0000", True),
        ("1", True),
        ("11", False),
        ("101", True),
        ("111", False),
        ("1011", True),
        ("1111", True),
        ("0110", False),
    ],
)
def test_tactical_conversion(s, expected):
    assert tactical_conversion(s) is expected