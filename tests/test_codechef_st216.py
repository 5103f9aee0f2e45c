import pytest

from cpsolvers.codechef_st216 import (
    best_seats,
    entertainment_cost,
    lis_lds_min,
    scoring,
)


def test_best_seats_picks_a_neighbouring_sum_that_is_smallest():
    values = [4, 9, 1, 7, 3, 8]
    sums = [a + b for a, b in zip(values, values[1:])]
    result = best_seats(values)
    assert result in sums
    assert all(result <= s for s in sums)


def test_best_seats_two_equal_values():
    assert best_seats([5, 5]) == best_seats([5, 5, 5])


def test_best_seats_needs_two_values():
    with pytest.raises(ValueError):
        best_seats([7])


@pytest.mark.parametrize("n", [5, 6, 100])
def test_entertainment_cost_is_capped(n):
    assert entertainment_cost(n) == 1000


def test_entertainment_cost_single_person():
    assert entertainment_cost(1) == 200


def test_entertainment_cost_is_monotone():
    costs = [entertainment_cost(n) for n in range(0, 10)]
    assert costs == sorted(costs)


def test_lis_lds_min_all_large_values_count_singly():
    values = [2, 5, 3, 9]
    assert lis_lds_min(values) == len(values)


def test_lis_lds_min_small_values_pair_up():
    assert lis_lds_min([1, 1]) == lis_lds_min([1])
    assert lis_lds_min([1, 1, 1]) == lis_lds_min([1]) + 1


def test_lis_lds_min_large_value_adds_one():
    base = [1, 3, 1, 1]
    assert lis_lds_min(base + [4]) == lis_lds_min(base) + 1


def test_scoring_shares_sum_and_differ():
    first, second = scoring(2, 10)
    assert first - second == 2
    assert first + second == 10


def test_scoring_truncates_toward_zero():
    first, second = scoring(5, 2)
    assert second == -scoring(2, 5)[1]
    assert first - second == 5