import pytest

from cpsolvers.atcoder import (
    ReachabilityTracker,
    count_indivisible_ranges,
    pad_with_o,
    siamese_magic_square,
    triangular_number,
)


def test_triangular_number_zero():
    assert triangular_number(0) == 0


@pytest.mark.parametrize("n", [1, 2, 10, 1000, 10**9])
def test_triangular_number_step(n):
    assert triangular_number(n) - triangular_number(n - 1) == n


def test_count_indivisible_ranges_pair():
    assert count_indivisible_ranges([2, 3]) == 1


def test_count_indivisible_ranges_single_element():
    assert count_indivisible_ranges([7]) == 0


def test_count_indivisible_ranges_equal_values():
    assert count_indivisible_ranges([4, 4, 4, 4]) == 0


def test_count_indivisible_ranges_empty():
    assert count_indivisible_ranges([]) == 0


def test_count_indivisible_ranges_bounded_by_pairs():
    values = [2, 3, 5, 7, 11]
    assert count_indivisible_ranges(values) <= len(values) * (len(values) - 1) // 2


def test_count_indivisible_ranges_rejects_zero():
    with pytest.raises(ValueError):
        count_indivisible_ranges([1, 0, 2])


def test_reachability_chain():
    tracker = ReachabilityTracker(4, [(1, 2), (2, 3)])
    tracker.mark(2)
    assert tracker.is_good(1)
    assert tracker.is_good(2)
    assert not tracker.is_good(3)
    assert not tracker.is_good(4)
    tracker.mark(3)
    assert tracker.is_good(3)
    assert not tracker.is_good(4)


def test_reachability_cycle():
    tracker = ReachabilityTracker(3, [(1, 2), (2, 3), (3, 1)])
    tracker.mark(1)
    assert all(tracker.is_good(v) for v in (1, 2, 3))


def test_reachability_initially_unmarked():
    tracker = ReachabilityTracker(2, [(1, 2)])
    assert not tracker.is_good(1)
    assert not tracker.is_good(2)


def test_reachability_out_of_range():
    tracker = ReachabilityTracker(2, [])
    with pytest.raises(ValueError):
        tracker.mark(3)
    with pytest.raises(ValueError):
        tracker.is_good(0)


def test_pad_with_o():
    assert pad_with_o(5, "abc") == "ooabc"


@pytest.mark.parametrize("n,s", [(3, "abc"), (10, "x"), (4, "")])
def test_pad_with_o_shape(n, s):
    padded = pad_with_o(n, s)
    assert len(padded) == n
    assert padded.endswith(s)
    assert set(padded[: n - len(s)]) <= {"o"}


def test_pad_with_o_too_long():
    with pytest.raises(ValueError):
        pad_with_o(2, "abc")


def test_siamese_three():
    assert siamese_magic_square(3) == [[8, 1, 6], [3, 5, 7], [4, 9, 2]]


def test_siamese_one():
    assert siamese_magic_square(1) == [[1]]


@pytest.mark.parametrize("n", [3, 5, 7, 9])
def test_siamese_is_magic(n):
    square = siamese_magic_square(n)
    target = n * (n * n + 1) // 2
    assert sorted(v for row in square for v in row) == list(range(1, n * n + 1))
    assert all(sum(row) == target for row in square)
    assert all(sum(col) == target for col in zip(*square))
    assert sum(square[i][i] for i in range(n)) == target
    assert sum(square[i][n - 1 - i] for i in range(n)) == target


def test_siamese_rejects_zero():
    with pytest.raises(ValueError):
        siamese_magic_square(0)