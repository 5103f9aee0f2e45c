"""Constructive solvers that build permutations, move lists and partitions."""

from __future__ import annotations

from collections.abc import Iterator

LEFT_PEG = 1
MIDDLE_PEG = 2
RIGHT_PEG = 3


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n where no two neighbours differ by exactly one.

    Raises ValueError for the sizes that have no such permutation.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if n in (2, 3):
        raise ValueError("no solution")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def raab_game(n: int, a: int, b: int) -> tuple[list[int], list[int]]:
    """Return two card orders for which the first player wins ``a`` rounds and
    the second wins ``b`` of the ``n`` rounds.

    Raises ValueError when no such pair of orders exists.
    """
    if n < 0 or a < 0 or b < 0:
        raise ValueError("n, a and b must be non-negative")
    first = list(range(1, n + 1))
    if a == 0 and b == 0:
        return first, list(first)
    decided = a + b
    ties = n - decided
    if ties < 0:
        raise ValueError("no solution")
    tail = first[ties:]
    shift = a % decided
    second = first[:ties] + tail[shift:] + tail[:shift]
    wins_first = sum(x > y for x, y in zip(first, second))
    wins_second = sum(x < y for x, y in zip(first, second))
    if (wins_first, wins_second) != (a, b):
        raise ValueError("no solution")
    return first, second


def _hanoi_moves(n: int, source: int, target: int, spare: int) -> Iterator[tuple[int, int]]:
    if n <= 0:
        return
    yield from _hanoi_moves(n - 1, source, spare, target)
    yield source, target
    yield from _hanoi_moves(n - 1, spare, target, source)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves, as (from, to) pegs, that carry ``n`` discs from peg 1 to peg 3."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return list(_hanoi_moves(n, LEFT_PEG, RIGHT_PEG, MIDDLE_PEG))


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum, each listed in descending order.

    Raises ValueError when the total of 1..n is odd.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if (n * (n + 1) // 2) % 2:
        raise ValueError("no solution")
    first: list[int] = []
    second: list[int] = []
    first_sum = second_sum = 0
    for value in range(n, 0, -1):
        if second_sum > first_sum:
            first.append(value)
            first_sum += value
        else:
            second.append(value)
            second_sum += value
    return first, second