"""Counting and closed-form solvers for introductory number problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby

MOD = 10**9 + 7
DIE_FACES = 6


def dice_combinations(n: int) -> int:
    """Count the ordered ways to reach the sum ``n`` with throws of a six-sided die.

    Each term added to a running count is reduced modulo ``MOD``, but the
    final count itself is not, so the result may exceed ``MOD``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(
            ways[total - face] % MOD
            for face in range(1, DIE_FACES + 1)
            if total >= face
        )
    return ways[n]


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return pow(2, n, MOD)


def coin_piles(a: int, b: int) -> bool:
    """Tell whether two piles can be emptied by taking 1 from one and 2 from the other."""
    return min(a, b) * 2 >= max(a, b) and (a + b) % 3 == 0


def digit_query(k: int) -> int:
    """Return the ``k``-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("k must be at least 1")
    count = 9
    length = 1
    while k > length * count:
        k -= length * count
        count *= 10
        length += 1
    skipped, index = divmod(k - 1, length)
    number = skipped + count // 9
    return int(str(number)[index])


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the number from 1..n that ``numbers`` lacks."""
    return n * (n + 1) // 2 - sum(numbers)


def number_spiral(row: int, col: int) -> int:
    """Return the value at (``row``, ``col``) of the infinite number spiral, 1-based."""
    n = max(row, col)
    if n % 2 == 0:
        if row < col:
            return (n - 1) * (n - 1) + row
        return n * n - (col - 1)
    if row < col:
        return n * n - (row - 1)
    return (n - 1) * (n - 1) + col


def two_knights(n: int) -> list[int]:
    """For each board size 1..n, count placements of two knights that do not attack."""
    counts = []
    for size in range(1, n + 1):
        squares = size * size
        ways = squares * (squares - 1) // 2
        attacking = (
            8 * (size - 4) * (size - 4)
            + 6 * (size - 4) * 4
            + 4 * (size - 3) * 4
            + 3 * 8
            + 2 * 4
        ) // 2
        counts.append(ways - attacking)
    return counts


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n factorial."""
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def increasing_array_moves(values: Sequence[int]) -> int:
    """Return the total increments needed to make ``values`` non-decreasing."""
    return sum(peak - value for peak, value in zip(accumulate(values, max), values))


def longest_repetition(s: str) -> int:
    """Return the length of the longest run of one repeated character in ``s``."""
    if not s:
        raise ValueError("s must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(s))