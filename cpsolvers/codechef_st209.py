"""Solvers for a set of short contest problems on numbers and bit strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from math import gcd

BITCOIN_LIMIT = 4


def bitcoin_market(n: int) -> bool:
    """Tell whether ``n`` is within the market limit."""
    return n <= BITCOIN_LIMIT


def divisible_duel(a: int, b: int) -> bool:
    """Tell whether the even multiples of ``a`` in [a, b] sum to at least the odd ones."""
    if a < 1:
        raise ValueError("a must be positive")
    even = odd = 0
    for value in range(a, b + 1, a):
        if value % 2:
            odd += value
        else:
            even += value
    return even >= odd


def high_score(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the best total score of the two lists.

    If the most frequent value (smallest on ties) occurs more than ``len(a)``
    times, each surplus occurrence costs twice its value.
    """
    total = sum(a) + sum(b)
    counts = Counter(a) + Counter(b)
    value, occurrences = 0, 0
    for candidate in sorted(counts):
        if counts[candidate] > occurrences:
            value, occurrences = candidate, counts[candidate]
    if occurrences <= len(a):
        return total
    return total - 2 * value * (occurrences - len(a))


def small_gcd_sort(n: int) -> list[int]:
    """Order 1..n by descending gcd with ``n``, ties by ascending value."""
    return sorted(range(1, n + 1), key=lambda i: (-gcd(i, n), i))


def tactical_conversion(s: str) -> bool:
    """Tell whether the bit string can be converted.

    It cannot only when it has two or three ones and they are all adjacent.
    """
    ones = [i for i, bit in enumerate(s) if bit == "1"]
    if len(ones) not in (2, 3):
        return True
    return any(later != earlier + 1 for earlier, later in zip(ones, ones[1:]))