"""Solvers for seating, pricing, sequence and scoring problems."""

from __future__ import annotations

from collections.abc import Sequence

PRICE_PER_PERSON = 200
PRICE_CAP = 1000


def best_seats(values: Sequence[int]) -> int:
    """Return the smallest sum of two neighbouring values."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    return min(left + right for left, right in zip(values, values[1:]))


def entertainment_cost(n: int) -> int:
    """Return the price for ``n`` people, capped at ``PRICE_CAP``."""
    return min(PRICE_PER_PERSON * n, PRICE_CAP)


def lis_lds_min(values: Sequence[int]) -> int:
    """Count values of at least 2 singly and values below 2 in pairs, rounding up."""
    large = sum(1 for value in values if value >= 2)
    small = len(values) - large
    return large + (small + 1) // 2


def _truncated_half(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def scoring(x: int, y: int) -> tuple[int, int]:
    """Split the scores so the first exceeds the second by ``x``.

    The second share is half of ``y - x``, rounded toward zero.
    """
    half = _truncated_half(y - x)
    return half + x, half