"""Solvers for bit-pairing, gem bundling and mission selection problems."""

from __future__ import annotations

from collections.abc import Sequence

FULL_BUNDLE_SCORE = 10
SINGLE_GEM_SCORE = 3


def differing_values(k: int, s: str) -> bool:
    """Tell whether the zeros and ones of ``s`` cover the pairs ``k`` apart.

    Scanning left to right, every free position ``i`` with ``i + k`` inside the
    string claims a zero at ``i`` and a one at ``i + k``.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    n = len(s)
    ones = s.count("1")
    zeros = n - ones
    claimed = [False] * n
    for i in range(max(n - k, 0)):
        if not claimed[i]:
            claimed[i] = True
            claimed[i + k] = True
            ones -= 1
            zeros -= 1
    return ones >= 0 and zeros >= 0


def gem_bundles(r: int, b: int, c: int) -> int:
    """Score full bundles of three colours, then the leftover gems singly."""
    bundles = min(r, b, c)
    return FULL_BUNDLE_SCORE * bundles + SINGLE_GEM_SCORE * (r + b + c - 3 * bundles)


def special_missions(cost: int, values: Sequence[int], mask: str) -> int:
    """Return the reward from ordinary missions plus the special ones taken.

    Ordinary missions (``0`` in ``mask``) always pay. A special mission (``1``)
    is taken when its value exceeds ``cost`` and the reward so far covers
    ``cost``; ``cost`` is paid once, on the first one taken.
    """
    if len(values) != len(mask):
        raise ValueError("values and mask must have the same length")
    reward = sum(value for value, bit in zip(values, mask) if bit == "0")
    paid = False
    for value, bit in zip(values, mask):
        if bit == "1" and reward >= cost and value > cost:
            if not paid:
                reward -= cost
                paid = True
            reward += value
    return reward