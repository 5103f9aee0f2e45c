"""Solvers for painting, string building, inversion, shift and parity problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, groupby


def fairy_painting(values: Sequence[int]) -> int:
    """Return the smallest value present that is at least the number of distinct values.

    Raises ValueError when no value is that large.
    """
    distinct = set(values)
    candidates = [value for value in distinct if value >= len(distinct)]
    if not candidates:
        raise ValueError("no value reaches the count of distinct values")
    return min(candidates)


def needle_in_haystack(s: str, t: str) -> str:
    """Return the smallest rearrangement of ``t`` that holds ``s`` as a subsequence.

    Raises ValueError when ``t`` lacks letters that ``s`` needs.
    """
    remaining = Counter(t)
    needed = Counter(s)
    if any(needed[char] > remaining[char] for char in needed):
        raise ValueError("Impossible")

    suffix_counts = [Counter()]
    for char in reversed(s):
        counts = suffix_counts[-1].copy()
        counts[char] += 1
        suffix_counts.append(counts)
    suffix_counts.reverse()

    matched = 0
    result: list[str] = []
    for _ in range(len(t)):
        for char in sorted(c for c in remaining if remaining[c]):
            remaining[char] -= 1
            next_matched = matched + 1 if matched < len(s) and s[matched] == char else matched
            required = suffix_counts[next_matched]
            if all(remaining[c] >= count for c, count in required.items()):
                result.append(char)
                matched = next_matched
                break
            remaining[char] += 1
    return "".join(result)


def count_inversion_operations(values: Sequence[int]) -> int:
    """Count the elements after the first that have a larger element before them."""
    return sum(
        1
        for prefix_max, value in zip(accumulate(values, max), values[1:])
        if prefix_max > value
    )


def optimal_shift(s: str) -> int:
    """Return the longest run of zeros in ``s`` read as a ring.

    A string of zeros only counts its leading and trailing runs both, giving
    twice its length.
    """
    n = len(s)
    leading = n - len(s.lstrip("0"))
    trailing = n - len(s.rstrip("0"))
    runs = [sum(1 for _ in group) for char, group in groupby(s) if char == "0"]
    return max([leading + trailing, *runs])


def odd_process(values: Sequence[int]) -> list[int]:
    """For each k from 1 to n, return the best total from picking k values with an odd sum.

    One odd value, the largest, is counted; the largest evens are added to it,
    and any further odds taken must cancel in pairs. A k that cannot be served
    yields 0.
    """
    n = len(values)
    odd = sorted((value for value in values if value % 2), reverse=True)
    even = sorted((value for value in values if value % 2 == 0), reverse=True)
    if not odd:
        return [0] * n
    if not even:
        return [0 if k % 2 else odd[0] for k in range(n)]

    even_prefix = list(accumulate(even))
    totals = []
    for k in range(1, n + 1):
        take_even = min(k - 1, len(even))
        take_odd = k - take_even
        if take_odd % 2 == 0:
            take_odd += 1
            take_even -= 1
        if take_even < 0 or take_odd > len(odd):
            totals.append(0)
        else:
            totals.append(odd[0] + (even_prefix[take_even - 1] if take_even else 0))
    return totals