"""Solvers for arithmetic, range and reachability contest problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import accumulate

PAD_CHAR = "o"


def triangular_number(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    return n * (n + 1) // 2


def count_indivisible_ranges(values: Sequence[int]) -> int:
    """Count contiguous ranges whose sum is divisible by none of their elements."""
    if any(value == 0 for value in values):
        raise ValueError("values must be non-zero")
    count = 0
    for start in range(len(values)):
        for length, total in enumerate(accumulate(values[start:]), 1):
            window = values[start:start + length]
            if all(total % value for value in window):
                count += 1
    return count


class ReachabilityTracker:
    """Tracks which vertices of a directed graph on 1..n can reach a marked vertex."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._reverse: list[list[int]] = [[] for _ in range(n + 1)]
        for source, target in edges:
            self._check(source)
            self._check(target)
            self._reverse[target].append(source)
        self._good = [False] * (n + 1)

    def _check(self, v: int) -> None:
        if not 1 <= v <= self._n:
            raise ValueError(f"vertex {v} is out of range")

    def mark(self, v: int) -> None:
        """Mark ``v`` good, along with every vertex that has a path to it."""
        self._check(v)
        if self._good[v]:
            return
        self._good[v] = True
        queue = deque([v])
        while queue:
            current = queue.popleft()
            for neighbour in self._reverse[current]:
                if not self._good[neighbour]:
                    self._good[neighbour] = True
                    queue.append(neighbour)

    def is_good(self, v: int) -> bool:
        """Tell whether ``v`` can reach a marked vertex."""
        self._check(v)
        return self._good[v]


def pad_with_o(n: int, s: str) -> str:
    """Left-pad ``s`` with 'o' to length ``n``."""
    if len(s) > n:
        raise ValueError("s is longer than n")
    return PAD_CHAR * (n - len(s)) + s


def siamese_magic_square(n: int) -> list[list[int]]:
    """Fill an ``n`` by ``n`` grid by the Siamese method, starting at the top middle.

    Each step tries up-right (wrapping), then down; when both are taken the step
    places nothing.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    grid = [[0] * n for _ in range(n)]
    row, col = 0, (n - 1) // 2
    grid[row][col] = 1
    placed = 1
    for _ in range(n * n - 1):
        for next_row, next_col in (((row - 1) % n, (col + 1) % n), ((row + 1) % n, col)):
            if grid[next_row][next_col] == 0:
                placed += 1
                grid[next_row][next_col] = placed
                row, col = next_row, next_col
                break
    return grid