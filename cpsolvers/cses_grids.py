"""Grid construction and string rearrangement solvers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

COLORS = "ABCD"


def recolor_grid(grid: Sequence[str]) -> list[str]:
    """Give every cell a colour from A-D unlike its old colour and its recoloured neighbours.

    Cells are handled row by row; each takes the first colour that differs from
    its original colour and from the new colours above and to the left.
    """
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows must have equal length")
    result: list[list[str]] = []
    for i, row in enumerate(grid):
        new_row: list[str] = []
        for j, original in enumerate(row):
            taken = {original}
            if i:
                taken.add(result[i - 1][j])
            if j:
                taken.add(new_row[j - 1])
            new_row.append(next((c for c in COLORS if c not in taken), original))
        result.append(new_row)
    return ["".join(row) for row in result]


def mex_grid(m: int) -> list[list[int]]:
    """Build an ``m`` by ``m`` grid where each value is the smallest one missing
    from the cells to its left and above it."""
    if m < 0:
        raise ValueError("m must be non-negative")
    row_seen = [set() for _ in range(m)]
    col_seen = [set() for _ in range(m)]
    grid = [[0] * m for _ in range(m)]
    for i in range(m):
        for j in range(m):
            value = 0
            while value in row_seen[i] or value in col_seen[j]:
                value += 1
            grid[i][j] = value
            row_seen[i].add(value)
            col_seen[j].add(value)
    return grid


def palindrome_reorder(s: str) -> str:
    """Rearrange ``s`` into a palindrome.

    Raises ValueError when more than one character occurs an odd number of times.
    """
    counts = Counter(s)
    odd = sorted(char for char, count in counts.items() if count % 2)
    if len(odd) > 1:
        raise ValueError("no palindrome can be formed")
    result = odd[0] * counts[odd[0]] if odd else ""
    for char in sorted(counts):
        if counts[char] % 2 == 0:
            half = char * (counts[char] // 2)
            result = half + result + half
    return result