"""Exhaustive search and breadth-first solvers for introductory problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator, Sequence

FREE_CELL = "."
KNIGHT_MOVES = (
    (1, 2),
    (1, -2),
    (2, 1),
    (2, -1),
    (-1, 2),
    (-1, -2),
    (-2, 1),
    (-2, -1),
)


def apple_division(weights: Sequence[int]) -> int:
    """Return the smallest difference between the weights of two groups of apples."""
    total = sum(weights)
    subset_sums = {0}
    for weight in weights:
        subset_sums |= {partial + weight for partial in subset_sums}
    return min(abs(total - 2 * partial) for partial in subset_sums)


def count_queen_placements(board: Sequence[str]) -> int:
    """Count the ways to put one queen in every row so that no two attack.

    Queens may only stand on cells marked ``.``; any other character is reserved.
    """
    size = len(board)
    if any(len(row) != size for row in board):
        raise ValueError("board must be square")

    def place(row: int, cols: frozenset, diagonals: frozenset, anti: frozenset) -> int:
        if row == size:
            return 1
        return sum(
            place(row + 1, cols | {col}, diagonals | {row - col}, anti | {row + col})
            for col, cell in enumerate(board[row])
            if cell == FREE_CELL
            and col not in cols
            and row - col not in diagonals
            and row + col not in anti
        )

    return place(0, frozenset(), frozenset(), frozenset())


def _distinct_permutations(counts: Counter, remaining: int) -> Iterator[str]:
    if remaining == 0:
        yield ""
        return
    for char in sorted(counts):
        if counts[char]:
            counts[char] -= 1
            for rest in _distinct_permutations(counts, remaining - 1):
                yield char + rest
            counts[char] += 1


def creating_strings(s: str) -> list[str]:
    """Return every distinct rearrangement of ``s`` in lexicographic order."""
    return list(_distinct_permutations(Counter(s), len(s)))


def gray_code(n: int) -> list[str]:
    """Return a sequence of all ``n``-bit strings where neighbours differ in one bit."""
    if n < 1:
        raise ValueError("n must be at least 1")
    codes = ["0", "1"]
    for _ in range(n - 1):
        codes = [code + "0" for code in codes] + [code + "1" for code in reversed(codes)]
    return codes


def knight_distances(n: int) -> list[list[int | None]]:
    """Return the fewest knight moves from the top-left corner to every square.

    Squares the knight cannot reach hold ``None``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    dist: list[list[int | None]] = [[None] * n for _ in range(n)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        row, col = queue.popleft()
        step = dist[row][col] + 1
        for d_row, d_col in KNIGHT_MOVES:
            a, b = row + d_row, col + d_col
            if 0 <= a < n and 0 <= b < n and dist[a][b] is None:
                dist[a][b] = step
                queue.append((a, b))
    return dist