"""Grid solvers: non-overlapping 2x2 blocks and a maze with teleporters."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

WALL = "#"
FLOOR = "."
STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def count_block_placements(cells: Iterable[tuple[int, int]]) -> int:
    """Count the 2x2 blocks that get placed when tried in order.

    Each ``(row, col)`` pair, 1-based, names the top-left corner of a block.
    A block is placed only if it shares no cell with a block already placed.
    """
    occupied: set[tuple[int, int]] = set()
    placed = 0
    for row, col in cells:
        block = {(row, col), (row + 1, col), (row, col + 1), (row + 1, col + 1)}
        if occupied.isdisjoint(block):
            placed += 1
            occupied |= block
    return placed


def teleport_maze(grid: Sequence[str]) -> int | None:
    """Return the fewest moves from the top-left to the bottom-right cell.

    A move goes to a side neighbour that is not ``#``. A cell holding any other
    character than ``.`` or ``#`` is a teleporter: from it one move reaches every
    cell with the same character, and each character's teleport is used at most
    once. Returns None when the target cannot be reached.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    height, width = len(grid), len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must have equal length")

    portals: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell not in (FLOOR, WALL):
                portals[cell].append((i, j))

    target = (height - 1, width - 1)
    dist = {(0, 0): 0}
    used: set[str] = set()
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == target:
            return dist[cell]
        i, j = cell
        step = dist[cell] + 1
        for di, dj in STEPS:
            ni, nj = i + di, j + dj
            if 0 <= ni < height and 0 <= nj < width and grid[ni][nj] != WALL and (ni, nj) not in dist:
                dist[(ni, nj)] = step
                queue.append((ni, nj))
        mark = grid[i][j]
        if mark not in (FLOOR, WALL) and mark not in used:
            for other in portals[mark]:
                if other != cell and other not in dist:
                    dist[other] = step
                    queue.append(other)
            used.add(mark)
    return None