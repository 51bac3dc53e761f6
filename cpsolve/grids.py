"""Puzzles over rectangular character grids of walls and floor."""

from __future__ import annotations

from collections import deque
from typing import Iterable

WALL = "#"
FLOOR = "."
START = "A"
END = "B"

_MOVES = (("U", -1, 0), ("D", 1, 0), ("R", 0, 1), ("L", 0, -1))


def _rows(grid: Iterable[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all grid rows must have the same width")
    return rows


def _neighbours(rows: list[str], row: int, col: int):
    """Open cells next to (row, col), with the move that reaches each."""
    height, width = len(rows), len(rows[0])
    for move, d_row, d_col in _MOVES:
        r, c = row + d_row, col + d_col
        if 0 <= r < height and 0 <= c < width and rows[r][c] != WALL:
            yield move, r, c


def count_rooms(grid: Iterable[str]) -> int:
    """Number of separate rooms of floor cells, joined side by side."""
    rows = _rows(grid)
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for row, line in enumerate(rows):
        for col, cell in enumerate(line):
            if cell != FLOOR or (row, col) in seen:
                continue
            rooms += 1
            seen.add((row, col))
            stack = [(row, col)]
            while stack:
                r, c = stack.pop()
                for _, nr, nc in _neighbours(rows, r, c):
                    if (nr, nc) not in seen:
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def find_path(grid: Iterable[str]) -> str | None:
    """Shortest moves (U, D, L, R) from ``A`` to ``B``, or None if unreachable."""
    rows = _rows(grid)
    start: tuple[int, int] | None = None
    for row, line in enumerate(rows):
        for col, cell in enumerate(line):
            if cell == START:
                start = (row, col)
    if start is None:
        raise ValueError(f"grid has no start cell {START!r}")

    parent: dict[tuple[int, int], tuple[str, tuple[int, int]]] = {}
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        row, col = cell
        if rows[row][col] == END:
            moves: list[str] = []
            while cell != start:
                move, cell = parent[cell]
                moves.append(move)
            return "".join(reversed(moves))
        for move, r, c in _neighbours(rows, row, col):
            if (r, c) not in seen:
                seen.add((r, c))
                parent[(r, c)] = (move, cell)
                queue.append((r, c))
    return None