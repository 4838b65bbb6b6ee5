# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""An NxN Sudoku grid as rows of integers (0 = open cell)."""

Cell = tuple[int, int]
"""A (row, col) coordinate, 0-based."""


class ContradictionInfo(TypedDict):
    """Where elimination ran into an already-placed equal digit."""

    cell: str  # e.g. 'r1c5' (1-based, as printed for humans)
    digit: int


class SolvePayload(TypedDict, total=False):
    """JSON shape printed by the CLI in --json mode."""

    puzzle: str  # path of the puzzle file
    outcome: str  # 'solved' | 'partially_solved' | 'contradiction'
    sweeps: int
    eliminations: int
    resolved: int  # number of resolved cells at termination
    grid: Grid  # final grid, 0 for open cells
    board: str  # final grid rendered in the fixed-width text format
    contradiction: ContradictionInfo | None
