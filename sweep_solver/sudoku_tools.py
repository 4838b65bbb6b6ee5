"""Elimination solving: row/column/box sweeps over a CandidateGrid, repeated until solved, stalled, or contradictory."""

# sudoku_tools.py
# A sweep visits every cell in row-major order. Each cell that is resolved
# at the moment it is visited removes its digit from the rest of its row,
# column and box. Removals are applied in place, so a cell resolved early in
# a sweep already propagates later in that same sweep.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from types_sudoku import ContradictionInfo

from .solver_core import CandidateGrid, ContradictionError, rc_to_key


class SolveOutcome(str, Enum):
    SOLVED = "solved"
    PARTIALLY_SOLVED = "partially_solved"  # fixed point with open cells left
    CONTRADICTION = "contradiction"


@dataclass
class SolveResult:
    outcome: SolveOutcome
    sweeps: int = 0
    eliminations: int = 0
    contradiction: ContradictionError | None = None

    @property
    def solved(self) -> bool:
        return self.outcome is SolveOutcome.SOLVED

    def contradiction_info(self) -> ContradictionInfo | None:
        if self.contradiction is None:
            return None
        e = self.contradiction
        return {"cell": rc_to_key(e.row, e.col), "digit": e.digit}


def cross_row(grid: CandidateGrid, r: int, c: int, value: int) -> int:
    removed = 0
    for cc in range(grid.size):
        if cc != c and grid.remove_candidate(r, cc, value):
            removed += 1
    return removed


def cross_column(grid: CandidateGrid, r: int, c: int, value: int) -> int:
    removed = 0
    for rr in range(grid.size):
        if rr != r and grid.remove_candidate(rr, c, value):
            removed += 1
    return removed


def cross_box(grid: CandidateGrid, r: int, c: int, value: int) -> int:
    r0, c0 = grid.box_origin(r, c)
    k = grid.box_size
    removed = 0
    for rr in range(r0, r0 + k):
        for cc in range(c0, c0 + k):
            if (rr, cc) != (r, c) and grid.remove_candidate(rr, cc, value):
                removed += 1
    return removed


def sweep(grid: CandidateGrid) -> int:
    """Run one elimination pass and return how many candidates it removed.

    Raises ContradictionError as soon as a digit would be removed from a
    cell already resolved to that digit; the grid keeps every removal made
    before that point.
    """
    removed = 0
    for r, c in grid.cells():
        v = grid.value(r, c)
        if v is None:
            continue
        removed += cross_row(grid, r, c, v)
        removed += cross_column(grid, r, c, v)
        removed += cross_box(grid, r, c, v)
    return removed


def solve(grid: CandidateGrid, verbose: bool = False) -> SolveResult:
    """Sweep until the grid is complete or a sweep changes nothing.

    At least one sweep always runs, so givens in an already complete grid
    are still checked against each other. Candidate totals never grow, which
    bounds the number of sweeps.
    """
    result = SolveResult(SolveOutcome.PARTIALLY_SOLVED)
    cells = grid.size * grid.size
    while True:
        result.sweeps += 1
        before = grid.candidate_count()
        try:
            removed = sweep(grid)
        except ContradictionError as e:
            # removals made before the clash stay in the grid
            result.eliminations += before - grid.candidate_count()
            result.outcome = SolveOutcome.CONTRADICTION
            result.contradiction = e
            if verbose:
                print(f"[sweep] #{result.sweeps} stopped: {e}", flush=True)
            return result
        result.eliminations += removed
        if verbose:
            print(
                f"[sweep] #{result.sweeps} removed={removed} resolved={grid.resolved_count()}/{cells}",
                flush=True,
            )
        if grid.is_complete():
            result.outcome = SolveOutcome.SOLVED
            return result
        if removed == 0:
            result.outcome = SolveOutcome.PARTIALLY_SOLVED
            return result
