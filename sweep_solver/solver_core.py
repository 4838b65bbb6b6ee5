"""Candidate grid for elimination solving: per-cell candidate sets, index math, and the grid error types."""

# solver_core.py
# - CandidateGrid owns a flat, row-major list of candidate sets
# - cells start with the full digit set and only ever lose members
# - a resolved cell (one candidate) is never mutated by elimination
from __future__ import annotations

import math
from collections.abc import Iterator

from types_sudoku import Cell, Grid


class GridError(ValueError):
    """Base class for problems raised by the candidate grid."""


class InvalidSizeError(GridError):
    def __init__(self, size: int):
        super().__init__(f"grid size must be a positive perfect square, got {size}")
        self.size = size


class OutOfRangeError(GridError):
    pass


class ContradictionError(GridError):
    """Eliminating `digit` from (row, col) would leave the cell with no candidates."""

    def __init__(self, row: int, col: int, digit: int):
        super().__init__(
            f"contradiction at {rc_to_key(row, col)}: {digit} is already placed there"
        )
        self.row = row
        self.col = col
        self.digit = digit

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


def rc_to_key(r: int, c: int) -> str:
    """Human label for a 0-based cell, e.g. (0, 4) -> 'r1c5'."""
    return f"r{r + 1}c{c + 1}"


def box_side(size: int) -> int:
    k = math.isqrt(size) if size > 0 else 0
    if k == 0 or k * k != size:
        raise InvalidSizeError(size)
    return k


class CandidateGrid:
    """Square Sudoku board where every cell holds a set of candidate digits.

    Cells are addressed with 0-based (row, col). A cell with one candidate is
    resolved; a cell with more is open. Candidates are only ever removed once
    the grid has been populated.
    """

    def __init__(self, size: int = 9):
        self._k = box_side(size)
        self._n = size
        self._digits = frozenset(range(1, size + 1))
        self._cells: list[set[int]] = [set(self._digits) for _ in range(size * size)]

    @classmethod
    def from_rows(cls, rows: Grid) -> CandidateGrid:
        """Build a grid from rows of ints where 0 marks an open cell."""
        grid = cls(len(rows))
        for r, row in enumerate(rows):
            if len(row) != grid.size:
                raise OutOfRangeError(f"row {r + 1} has {len(row)} cells, expected {grid.size}")
            for c, v in enumerate(row):
                grid.set_cell(r, c, v or None)
        return grid

    @property
    def size(self) -> int:
        return self._n

    @property
    def box_size(self) -> int:
        return self._k

    def _index(self, r: int, c: int) -> int:
        if not (0 <= r < self._n and 0 <= c < self._n):
            raise OutOfRangeError(f"cell ({r}, {c}) outside a {self._n}x{self._n} grid")
        return r * self._n + c

    def _check_digit(self, value: int) -> None:
        if value not in self._digits:
            raise OutOfRangeError(f"digit {value!r} not in 1..{self._n}")

    def set_cell(self, r: int, c: int, value: int | None) -> None:
        """Place a given digit, or reset the cell to all candidates when value is None."""
        i = self._index(r, c)
        if value is None:
            self._cells[i] = set(self._digits)
            return
        self._check_digit(value)
        self._cells[i] = {value}

    def candidates(self, r: int, c: int) -> frozenset[int]:
        return frozenset(self._cells[self._index(r, c)])

    def is_resolved(self, r: int, c: int) -> bool:
        return len(self._cells[self._index(r, c)]) == 1

    def value(self, r: int, c: int) -> int | None:
        """The placed digit of a resolved cell, None for an open one."""
        cell = self._cells[self._index(r, c)]
        if len(cell) != 1:
            return None
        return next(iter(cell))

    def remove_candidate(self, r: int, c: int, value: int) -> bool:
        """Drop `value` from an open cell. Returns True if a candidate was removed.

        Resolved cells are left alone. If the resolved digit is `value` itself
        the removal would empty the cell, so ContradictionError is raised
        instead and nothing changes.
        """
        self._check_digit(value)
        cell = self._cells[self._index(r, c)]
        if len(cell) == 1:
            if value in cell:
                raise ContradictionError(r, c, value)
            return False
        if value not in cell:
            return False
        cell.discard(value)
        return True

    def is_complete(self) -> bool:
        return all(len(cell) == 1 for cell in self._cells)

    def resolved_count(self) -> int:
        return sum(1 for cell in self._cells if len(cell) == 1)

    def candidate_count(self) -> int:
        """Total number of candidates over all cells (N*N when complete)."""
        return sum(len(cell) for cell in self._cells)

    def box_origin(self, r: int, c: int) -> Cell:
        self._index(r, c)
        return (r // self._k) * self._k, (c // self._k) * self._k

    def cells(self) -> Iterator[Cell]:
        """Coordinates in row-major order."""
        for r in range(self._n):
            for c in range(self._n):
                yield (r, c)

    def to_rows(self) -> Grid:
        return [[self.value(r, c) or 0 for c in range(self._n)] for r in range(self._n)]

    def copy(self) -> CandidateGrid:
        other = CandidateGrid(self._n)
        other._cells = [set(cell) for cell in self._cells]
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateGrid):
            return NotImplemented
        return self._n == other._n and self._cells == other._cells

    def __repr__(self) -> str:
        return f"CandidateGrid(size={self._n}, resolved={self.resolved_count()}/{self._n * self._n})"
