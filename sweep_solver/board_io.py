"""Reading and printing boards in the fixed-width text format (digits, spaces for blanks, |-+ as decoration)."""

# board_io.py
# Input:  one board row per content line; column = character position once
#         the decorative characters are stripped. Lines that are only
#         decoration (e.g. "---+---+---") do not count as rows.
# Output: digits or spaces, "|" between boxes, "---+---+---" between bands.
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .solver_core import CandidateGrid, OutOfRangeError

if TYPE_CHECKING:
    from .config import SolverSettings

DEFAULT_SEPARATORS = "|-+"


def strip_decoration(line: str, separators: str = DEFAULT_SEPARATORS) -> str:
    line = line.rstrip("\r\n")
    return "".join(ch for ch in line if ch not in separators)


def parse_board(
    text: str,
    size: int = 9,
    separators: str = DEFAULT_SEPARATORS,
    blank: str = " ",
) -> CandidateGrid:
    grid = CandidateGrid(size)
    row = -1
    for lineno, raw in enumerate(text.splitlines(), 1):
        line = strip_decoration(raw, separators)
        if not line:
            continue
        row += 1
        if row >= size:
            raise OutOfRangeError(f"line {lineno}: more than {size} board rows")
        if len(line) > size:
            raise OutOfRangeError(
                f"line {lineno}: {len(line)} cells after stripping {separators!r}, expected at most {size}"
            )
        for col, ch in enumerate(line):
            if ch == blank:
                grid.set_cell(row, col, None)
                continue
            if ch not in "0123456789":
                raise OutOfRangeError(f"line {lineno}, column {col + 1}: unexpected character {ch!r}")
            grid.set_cell(row, col, int(ch))
    return grid


def render_board(grid: CandidateGrid) -> str:
    n, k = grid.size, grid.box_size
    rule = "+".join("-" * k for _ in range(k))
    lines = []
    for r in range(n):
        out = []
        for c in range(n):
            v = grid.value(r, c)
            out.append(" " if v is None else str(v))
            if (c + 1) % k == 0 and c + 1 < n:
                out.append("|")
        lines.append("".join(out))
        if (r + 1) % k == 0 and r + 1 < n:
            lines.append(rule)
    return "\n".join(lines) + "\n"


def read_board_file(path: str | Path, settings: SolverSettings | None = None) -> CandidateGrid:
    if settings is None:
        return parse_board(Path(path).read_text(encoding="utf-8"))
    return parse_board(
        Path(path).read_text(encoding="utf-8"),
        size=settings.size,
        separators=settings.separators,
        blank=settings.blank,
    )
