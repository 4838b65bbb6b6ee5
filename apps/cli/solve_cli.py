"""Command line driver: read a puzzle file, run elimination sweeps, print the board before and after."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli puzzles/easy.puzzle
#   python -m apps.cli.solve_cli puzzles/sparse17.puzzle --json
#   sudoku-sweep                      (prompts for the puzzle file)
#
# Exit codes: 0 solved, 1 unreadable input, 2 partially solved, 3 contradiction

import argparse
import json
import sys

from pydantic import ValidationError

from sweep_solver.board_io import read_board_file, render_board
from sweep_solver.config import load_settings
from sweep_solver.solver_core import GridError
from sweep_solver.sudoku_tools import SolveOutcome, solve
from types_sudoku import SolvePayload

EXIT_CODES = {
    SolveOutcome.SOLVED: 0,
    SolveOutcome.PARTIALLY_SOLVED: 2,
    SolveOutcome.CONTRADICTION: 3,
}


def prompt_for_puzzle() -> str:
    print("Enter filename for puzzle file (include file extension):", flush=True)
    return input().strip()


def main(args) -> int:
    try:
        settings = load_settings(
            args.config,
            size=args.size,
            verbose=args.verbose or None,
            show_unsolved=False if args.no_unsolved else None,
        )
    except (OSError, ValidationError) as e:
        print(f"ERROR: bad configuration: {e}", file=sys.stderr)
        return 1

    puzzle = args.puzzle or prompt_for_puzzle()
    try:
        grid = read_board_file(puzzle, settings)
    except FileNotFoundError:
        print("ERROR: File not found.", file=sys.stderr)
        return 1
    except GridError as e:
        print(f"ERROR: {puzzle}: {e}", file=sys.stderr)
        return 1

    if settings.show_unsolved and not args.json:
        print("\nUnsolved Board:\n" + render_board(grid))

    result = solve(grid, verbose=settings.verbose and not args.json)

    if args.json:
        payload: SolvePayload = {
            "puzzle": str(puzzle),
            "outcome": result.outcome.value,
            "sweeps": result.sweeps,
            "eliminations": result.eliminations,
            "resolved": grid.resolved_count(),
            "grid": grid.to_rows(),
            "board": render_board(grid),
            "contradiction": result.contradiction_info(),
        }
        print(json.dumps(payload, indent=2))
    else:
        print("Solved Board:\n" + render_board(grid))
        print(
            f"[solve] outcome={result.outcome.value} sweeps={result.sweeps} "
            f"eliminations={result.eliminations}",
            flush=True,
        )
        if result.contradiction is not None:
            print(f"[solve] {result.contradiction}", flush=True)
        elif not result.solved:
            print(
                f"[solve] elimination stalled with {grid.size * grid.size - grid.resolved_count()} open cells",
                flush=True,
            )
    return EXIT_CODES[result.outcome]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a Sudoku by repeated row/column/box elimination.")
    ap.add_argument("puzzle", nargs="?", help="puzzle file; prompted for when omitted")
    ap.add_argument("--config", type=str, default=None, help="YAML settings file (default: configs/default.yaml)")
    ap.add_argument("--size", type=int, default=None, help="board side length, overrides the config")
    ap.add_argument("--verbose", action="store_true", help="print one line per sweep")
    ap.add_argument("--json", action="store_true", help="print a JSON payload instead of boards")
    ap.add_argument("--no-unsolved", action="store_true", help="skip printing the input board")
    return ap


def cli(argv=None) -> int:
    return main(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(cli())
