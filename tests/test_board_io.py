# tests/test_board_io.py
import pytest

from sweep_solver.board_io import parse_board, read_board_file, render_board, strip_decoration
from sweep_solver.config import SolverSettings
from sweep_solver.solver_core import CandidateGrid, InvalidSizeError, OutOfRangeError

SOLVED_TEXT = """\
534|678|912
672|195|348
198|342|567
---+---+---
859|761|423
426|853|791
713|924|856
---+---+---
961|537|284
287|419|635
345|286|179
"""


def test_strip_decoration_keeps_spaces():
    assert strip_decoration(" 3 | 7 |   \n") == " 3  7    "
    assert strip_decoration("---+---+---") == ""


def test_render_solved_board(solution):
    assert render_board(CandidateGrid.from_rows(solution)) == SOLVED_TEXT


def test_render_open_cells_as_spaces():
    g = CandidateGrid(9)
    g.set_cell(0, 1, 3)
    g.set_cell(8, 8, 9)
    lines = render_board(g).splitlines()
    assert len(lines) == 11
    assert lines[0] == " 3 |   |   "
    assert lines[3] == "---+---+---"
    assert lines[-1] == "   |   |  9"


def test_render_four_by_four():
    g = CandidateGrid.from_rows([[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 0]])
    assert render_board(g) == "12|34\n34|12\n--+--\n21|43\n43|2 \n"


def test_parse_keeps_column_alignment():
    g = parse_board(" 3 | 7 |   \n6  |  5|   \n")
    assert g.value(0, 1) == 3
    assert g.value(0, 4) == 7
    assert g.value(1, 0) == 6
    assert g.value(1, 5) == 5
    assert g.resolved_count() == 4


def test_separator_lines_do_not_count_as_rows():
    text = "1  |   |   \n---+---+---\n 2 |   |   \n"
    g = parse_board(text)
    assert g.value(0, 0) == 1
    assert g.value(1, 1) == 2


def test_short_lines_and_missing_rows_stay_open():
    g = parse_board("12\n")
    assert g.value(0, 1) == 2
    assert not g.is_resolved(0, 2)
    assert not g.is_resolved(5, 5)


def test_crlf_input():
    g = parse_board("5  |   |   \r\n")
    assert g.value(0, 0) == 5
    assert g.resolved_count() == 1


def test_round_trip_resolved_grid(solution):
    g = CandidateGrid.from_rows(solution)
    assert parse_board(render_board(g)) == g


@pytest.mark.parametrize(
    "text",
    [
        "1234567891\n",  # too many columns
        "0        \n",  # zero is not a digit of the board
        "x        \n",
        "\n".join(["         "] * 10) + "\n",  # too many rows
    ],
)
def test_parse_rejects_bad_input(text):
    with pytest.raises(OutOfRangeError):
        parse_board(text)


def test_parse_rejects_digit_above_size():
    with pytest.raises(OutOfRangeError):
        parse_board("5   \n", size=4)


def test_parse_invalid_size():
    with pytest.raises(InvalidSizeError):
        parse_board("", size=5)


def test_custom_blank_and_separators():
    g = parse_board("5..:.7.\n", separators=":", blank=".")
    assert g.value(0, 0) == 5
    assert g.value(0, 4) == 7


def test_read_board_file(puzzles_dir):
    g = read_board_file(puzzles_dir / "sparse17.puzzle")
    assert g.resolved_count() == 17
    assert g.value(0, 1) == 3
    assert g.value(8, 6) == 1


def test_read_board_file_with_settings(tmp_path):
    p = tmp_path / "small.puzzle"
    p.write_text("1.|..\n..|.1\n--+--\n..|..\n..|..\n", encoding="utf-8")
    g = read_board_file(p, SolverSettings(size=4, blank="."))
    assert g.size == 4
    assert g.value(0, 0) == 1
    assert g.value(1, 3) == 1


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_board_file(tmp_path / "nope.puzzle")
