# tests/test_parser.py
import pytest

from sudoku_solver.errors import PuzzleFormatError
from sudoku_solver.grid import parser as parser_module
from sudoku_solver.grid.parser import normalize_puzzle, parse_givens, parse_puzzle
from sudoku_solver.grid.topology import ALL_CELLS
from sudoku_solver.types import to_index

from conftest import EASY_PUZZLE, SAMPLE_PUZZLE


def test_normalize_drops_noise():
    assert normalize_puzzle("4 . . | 8\n0x9") == "4..809"


def test_parse_givens_maps_blanks_to_zero():
    givens = parse_givens(EASY_PUZZLE.replace("0", "."))
    assert len(givens) == 81
    assert givens[:9] == [0, 0, 3, 0, 2, 0, 6, 0, 0]


def test_parse_accepts_grid_layout():
    rows = [SAMPLE_PUZZLE[i:i + 9] for i in range(0, 81, 9)]
    pretty = "\n".join(" ".join(row) for row in rows)
    assert parse_puzzle(pretty) == parse_puzzle(SAMPLE_PUZZLE)


def test_givens_are_placed(sample_grid):
    for i, ch in enumerate(SAMPLE_PUZZLE):
        if ch != ".":
            cell = divmod(i, 9)
            assert sample_grid.possibles(cell) == [to_index(int(ch))]


def test_short_input_is_rejected_before_any_set_value(monkeypatch):
    calls = []
    monkeypatch.setattr(parser_module, "set_value", lambda *a: calls.append(a))
    with pytest.raises(PuzzleFormatError):
        parse_puzzle(SAMPLE_PUZZLE[:80])
    assert calls == []


def test_long_input_is_rejected():
    with pytest.raises(ValueError):
        parse_puzzle(SAMPLE_PUZZLE + "1")


def test_two_fives_in_a_row_is_contradictory():
    puzzle = "55" + "." * 79
    grid = parse_puzzle(puzzle)
    assert grid.is_contradictory()
    assert any(grid.count(cell) == 0 for cell in ALL_CELLS)
