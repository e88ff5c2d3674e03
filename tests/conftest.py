# tests/conftest.py
import pytest

from sudoku_solver.grid.parser import parse_puzzle

# 伝播だけでほぼ解ける問題
SAMPLE_PUZZLE = "..5.2.6...9...4.1.2..5....3..6.3.......8.1.......9.4..3....2..7.1.9...5...4.6.8.."

EASY_PUZZLE = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
EASY_SOLUTION = "483921657967345821251876493548132976729564138136798245372689514814253769695417382"

HARD_PUZZLE = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"


@pytest.fixture
def sample_grid():
    return parse_puzzle(SAMPLE_PUZZLE)


@pytest.fixture
def easy_grid():
    return parse_puzzle(EASY_PUZZLE)


def assert_consistent_with_givens(puzzle: str, solution: str) -> None:
    for given, solved in zip(puzzle, solution):
        if given not in ".0":
            assert given == solved
