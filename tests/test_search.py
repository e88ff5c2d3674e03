# tests/test_search.py
import pytest

from sudoku_solver.csp.propagation import eliminate_all
from sudoku_solver.csp.search import SearchContext, choose_branch_cell, search, solve
from sudoku_solver.errors import SearchLimitExceeded
from sudoku_solver.eval.validate import validate
from sudoku_solver.grid.candidates import CandidateGrid
from sudoku_solver.grid.parser import parse_puzzle
from sudoku_solver.grid.topology import ALL_CELLS
from sudoku_solver.postprocess.render_result import format_line

from conftest import (
    EASY_SOLUTION,
    HARD_PUZZLE,
    SAMPLE_PUZZLE,
    assert_consistent_with_givens,
)


def test_sample_puzzle_is_solved(sample_grid):
    result = solve(sample_grid)
    assert result.solved
    assert validate(result.grid)
    assert_consistent_with_givens(SAMPLE_PUZZLE, format_line(result.grid))


def test_easy_puzzle_gives_known_solution(easy_grid):
    result = solve(easy_grid)
    assert result.solved
    assert format_line(result.grid) == EASY_SOLUTION


def test_hard_puzzle_needs_search_and_is_legal():
    result = solve(parse_puzzle(HARD_PUZZLE))
    assert result.solved
    assert validate(result.grid)
    assert result.nodes_visited >= 1
    assert_consistent_with_givens(HARD_PUZZLE, format_line(result.grid))


def test_solve_does_not_touch_input_grid():
    grid = parse_puzzle(HARD_PUZZLE)
    before = grid.copy()
    solve(grid)
    assert grid == before


def test_contradictory_grid_fails_without_branching():
    grid = CandidateGrid()
    eliminate_all(grid, (0, 0))
    result = solve(grid)
    assert not result.solved
    assert result.grid is None
    assert result.nodes_visited == 1
    assert result.guesses == 0


def test_duplicate_givens_have_no_solution():
    result = solve(parse_puzzle("55" + "." * 79))
    assert result.status == "no-solution"
    assert result.guesses == 0


def test_solved_grid_round_trip_needs_no_guesses():
    grid = parse_puzzle(EASY_SOLUTION)
    assert validate(grid)
    result = solve(grid)
    assert result.solved
    assert result.guesses == 0
    assert format_line(result.grid) == EASY_SOLUTION


def test_branch_cell_has_fewest_candidates():
    grid = parse_puzzle(HARD_PUZZLE)
    cell = choose_branch_cell(grid)
    assert cell is not None
    counts = [grid.count(c) for c in ALL_CELLS if grid.count(c) > 1]
    assert grid.count(cell) == min(counts)
    # 同数なら走査順で最初のマス
    first = next(c for c in ALL_CELLS if grid.count(c) == min(counts))
    assert cell == first


def test_branch_cell_is_none_when_solved_or_contradictory():
    assert choose_branch_cell(parse_puzzle(EASY_SOLUTION)) is None
    broken = CandidateGrid()
    eliminate_all(broken, (8, 8))
    assert choose_branch_cell(broken) is None


def test_step_counter_is_per_context():
    ctx = SearchContext()
    search(parse_puzzle(HARD_PUZZLE), ctx)
    first = ctx.nodes_visited
    assert first >= 1

    other = SearchContext()
    search(parse_puzzle(HARD_PUZZLE), other)
    assert other.nodes_visited == first


def test_node_budget_aborts_search():
    with pytest.raises(SearchLimitExceeded):
        solve(CandidateGrid(), max_nodes=1)


def test_empty_grid_is_solvable():
    result = solve(CandidateGrid())
    assert result.solved
    assert validate(result.grid)


def test_trace_writes_guesses_to_debug_log(tmp_path, monkeypatch):
    import logging

    monkeypatch.chdir(tmp_path)
    debug_logger = logging.getLogger("sudoku_solver.search_debug")
    for handler in list(debug_logger.handlers):
        debug_logger.removeHandler(handler)
        handler.close()

    result = solve(CandidateGrid(), trace=True)
    assert result.guesses >= 1
    for handler in debug_logger.handlers:
        handler.flush()

    text = (tmp_path / "logs" / "search_debug.log").read_text(encoding="utf-8")
    assert "Guess: r1c1" in text

    for handler in list(debug_logger.handlers):
        debug_logger.removeHandler(handler)
        handler.close()
