# tests/test_loader_batch.py
import pandas as pd
import pytest

from sudoku_solver.batch import run_batch
from sudoku_solver.errors import PuzzleFormatError
from sudoku_solver.puzzles.loader import load_puzzle_frame, load_puzzles

from conftest import EASY_PUZZLE, EASY_SOLUTION, SAMPLE_PUZZLE


def test_load_text_skips_short_lines(tmp_path):
    path = tmp_path / "puzzles.txt"
    path.write_text(f"# header\n\n{SAMPLE_PUZZLE}\n{EASY_PUZZLE}\n", encoding="utf-8")
    assert load_puzzles(path) == [SAMPLE_PUZZLE, EASY_PUZZLE]


def test_load_csv_drops_duplicates(tmp_path):
    path = tmp_path / "puzzles.csv"
    pd.DataFrame(
        {"puzzle": [SAMPLE_PUZZLE, EASY_PUZZLE, SAMPLE_PUZZLE], "source": ["a", "b", "c"]}
    ).to_csv(path, index=False)
    df = load_puzzle_frame(path)
    assert list(df.index) == [0, 1]
    assert load_puzzles(path) == [SAMPLE_PUZZLE, EASY_PUZZLE]


def test_load_csv_requires_puzzle_column(tmp_path):
    path = tmp_path / "bad.csv"
    pd.DataFrame({"grid": [SAMPLE_PUZZLE]}).to_csv(path, index=False)
    with pytest.raises(ValueError):
        load_puzzles(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(tmp_path / "nope.txt")
    with pytest.raises(FileNotFoundError):
        load_puzzles(tmp_path / "nope.csv")


def test_batch_collects_failures(tmp_path):
    report = run_batch([EASY_PUZZLE, "55" + "." * 79, SAMPLE_PUZZLE])
    assert report.failures == [2]
    assert report.solved_count == 2
    assert report.records[0].solution == EASY_SOLUTION
    assert report.records[1].status == "no-solution"

    frame = report.to_frame()
    assert list(frame["puzzle_id"]) == [1, 2, 3]

    out = report.write_csv(tmp_path / "out" / "report.csv")
    assert pd.read_csv(out)["status"].tolist() == ["solved", "no-solution", "solved"]


def test_batch_propagates_format_errors():
    with pytest.raises(PuzzleFormatError):
        run_batch(["123"])
