# -*- coding: utf-8 -*-
"""
コマンドラインから問題をまとめて解くためのエントリポイントです。

例:
    python -m sudoku_solver
    python -m sudoku_solver --file data/puzzles.txt --report outputs/report.csv
    python -m sudoku_solver "..5.2.6...9...4.1.2..5....3..6.3......."
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .batch import run_batch
from .config import DEFAULT_PUZZLES, MAX_SEARCH_NODES
from .errors import PuzzleFormatError, SearchLimitExceeded
from .logging_utils import get_logger
from .puzzles.loader import load_puzzles

logger = get_logger()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sudoku_solver",
        description="Solve 9x9 Sudoku puzzles with constraint propagation and backtracking.",
    )
    parser.add_argument("puzzles", nargs="*", help="Puzzle strings (81 cells, '.' or '0' for blanks).")
    parser.add_argument("--file", type=str, default=None, help="Puzzle list (.txt one per line, or .csv with a 'puzzle' column).")
    parser.add_argument("--max-nodes", type=int, default=MAX_SEARCH_NODES, help="Abort a puzzle's search after this many nodes.")
    parser.add_argument("--report", type=str, default=None, help="Write a per-puzzle CSV report here.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    puzzles: List[str] = list(args.puzzles)
    if args.file:
        puzzles.extend(load_puzzles(args.file))
    if not puzzles:
        puzzles = list(DEFAULT_PUZZLES)

    try:
        report = run_batch(puzzles, max_nodes=args.max_nodes)
    except (PuzzleFormatError, SearchLimitExceeded) as exc:
        logger.error("%s", exc)
        return 2

    if args.report:
        path = report.write_csv(args.report)
        logger.info("Report written to %s", path)

    return 1 if report.failures else 0


if __name__ == "__main__":
    sys.exit(main())
