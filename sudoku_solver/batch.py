# -*- coding: utf-8 -*-
"""
複数の問題をまとめて解くモジュールです。

1 問ごとに parse → solve → validate → 表示 を行い、
解けなかった問題の番号を集計します。
解けたはずの盤面が validate を通らないのはソルバのバグなので、
その場合だけは RuntimeError で止めます。
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from .config import MAX_SEARCH_NODES
from .csp.search import solve
from .eval.validate import validate
from .grid.parser import parse_puzzle
from .logging_utils import get_logger
from .postprocess.render_result import format_line, render_grid

logger = get_logger()


@dataclass
class PuzzleRecord:
    """1 問ぶんの結果。puzzle_id は 1 始まり。"""

    puzzle_id: int
    puzzle: str
    status: str
    solution: Optional[str]
    nodes_visited: int
    guesses: int
    duration_ms: int


@dataclass
class BatchReport:
    records: List[PuzzleRecord] = field(default_factory=list)
    elapsed_ms: int = 0

    @property
    def failures(self) -> List[int]:
        return [r.puzzle_id for r in self.records if r.solution is None]

    @property
    def solved_count(self) -> int:
        return len(self.records) - len(self.failures)

    def to_frame(self) -> pd.DataFrame:
        columns = [
            "puzzle_id", "puzzle", "status", "solution",
            "nodes_visited", "guesses", "duration_ms",
        ]
        return pd.DataFrame([vars(r) for r in self.records], columns=columns)

    def write_csv(self, path: str | Path) -> Path:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        self.to_frame().to_csv(p, index=False, encoding="utf-8")
        return p


def run_batch(
    puzzles: Iterable[str],
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
) -> BatchReport:
    """
    問題を順に解き、結果を BatchReport にまとめて返します。

    形式が壊れた問題（PuzzleFormatError）はそのまま送出します。
    """
    report = BatchReport()
    start = time.time()

    for puzzle_id, puzzle in enumerate(puzzles, start=1):
        grid = parse_puzzle(puzzle)
        logger.info("%d. New puzzle...\n%s", puzzle_id, render_grid(grid))

        result = solve(grid, max_nodes=max_nodes)

        solution: Optional[str] = None
        if result.grid is None:
            logger.info("%d. No solution found!", puzzle_id)
        elif not validate(result.grid):
            raise RuntimeError(f"Solution for puzzle {puzzle_id} failed validation")
        else:
            solution = format_line(result.grid)
            logger.info(
                "%d. Solution found (nodes=%d, guesses=%d)...\n%s",
                puzzle_id, result.nodes_visited, result.guesses,
                render_grid(result.grid),
            )

        report.records.append(
            PuzzleRecord(
                puzzle_id=puzzle_id,
                puzzle=puzzle,
                status=result.status,
                solution=solution,
                nodes_visited=result.nodes_visited,
                guesses=result.guesses,
                duration_ms=result.duration_ms,
            )
        )

    report.elapsed_ms = int((time.time() - start) * 1000)

    if report.failures:
        logger.info("Failures: %s", report.failures)
    logger.info(
        "Solved %d/%d puzzles. Elapsed time: %d ms",
        report.solved_count, len(report.records), report.elapsed_ms,
    )
    return report
