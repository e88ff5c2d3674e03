# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 盤面を走査し、候補 0 個のマスがあれば失敗（矛盾）
2. すべてのマスが候補 1 個なら、その盤面が解
3. それ以外は、候補数が最小（ただし 2 以上）のマスを選ぶ（MRV）
4. そのマスの候補を小さい順に、盤面のコピーへ set_value して再帰
5. 最初に解けた枝の結果を返し、全部失敗なら失敗を返す

失敗した枝はコピーごと捨てるだけなので、取り消し処理はありません。
探索ノード数などの統計は、ルート呼び出しが作る SearchContext に集計します。
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from ..config import LOG_PROGRESS_EVERY, MAX_SEARCH_NODES, SEARCH_DEBUG_TRACE
from ..errors import SearchLimitExceeded
from ..grid.candidates import CandidateGrid
from ..grid.topology import ALL_CELLS
from ..logging_utils import get_logger, get_search_debug_logger
from ..types import (
    STATUS_NO_SOLUTION,
    STATUS_SOLVED,
    CellCoord,
    SolveResult,
    to_digit,
)
from .propagation import set_value

logger = get_logger()


@dataclass
class SearchContext:
    """
    1 回の solve() の中で、すべての枝が共有する情報をまとめたクラスです。
    """

    max_nodes: Optional[int] = None
    trace: bool = False

    nodes_visited: int = 0
    guesses: int = 0
    max_depth: int = 0


def choose_branch_cell(grid: CandidateGrid) -> Optional[CellCoord]:
    """
    次に分岐するマスを選びます。

    候補数が 2 以上のマスのうち、候補数が最小のもの（同数なら走査順で先）。
    候補数 0 のマスがある、またはすべて確定している場合は None。
    """
    best: Optional[CellCoord] = None
    best_count = 10
    for cell, n in grid.counts():
        if n == 0:
            return None
        if 1 < n < best_count:
            best = cell
            best_count = n
            if n == 2:
                # これより小さい分岐は無い
                break
    return best


def search(
    grid: CandidateGrid, ctx: SearchContext, depth: int = 0
) -> Optional[CandidateGrid]:
    """
    grid から解を探します。解けた盤面、または None を返します。

    grid 自体は書き換えません（分岐はすべてコピー上で行う）。
    """
    if ctx.max_nodes is not None and ctx.nodes_visited >= ctx.max_nodes:
        raise SearchLimitExceeded(ctx.max_nodes)

    ctx.nodes_visited += 1
    ctx.max_depth = max(ctx.max_depth, depth)

    if ctx.nodes_visited % LOG_PROGRESS_EVERY == 0:
        logger.info(
            "[search] nodes_visited = %d, guesses = %d, depth = %d",
            ctx.nodes_visited,
            ctx.guesses,
            depth,
        )

    if grid.is_contradictory():
        return None
    if grid.is_solved():
        return grid

    cell = choose_branch_cell(grid)
    assert cell is not None

    for digit in grid.possibles(cell):
        ctx.guesses += 1
        trial = grid.copy()
        set_value(trial, cell, digit)
        if ctx.trace:
            get_search_debug_logger().debug(
                "Guess: r%dc%d = %d (depth=%d)",
                cell[0] + 1, cell[1] + 1, to_digit(digit), depth,
            )

        result = search(trial, ctx, depth + 1)
        if result is not None:
            return result

        if ctx.trace:
            get_search_debug_logger().debug(
                "Backtrack: r%dc%d != %d", cell[0] + 1, cell[1] + 1, to_digit(digit)
            )

    return None


def solve(
    grid: CandidateGrid,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
    trace: bool = SEARCH_DEBUG_TRACE,
) -> SolveResult:
    """
    探索のエントリポイント。

    Parameters
    ----------
    grid : CandidateGrid
        パース済みの盤面。呼び出し側の盤面は書き換えません。
    max_nodes : int or None
        探索ノード数の上限。超えたら SearchLimitExceeded。
    trace : bool
        仮置き・バックトラックをデバッグログファイルに書き出すかどうか。
    """
    start = time.time()
    ctx = SearchContext(max_nodes=max_nodes, trace=trace)

    solution = search(grid.copy(), ctx)

    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        "[search] end in %d ms; nodes_visited = %d, guesses = %d, max_depth = %d",
        duration_ms,
        ctx.nodes_visited,
        ctx.guesses,
        ctx.max_depth,
    )

    return SolveResult(
        status=STATUS_SOLVED if solution is not None else STATUS_NO_SOLUTION,
        grid=solution,
        nodes_visited=ctx.nodes_visited,
        guesses=ctx.guesses,
        duration_ms=duration_ms,
    )
