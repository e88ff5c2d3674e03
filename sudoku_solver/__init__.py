# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

api_proto/local_api.py などから:

    from sudoku_solver import solve_puzzle

と呼び出されることを想定しています。

ここでは、問題文字列を受け取り、
1. 文字列のパース（ヒントを置くたびに制約伝播）
2. バックトラック探索
3. 解の最終確認
4. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .config import MAX_SEARCH_NODES
from .csp.search import solve
from .eval.validate import validate
from .grid.candidates import CandidateGrid
from .grid.parser import parse_puzzle
from .logging_utils import get_logger
from .postprocess.render_result import build_result, format_line, render_grid
from .types import SolveResult

__all__ = [
    "CandidateGrid",
    "SolveResult",
    "build_result",
    "format_line",
    "parse_puzzle",
    "render_grid",
    "solve",
    "solve_puzzle",
    "validate",
]

logger = get_logger()


def solve_puzzle(
    text: str,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
) -> Dict[str, Any]:
    """
    数独を解くメイン関数。

    Parameters
    ----------
    text : str
        81 マスぶんの問題文字列（"." または "0" が空き）。
    max_nodes : int or None
        探索ノード数の上限。

    Returns
    -------
    dict
        build_result() の形式（status, solved_board, solution, ...）。
    """
    logger.info("=== solve_puzzle() START ===")

    grid = parse_puzzle(text)
    result = solve(grid, max_nodes=max_nodes)

    if result.grid is not None and not validate(result.grid):
        raise RuntimeError("Solution failed validation")

    logger.info("=== solve_puzzle() END (%s) ===", result.status)
    return build_result(result)
