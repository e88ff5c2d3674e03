# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ..config import BOX_SIZE, CONTRADICTION_MARK, GRID_SIZE, UNRESOLVED_MARK
from ..grid.candidates import CandidateGrid
from ..types import SolveResult, to_digit

# ブロック境界の横線
SEPARATOR_LINE = " ------+-------+------"


def to_array(grid: CandidateGrid) -> np.ndarray:
    """
    盤面を 9x9 の整数配列にします。

    確定したマスは 1〜9、未確定・矛盾したマスは 0 になります。
    """
    out = np.zeros((GRID_SIZE, GRID_SIZE), dtype=int)
    for cell, n in grid.counts():
        if n == 1:
            out[cell] = to_digit(grid.value(cell))
    return out


def cell_symbol(grid: CandidateGrid, cell) -> str:
    """1 マスぶんの表示文字（数字 / "." / "?"）。"""
    n = grid.count(cell)
    if n == 0:
        return CONTRADICTION_MARK
    if n > 1:
        return UNRESOLVED_MARK
    return str(to_digit(grid.value(cell)))


def to_frame(grid: CandidateGrid) -> pd.DataFrame:
    """表示文字を並べた 9x9 の DataFrame（行・列ラベルは 1 始まり）。"""
    symbols = np.empty((GRID_SIZE, GRID_SIZE), dtype=object)
    for cell, _ in grid.counts():
        symbols[cell] = cell_symbol(grid, cell)
    labels = list(range(1, GRID_SIZE + 1))
    return pd.DataFrame(symbols, index=labels, columns=labels)


def render_grid(grid: CandidateGrid) -> str:
    """
    盤面を 9 行のテキストにします。

    例::

         4 8 3 | 9 2 1 | 6 5 7
         ...
         ------+-------+------
    """
    frame = to_frame(grid)
    lines: List[str] = []
    for r in range(GRID_SIZE):
        if r and r % BOX_SIZE == 0:
            lines.append(SEPARATOR_LINE)
        parts: List[str] = []
        for c in range(GRID_SIZE):
            if c and c % BOX_SIZE == 0:
                parts.append(" |")
            parts.append(f" {frame.iat[r, c]}")
        lines.append("".join(parts))
    return "\n".join(lines)


def format_line(grid: CandidateGrid) -> str:
    """盤面を 81 文字の 1 行にします（記号は render_grid と同じ）。"""
    return "".join(to_frame(grid).values.ravel().tolist())


def build_result(result: SolveResult) -> Dict[str, Any]:
    """
    SolveResult から JSON にそのまま出せる dict を作ります。
    """
    out: Dict[str, Any] = {
        "status": result.status,
        "solved_board": None,
        "solution": None,
        "nodes_visited": result.nodes_visited,
        "guesses": result.guesses,
        "duration_ms": result.duration_ms,
    }
    if result.grid is not None:
        out["solved_board"] = to_array(result.grid).tolist()  # ★ ndarray を返さない
        out["solution"] = format_line(result.grid)
    return out
