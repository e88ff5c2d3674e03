# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

内部では数字を 0..8 の「候補インデックス」で扱います。
外部表記の 9 はインデックス 0、1..8 はそのまま 1..8 に対応します。
入出力は必ず 1..9 で行い、変換は to_index / to_digit を通します。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid.candidates import CandidateGrid

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]

# ユニット（行・列・ブロックのいずれか）を構成する 9 マス
Unit = Tuple[CellCoord, ...]

STATUS_SOLVED = "solved"
STATUS_NO_SOLUTION = "no-solution"


def to_index(digit: int) -> int:
    """外部表記の数字 (1..9) を候補インデックス (0..8) に変換します。"""
    if not 1 <= digit <= 9:
        raise ValueError(f"digit out of range: {digit}")
    return digit % 9


def to_digit(index: int) -> int:
    """候補インデックス (0..8) を外部表記の数字 (1..9) に変換します。"""
    if not 0 <= index <= 8:
        raise ValueError(f"candidate index out of range: {index}")
    return index if index else 9


@dataclass
class SolveResult:
    """
    solve() の結果を表すクラスです。

    Attributes
    ----------
    status : str
        "solved" または "no-solution"。
    grid : CandidateGrid or None
        解けた場合の盤面（全マス確定済み）。解なしなら None。
    nodes_visited : int
        探索関数が呼ばれた回数（統計用）。
    guesses : int
        分岐で仮置きした回数。伝播だけで解けた場合は 0。
    duration_ms : int
        solve() にかかった時間（ミリ秒）。
    """

    status: str
    grid: Optional["CandidateGrid"]
    nodes_visited: int = 0
    guesses: int = 0
    duration_ms: int = 0

    @property
    def solved(self) -> bool:
        return self.status == STATUS_SOLVED
