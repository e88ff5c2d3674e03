# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 問題ファイルの場所
- 探索ノード数の上限
- 表示記号
- ログの出し方
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import List, Optional

# ==== 問題ファイル関連 =====================================================

# 1行1問のテキスト、または "puzzle" 列を持つ CSV
DEFAULT_PUZZLES_PATH: str = "data/puzzles.txt"

# CSV で読み込む場合の列名
PUZZLE_COLUMN: str = "puzzle"

# ファイル指定が無いときに解く問題
DEFAULT_PUZZLES: List[str] = [
    "..5.2.6...9...4.1.2..5....3..6.3.......8.1.......9.4..3....2..7.1.9...5...4.6.8..",
    "003020600900305001001806400008102900700000008006708200002609500800203009005010300",
    "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......",
]

# ==== 盤面関連 =============================================================

# 盤面の一辺と 3x3 ブロックの一辺
GRID_SIZE: int = 9
BOX_SIZE: int = 3

# 空きマスとして扱う文字
BLANK_CHARS: str = ".0"

# ==== 表示関連 =============================================================

# 候補が 2 個以上残っているマス
UNRESOLVED_MARK: str = "."

# 候補が 0 個になった（矛盾した）マス
CONTRADICTION_MARK: str = "?"

# ==== 探索関連 =============================================================

# 探索ノード数の上限。None なら無制限。
# 上限に達すると SearchLimitExceeded を送出します。
MAX_SEARCH_NODES: Optional[int] = None

# 何ノードごとに進捗ログを出すか
LOG_PROGRESS_EVERY: int = 1000

# 仮置き・バックトラックのトレースをファイルに出すかどうか
SEARCH_DEBUG_TRACE: bool = False

# ==== ログ関連 =============================================================

LOG_DIR: str = "logs"
SEARCH_DEBUG_LOG_FILE: str = "search_debug.log"
