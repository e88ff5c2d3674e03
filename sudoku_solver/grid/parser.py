# -*- coding: utf-8 -*-
"""
問題文字列を候補グリッドに変換するモジュールです。

主な役割:
- "0"〜"9" と "." 以外の文字を捨てて 81 文字に正規化
- ヒント数字を行優先の順に set_value して、そのたびに伝播
"""

from __future__ import annotations

import re
from typing import List

from ..config import BLANK_CHARS, GRID_SIZE
from ..csp.propagation import eliminate_all, set_value
from ..errors import PuzzleFormatError
from ..logging_utils import get_logger
from ..types import to_index
from .candidates import CandidateGrid, NUM_CELLS

# 問題として意味を持つ文字以外をまとめて消すための正規表現
NOISE_RE = re.compile(r"[^0-9.]")

logger = get_logger()


def normalize_puzzle(text: str) -> str:
    """
    問題文字列から "0"〜"9" と "." だけを残します。

    例:
    - "53..7....\\n6..195..." -> "53..7....6..195..."
    - "4 . . | . 8 ." -> "4...8."
    """
    return NOISE_RE.sub("", text)


def parse_givens(text: str) -> List[int]:
    """
    問題文字列を 81 個の数字（0 = 空き、1〜9 = ヒント）に変換します。

    正規化後に 81 文字でなければ PuzzleFormatError を送出します。
    """
    cleaned = normalize_puzzle(text)
    if len(cleaned) != NUM_CELLS:
        raise PuzzleFormatError(
            f"puzzle must have {NUM_CELLS} cells after cleaning, got {len(cleaned)}"
        )
    return [0 if ch in BLANK_CHARS else int(ch) for ch in cleaned]


def parse_puzzle(text: str) -> CandidateGrid:
    """
    問題文字列から候補グリッドを作ります。

    ヒントは行優先の順に 1 つずつ set_value し、そのたびに伝播を完了させます。
    それまでのヒントと衝突して数字がすでに除外されているマスは、
    候補を全部外して「矛盾した盤面」として返します（例外にはしません）。
    """
    givens = parse_givens(text)
    grid = CandidateGrid()

    for i, digit in enumerate(givens):
        if not digit:
            continue
        cell = divmod(i, GRID_SIZE)
        index = to_index(digit)
        if grid.has_candidate(cell, index):
            set_value(grid, cell, index)
        else:
            logger.warning(
                "Given %d at r%dc%d conflicts with earlier givens; grid is contradictory.",
                digit, cell[0] + 1, cell[1] + 1,
            )
            eliminate_all(grid, cell)

    return grid

