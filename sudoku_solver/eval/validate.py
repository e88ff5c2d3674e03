# sudoku_solver/eval/validate.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import numpy as np

from ..grid.candidates import CandidateGrid
from ..grid.topology import TOPOLOGY
from ..postprocess.render_result import to_array

DIGITS = np.arange(1, 10)


def validate(grid: CandidateGrid) -> bool:
    """
    解けた盤面の最終確認を行う。

    - 全マスが確定している（候補 1 個）
    - 27 ユニットすべてに 1〜9 がちょうど 1 回ずつ入っている

    探索の一部ではなく、結果が正しいかを外から確かめるためのもの。
    """
    if not grid.is_solved():
        return False

    board = to_array(grid)
    for unit in TOPOLOGY.unit_list:
        rows, cols = zip(*unit)
        values = np.sort(board[list(rows), list(cols)])
        if not np.array_equal(values, DIGITS):
            return False
    return True
