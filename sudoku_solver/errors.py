# -*- coding: utf-8 -*-
"""
sudoku_solver で送出する例外をまとめたモジュールです。

「解なし」は例外ではなく、SolveResult.status == "no-solution" として返します。
ここにあるのは、入力が壊れている・呼び出し側の前提が崩れている、
といった「続行してはいけない」状況だけです。
"""

from __future__ import annotations


class PuzzleFormatError(ValueError):
    """問題文字列を整形した結果が 81 文字にならない。"""


class InvalidOperationError(RuntimeError):
    """
    盤面 API の誤用。

    - すでに除外された数字を set_value しようとした
    - 未確定（候補数 != 1）のマスの value() を読もうとした
    """


class TopologyError(RuntimeError):
    """ユニット・ピア表の構築結果が不正（起動時に検出）。"""


class SearchLimitExceeded(RuntimeError):
    """探索ノード数が上限に達した。"""

    def __init__(self, max_nodes: int) -> None:
        super().__init__(f"search aborted after {max_nodes} nodes")
        self.max_nodes = max_nodes
