# -*- coding: utf-8 -*-
"""
問題リストを読み込むモジュールです。

対応形式：
- CSV  : "puzzle" 列に 1 問ずつ（他の列は無視）
- それ以外 : テキストファイル 1 行 1 問。81 文字未満の行は読み飛ばす

戻り値：
- 問題文字列のリスト（ファイル内の順）
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from ..config import PUZZLE_COLUMN
from ..grid.candidates import NUM_CELLS


def load_puzzle_frame(path: str | Path) -> pd.DataFrame:
    """
    CSV の問題リストを読み込み、重複を除いた DataFrame にして返します。

    Parameters
    ----------
    path : str or Path
        CSV ファイルのパス。

    Returns
    -------
    pandas.DataFrame
        'puzzle' 列を持つ DataFrame（index は 0 から振り直し済み）。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle CSV not found: {p}")

    df = pd.read_csv(p, encoding="utf-8-sig", dtype=str, keep_default_na=False)

    if PUZZLE_COLUMN not in df.columns:
        raise ValueError(f"Puzzle CSV must have a '{PUZZLE_COLUMN}' column.")

    df = df.drop_duplicates(subset=[PUZZLE_COLUMN], keep="first")
    df[PUZZLE_COLUMN] = df[PUZZLE_COLUMN].str.strip()

    # index を 0 から振り直しておくと扱いやすい
    df = df.reset_index(drop=True)

    return df


def load_puzzles(path: str | Path) -> List[str]:
    """
    問題リストを読み込みます。拡張子が .csv なら CSV、それ以外は 1 行 1 問。
    """
    p = Path(path)
    if p.suffix.lower() == ".csv":
        return load_puzzle_frame(p)[PUZZLE_COLUMN].tolist()

    if not p.exists():
        raise FileNotFoundError(f"Puzzle file not found: {p}")

    puzzles: List[str] = []
    for line in p.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        # 見出しや空行など、81 文字に満たない行は問題ではない
        if len(line) < NUM_CELLS:
            continue
        puzzles.append(line)
    return puzzles
