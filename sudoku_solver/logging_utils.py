# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

- パッケージ共通のロガーは標準出力（コンソール）に INFO 以上を出します。
- 探索の詳細トレース（仮置き・バックトラック）は件数が多くなるため、
  別ロガーでファイルにだけ書き出します。
"""

from __future__ import annotations

import logging
import os

from .config import LOG_DIR, SEARCH_DEBUG_LOG_FILE

# sudoku_solver パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_solver"


def get_logger() -> logging.Logger:
    """
    sudoku_solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def get_search_debug_logger() -> logging.Logger:
    logger = logging.getLogger("sudoku_solver.search_debug")

    if logger.handlers:
        return logger  # すでに初期化済み

    logger.setLevel(logging.DEBUG)

    os.makedirs(LOG_DIR, exist_ok=True)
    log_file = os.path.join(LOG_DIR, SEARCH_DEBUG_LOG_FILE)

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh.setFormatter(formatter)

    logger.addHandler(fh)

    # 親ロガーへの伝播禁止（stdout に出さない）
    logger.propagate = False

    return logger
