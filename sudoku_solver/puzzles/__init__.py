# -*- coding: utf-8 -*-
"""
sudoku_solver.puzzles パッケージ

問題リストの読み込みをまとめたサブパッケージです。
"""
