# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

制約充足（制約伝播 + バックトラック探索）に関する処理をまとめています。
- propagation.py : set_value / eliminate / restrain による制約伝播
- search.py      : MRV で分岐するマスを選ぶ深さ優先探索
"""
