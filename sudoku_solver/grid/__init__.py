# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- topology.py   : ユニット・ピアの対応表
- candidates.py : 候補グリッド（候補ビット集合 + 候補数キャッシュ）
- parser.py     : 問題文字列から候補グリッドへの変換
"""
