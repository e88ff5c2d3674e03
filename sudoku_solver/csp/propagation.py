# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

ある数字をマスの候補から外す（eliminate）たびに、次の 2 つのルールを
その場で再帰的に適用します。

ルール 1（naked single）
    外した結果、そのマスの候補が 1 個になったら、その数字を
    ピア 20 マスすべてから外す。
ルール 2（hidden single）
    外した数字が、そのマスを含むユニットの中で「候補として残っているマスが
    1 か所だけ」になり、そのマスがまだ未確定なら、そこに set_value する。

どちらのルールも 1 回の削除ごとに評価し、まとめ処理はしません。
削除のたびに盤面全体の候補総数が必ず 1 以上減るので、再帰は必ず止まります。

矛盾（どこかのマスの候補が 0 個）はここでは通知しません。
同じユニットに同じ数字が 2 つ入るような状態は、必ずどこかのマスの候補を
0 個にするので、探索側で候補数 0 を見つけるだけで十分です。
"""

from __future__ import annotations

from ..errors import InvalidOperationError
from ..grid.candidates import CandidateGrid
from ..grid.topology import peers_of, units_of
from ..types import CellCoord, to_digit


def set_value(grid: CandidateGrid, cell: CellCoord, digit: int) -> None:
    """
    cell を digit に確定し、その結果を伝播します。

    digit が cell の候補に残っていない場合は、呼び出し側の推論が
    どこかで矛盾しているので InvalidOperationError を送出します。
    """
    if not grid.has_candidate(cell, digit):
        raise InvalidOperationError(
            f"set_value({cell}, {to_digit(digit)}): digit already excluded"
        )
    grid.fix_candidate(cell, digit)
    restrain(grid, cell, digit)


def restrain(grid: CandidateGrid, cell: CellCoord, digit: int) -> None:
    """
    cell の行・列・ブロックそれぞれから digit を外します。

    ブロックは行・列と重なるマスを含みますが、eliminate は冪等なので
    2 回目は何も起きません。
    """
    for unit in units_of(cell):
        for other in unit:
            if other != cell:
                eliminate(grid, other, digit)


def eliminate(grid: CandidateGrid, cell: CellCoord, digit: int) -> None:
    """
    cell の候補から digit を外し、ルール 1・ルール 2 を適用します。

    すでに候補でなければ何もしません（冪等）。
    """
    if not grid.remove_candidate(cell, digit):
        return

    # ルール 1: 候補が 1 個になったら、その数字をピアから外す
    if grid.count(cell) == 1:
        resolved = grid.value(cell)
        for peer in peers_of(cell):
            eliminate(grid, peer, resolved)

    # ルール 2: ユニット内で digit を置ける場所が 1 か所だけになったら確定
    for unit in units_of(cell):
        place = None
        places = 0
        for other in unit:
            if grid.has_candidate(other, digit):
                places += 1
                place = other
                if places > 1:
                    break
        if places == 1 and grid.count(place) > 1:
            set_value(grid, place, digit)


def eliminate_all(grid: CandidateGrid, cell: CellCoord) -> None:
    """
    cell に残っている候補をすべて外します（最後は候補 0 個 = 矛盾）。

    ヒント同士が衝突している問題を、黙って受け入れずに
    「矛盾した盤面」として残すために使います。
    """
    for digit in grid.possibles(cell):
        eliminate(grid, cell, digit)
