# -*- coding: utf-8 -*-
"""
ユニット（行・列・3x3 ブロック）とピアの対応表を作るモジュールです。

- ユニットは全部で 27 個（行 9 + 列 9 + ブロック 9）
- 各マスはちょうど 3 つのユニットに属する
- 各マスのピア（同じユニットに属する他のマス）はちょうど 20 個

表はモジュール読み込み時に 1 回だけ作成し、以後は読み取り専用です。
構築結果が上の条件を満たさない場合は、問題を解く前に TopologyError で止めます。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config import BOX_SIZE, GRID_SIZE
from ..errors import TopologyError
from ..types import CellCoord, Unit

# 全 81 マス（行優先の順）
ALL_CELLS: Tuple[CellCoord, ...] = tuple(
    (r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)
)


@dataclass(frozen=True)
class Topology:
    """
    盤面の構造を表す読み取り専用の表です。

    Attributes
    ----------
    unit_list : tuple of Unit
        27 個のユニット。行 → 列 → ブロックの順。
    units : dict[(row, col), tuple of Unit]
        マス → そのマスを含む 3 ユニット（行・列・ブロックの順）。
    peers : dict[(row, col), tuple of (row, col)]
        マス → ピア 20 マス。
    """

    unit_list: Tuple[Unit, ...]
    units: Dict[CellCoord, Tuple[Unit, ...]]
    peers: Dict[CellCoord, Tuple[CellCoord, ...]]


def row_unit(r: int) -> Unit:
    return tuple((r, c) for c in range(GRID_SIZE))


def col_unit(c: int) -> Unit:
    return tuple((r, c) for r in range(GRID_SIZE))


def box_unit(r: int, c: int) -> Unit:
    """(r, c) を含む 3x3 ブロックを返します。"""
    r0 = BOX_SIZE * (r // BOX_SIZE)
    c0 = BOX_SIZE * (c // BOX_SIZE)
    return tuple(
        (r0 + dr, c0 + dc) for dr in range(BOX_SIZE) for dc in range(BOX_SIZE)
    )


def build_topology() -> Topology:
    """ユニット一覧・マス→ユニット・マス→ピアの表を作ります。"""
    unit_list: List[Unit] = []
    unit_list.extend(row_unit(r) for r in range(GRID_SIZE))
    unit_list.extend(col_unit(c) for c in range(GRID_SIZE))
    for r0 in range(0, GRID_SIZE, BOX_SIZE):
        for c0 in range(0, GRID_SIZE, BOX_SIZE):
            unit_list.append(box_unit(r0, c0))

    units: Dict[CellCoord, Tuple[Unit, ...]] = {}
    peers: Dict[CellCoord, Tuple[CellCoord, ...]] = {}

    for cell in ALL_CELLS:
        cell_units = tuple(u for u in unit_list if cell in u)
        units[cell] = cell_units

        # ユニット順・マス順を保ったまま重複を除く
        seen: Dict[CellCoord, None] = {}
        for u in cell_units:
            for other in u:
                if other != cell:
                    seen.setdefault(other, None)
        peers[cell] = tuple(seen)

    return Topology(unit_list=tuple(unit_list), units=units, peers=peers)


def verify_topology(topology: Topology) -> None:
    """
    表の件数を検査し、おかしければ TopologyError を送出します。
    """
    if len(ALL_CELLS) != GRID_SIZE * GRID_SIZE:
        raise TopologyError(f"expected 81 cells, got {len(ALL_CELLS)}")

    if len(topology.unit_list) != 3 * GRID_SIZE:
        raise TopologyError(f"expected 27 units, got {len(topology.unit_list)}")

    for unit in topology.unit_list:
        if len(unit) != GRID_SIZE or len(set(unit)) != GRID_SIZE:
            raise TopologyError(f"unit of wrong size: {unit}")

    for cell in ALL_CELLS:
        cell_units = topology.units.get(cell, ())
        if len(cell_units) != 3:
            raise TopologyError(f"cell {cell} is in {len(cell_units)} units")
        cell_peers = topology.peers.get(cell, ())
        if len(cell_peers) != 20:
            raise TopologyError(f"cell {cell} has {len(cell_peers)} peers")
        if cell in cell_peers:
            raise TopologyError(f"cell {cell} lists itself as a peer")


# 起動時に 1 回だけ作成して検査する
TOPOLOGY: Topology = build_topology()
verify_topology(TOPOLOGY)


def units_of(cell: CellCoord) -> Tuple[Unit, ...]:
    """cell を含む 3 ユニット（行・列・ブロックの順）。"""
    return TOPOLOGY.units[cell]


def peers_of(cell: CellCoord) -> Tuple[CellCoord, ...]:
    """cell のピア 20 マス。"""
    return TOPOLOGY.peers[cell]
