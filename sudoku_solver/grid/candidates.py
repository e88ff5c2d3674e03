# -*- coding: utf-8 -*-
"""
候補グリッド（各マスに残っている候補数字の集合）を表すモジュールです。

各マスの候補は 9 ビットの整数（ビット n が立っていれば候補インデックス n が可能）
で持ち、それとは別に「残り候補数」をマスごとにキャッシュしています。
候補数は削除のたびに 1 ずつ減らすだけで、伝播中に数え直すことはしません。

盤面の書き換えは csp.propagation の関数だけが行います。
ここにあるのは読み出しと、伝播側から呼ぶ最小限の書き換えだけです。
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ..config import GRID_SIZE
from ..errors import InvalidOperationError
from ..types import CellCoord

NUM_CELLS = GRID_SIZE * GRID_SIZE
FULL_MASK = (1 << GRID_SIZE) - 1


def _index(cell: CellCoord) -> int:
    r, c = cell
    return r * GRID_SIZE + c


class CandidateGrid:
    """
    81 マスぶんの候補集合と候補数キャッシュ。

    作成直後は全マスで 9 個すべての数字が候補です。
    copy() は値としての複製で、複製元と状態を共有しません。
    """

    __slots__ = ("_masks", "_counts")

    def __init__(self) -> None:
        self._masks: List[int] = [FULL_MASK] * NUM_CELLS
        self._counts: List[int] = [GRID_SIZE] * NUM_CELLS

    # ---- 読み出し ----------------------------------------------------------

    def possibles(self, cell: CellCoord) -> List[int]:
        """残っている候補インデックスを小さい順に返します。空なら矛盾。"""
        mask = self._masks[_index(cell)]
        return [n for n in range(GRID_SIZE) if mask >> n & 1]

    def count(self, cell: CellCoord) -> int:
        return self._counts[_index(cell)]

    def has_candidate(self, cell: CellCoord, digit: int) -> bool:
        return bool(self._masks[_index(cell)] >> digit & 1)

    def is_resolved(self, cell: CellCoord) -> bool:
        return self._counts[_index(cell)] == 1

    def value(self, cell: CellCoord) -> int:
        """
        確定したマスの候補インデックスを返します。

        候補数が 1 でないマスで呼ぶのは呼び出し側のバグなので、
        InvalidOperationError を送出します。
        """
        i = _index(cell)
        if self._counts[i] != 1:
            raise InvalidOperationError(
                f"value() on cell {cell} with {self._counts[i]} candidates"
            )
        return self._masks[i].bit_length() - 1

    def is_contradictory(self) -> bool:
        return 0 in self._counts

    def is_solved(self) -> bool:
        return all(n == 1 for n in self._counts)

    def counts(self) -> Iterator[Tuple[CellCoord, int]]:
        """(マス, 候補数) を行優先の順に返します。"""
        for i, n in enumerate(self._counts):
            yield divmod(i, GRID_SIZE), n

    # ---- 複製 --------------------------------------------------------------

    def copy(self) -> "CandidateGrid":
        new = CandidateGrid.__new__(CandidateGrid)
        new._masks = list(self._masks)
        new._counts = list(self._counts)
        return new

    # ---- 伝播側から使う書き換え ---------------------------------------------

    def remove_candidate(self, cell: CellCoord, digit: int) -> bool:
        """
        候補から digit を外します。

        すでに候補でなければ何もせず False、外した場合は True を返します。
        """
        i = _index(cell)
        bit = 1 << digit
        if not self._masks[i] & bit:
            return False
        self._masks[i] &= ~bit
        self._counts[i] -= 1
        return True

    def fix_candidate(self, cell: CellCoord, digit: int) -> None:
        """マスの候補を digit ひとつだけにします（前提チェックは呼び出し側）。"""
        i = _index(cell)
        self._masks[i] = 1 << digit
        self._counts[i] = 1

    # ---- その他 ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateGrid):
            return NotImplemented
        return self._masks == other._masks and self._counts == other._counts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        resolved = sum(1 for n in self._counts if n == 1)
        return f"CandidateGrid(resolved={resolved}/{NUM_CELLS})"
