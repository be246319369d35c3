# -*- coding: utf-8 -*-
"""
minefield で使う主なデータ構造（型）をまとめたモジュールです。

dataclass(frozen=True) を使うことで、
「一度作った盤面は書き換えられない」ことを型として表現しています。
解答は元の Grid を変更せず、新しい Grid として作られます。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from .config import MAX_ADJACENT_MINES
from .errors import MalformedBoardError


@dataclass(frozen=True)
class Mine:
    """地雷マス。周囲の数には数えられますが、自分自身に数字は付きません。"""


@dataclass(frozen=True)
class Empty:
    """
    空きマスを表すクラスです。

    Attributes
    ----------
    count : int
        周囲 8 マスにある地雷の数。解く前は 0、解いた後は 0〜8。
    """

    count: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.count <= MAX_ADJACENT_MINES:
            raise ValueError(
                f"Empty cell count must be between 0 and {MAX_ADJACENT_MINES}, got {self.count}"
            )


@dataclass(frozen=True)
class RowSeparator:
    """
    行の終わりを表すトークン。

    パース途中にだけ現れ、Grid のセル列には決して含まれません。
    """


# 盤面のマス
Cell = Union[Mine, Empty]

# トークナイザが返す記号列の要素
Token = Union[Mine, Empty, RowSeparator]


@dataclass(frozen=True)
class Coordinate:
    """
    盤面上の座標 (x, y) です。原点は左上、x が列・y が行です。
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinates are zero-based and non-negative: ({self.x}, {self.y})")


@dataclass(frozen=True)
class Grid:
    """
    長方形の盤面を表すクラスです。

    Attributes
    ----------
    width : int
        1行あたりのマス数。
    height : int
        行数。
    cells : tuple of Cell
        行優先（row-major）で並べたマス。index = y * width + x。
    """

    width: int
    height: int
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        # list で渡された場合もタプルに揃える
        object.__setattr__(self, "cells", tuple(self.cells))

        if self.width <= 0 or self.height <= 0:
            raise MalformedBoardError(
                f"Board dimensions must be positive, got {self.width}x{self.height}."
            )
        if len(self.cells) != self.width * self.height:
            raise MalformedBoardError(
                f"Board of {self.width}x{self.height} cannot hold {len(self.cells)} cells."
            )
        for cell in self.cells:
            if not isinstance(cell, (Mine, Empty)):
                raise MalformedBoardError(f"Grid cells must be Mine or Empty, got {cell!r}.")

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width) を返します。numpy の shape と同じ順番です。"""
        return (self.height, self.width)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        """1行ずつのタプルを上から順に返します。"""
        for y in range(self.height):
            start = y * self.width
            yield self.cells[start:start + self.width]

    def mine_count(self) -> int:
        return sum(1 for cell in self.cells if isinstance(cell, Mine))
