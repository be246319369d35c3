# -*- coding: utf-8 -*-
"""
盤面上の座標に関する計算をまとめたモジュールです。

- 隣接座標（3x3 近傍から自分を除いたもの）の列挙。盤面の端では範囲内に切り詰めます。
- 行優先インデックス (y * width + x) と座標の相互変換
"""

from __future__ import annotations

from typing import List

from ..errors import CellOutOfBoundsError
from ..types import Coordinate


def axis_candidates(value: int, dimension: int) -> List[int]:
    """
    1軸分の隣接候補 {value-1, value, value+1} のうち、
    [0, dimension-1] に収まるものを昇順で返します。
    """
    candidates = [value]
    if value != 0:
        candidates.append(value - 1)
    if value != dimension - 1:
        candidates.append(value + 1)
    candidates.sort()
    return candidates


def adjacent_coordinates(coord: Coordinate, width: int, height: int) -> List[Coordinate]:
    """
    coord の周囲の座標を返します（coord 自身は含みません）。

    Parameters
    ----------
    coord : Coordinate
        盤面内の座標。
    width, height : int
        盤面の大きさ。

    Returns
    -------
    list of Coordinate
        角なら 3 個、辺なら 5 個、内側なら 8 個。x, y の昇順。
    """
    xs = axis_candidates(coord.x, width)
    ys = axis_candidates(coord.y, height)
    return [
        Coordinate(x, y)
        for x in xs
        for y in ys
        if (x, y) != (coord.x, coord.y)
    ]


def coordinate_to_index(coord: Coordinate, width: int, height: int) -> int:
    """座標を行優先インデックスに変換します。範囲外なら CellOutOfBoundsError。"""
    if coord.x >= width or coord.y >= height:
        raise CellOutOfBoundsError(coord)
    return coord.y * width + coord.x


def index_to_coordinate(index: int, width: int, height: int) -> Coordinate:
    """行優先インデックスを座標に変換します。範囲外なら CellOutOfBoundsError。"""
    if index < 0 or index >= width * height:
        raise CellOutOfBoundsError(index)
    return Coordinate(index % width, index // width)
