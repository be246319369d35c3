# -*- coding: utf-8 -*-
"""
空きマスの周囲にある地雷を数えるモジュールです。

解答は元の Grid を書き換えず、同じ大きさの新しい Grid として返します。
"""

from __future__ import annotations

from typing import List

from ..grid.coordinate import adjacent_coordinates, coordinate_to_index, index_to_coordinate
from ..logging_utils import get_logger
from ..types import Cell, Empty, Grid, Mine

logger = get_logger()


def count_adjacent_mines(grid: Grid, index: int) -> int:
    """
    index のマスの周囲にある地雷の数を返します。

    index → 座標 → 隣接座標 → index と変換し、
    変換結果が盤面の範囲外なら CellOutOfBoundsError を送出します。
    地雷マス自身については 0 を返します。
    """
    coord = index_to_coordinate(index, grid.width, grid.height)
    if isinstance(grid.cells[index], Mine):
        return 0

    count = 0
    for neighbor in adjacent_coordinates(coord, grid.width, grid.height):
        neighbor_index = coordinate_to_index(neighbor, grid.width, grid.height)
        if isinstance(grid.cells[neighbor_index], Mine):
            count += 1
    return count


def solve_grid(grid: Grid) -> Grid:
    """
    すべての空きマスに周囲の地雷数を書き込んだ、新しい Grid を返します。

    Parameters
    ----------
    grid : Grid
        未解答の盤面。

    Returns
    -------
    Grid
        同じ大きさの解答済み盤面。地雷マスはそのまま。
    """
    solved: List[Cell] = []
    for index, cell in enumerate(grid.cells):
        if isinstance(cell, Mine):
            solved.append(cell)
        else:
            solved.append(Empty(count_adjacent_mines(grid, index)))

    logger.debug(
        "Solved grid %dx%d: %d numbered cells",
        grid.width,
        grid.height,
        sum(1 for c in solved if isinstance(c, Empty) and c.count),
    )
    return Grid(width=grid.width, height=grid.height, cells=solved)
