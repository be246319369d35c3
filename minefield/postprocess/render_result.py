# -*- coding: utf-8 -*-
"""
解答結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd

from ..grid.parser import cell_to_symbol
from ..types import Grid


def render_grid(grid: Grid) -> str:
    """
    盤面をテキストにします。1行ごとに width 文字 + 改行。

    例: 幅 2 の [Mine, Empty(2), Empty(2), Mine] → "*2\\n2*\\n"
    """
    return "".join(
        "".join(cell_to_symbol(cell) for cell in row) + "\n"
        for row in grid.rows()
    )


def grid_to_array(grid: Grid) -> np.ndarray:
    """
    盤面を shape = (height, width) の 2次元 numpy 配列にします。

    各要素は :func:`cell_to_symbol` による表示用の記号（str）です。
    """
    out = np.empty(grid.shape, dtype=object)
    for y, row in enumerate(grid.rows()):
        for x, cell in enumerate(row):
            out[y, x] = cell_to_symbol(cell)
    return out


def build_result(grid: Grid) -> Dict[str, Any]:
    """
    解答済み盤面から、API などで返す表示用の dict を作ります。

    Returns
    -------
    dict
        - solved_board : list[list[str]]  各マスの記号
        - rendered     : str              :func:`render_grid` の結果
        - shape        : (height, width)
        - mine_count   : int              地雷の総数
    """
    solved_df = pd.DataFrame(grid_to_array(grid))
    rows, cols = solved_df.shape

    return {
        "solved_board": solved_df.values.tolist(),
        "rendered": render_grid(grid),
        "shape": (rows, cols),
        "mine_count": grid.mine_count(),
    }
