# -*- coding: utf-8 -*-
"""
行区切り記号で区切られた文字列から、長方形の Grid を組み立てるモジュールです。

入力例: "*.-.*-" → 幅 2・高さ 2 の盤面
各行の末尾（最後の行も含む）に行区切り記号が必要です。
"""

from __future__ import annotations

from typing import List, Optional

from .. import config
from ..errors import EmptyBoardError, MalformedBoardError
from ..logging_utils import get_logger
from ..types import Cell, Grid, RowSeparator
from .parser import tokenize

logger = get_logger()


def build_grid(text: str, require_trailing_separator: Optional[bool] = None) -> Grid:
    """
    文字列を左から走査し、未解答（Empty はすべて 0）の Grid を作ります。

    Parameters
    ----------
    text : str
        行区切り記号で区切られた盤面文字列。改行は含みません。
    require_trailing_separator : bool, optional
        True なら、最後の区切り記号より後ろに記号が残っている場合にエラーにします。
        False なら、その記号列も最後の 1行として扱います。
        None なら呼び出し時点の config.REQUIRE_TRAILING_SEPARATOR に従います。

    Raises
    ------
    EmptyBoardError
        空文字列、またはマスが 1つもない場合。
    UnknownSymbolError
        記号表にない文字が含まれる場合。
    MalformedBoardError
        行ごとのマス数が揃っていない場合、または末尾の区切りがない場合。
    """
    if not text:
        raise EmptyBoardError()

    if require_trailing_separator is None:
        require_trailing_separator = config.REQUIRE_TRAILING_SEPARATOR

    cells: List[Cell] = []
    width: Optional[int] = None
    height = 0
    row_width = 0

    for token in tokenize(text):
        if isinstance(token, RowSeparator):
            if width is None:
                # 1行目の長さで盤面の幅が決まる
                width = row_width
            elif row_width != width:
                raise MalformedBoardError(
                    f"Row {height} has {row_width} cells, expected {width}."
                )
            height += 1
            row_width = 0
        else:
            cells.append(token)
            row_width += 1

    if row_width:
        if require_trailing_separator:
            raise MalformedBoardError(
                f"Last row ({row_width} cells) is not terminated by a row separator."
            )
        if width is None:
            width = row_width
        elif row_width != width:
            raise MalformedBoardError(
                f"Row {height} has {row_width} cells, expected {width}."
            )
        height += 1

    if not width:
        raise EmptyBoardError("The board has no cells.")

    logger.debug("Built grid: width=%d, height=%d", width, height)
    return Grid(width=width, height=height, cells=cells)
