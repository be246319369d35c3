# -*- coding: utf-8 -*-
"""
minefield パッケージの入口となるモジュールです。

cli.py や api_proto/local_api.py などから:

    from minefield import solve_text

と呼び出されることを想定しています。

ここでは、盤面の文字列を受け取り、
1. トークン化と長方形の盤面の構築
2. 空きマスごとの地雷数の計算
3. テキストへの描画
を順番に呼び出します。
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .config import SOLUTION_FILE_NAME
from .counting.mine_counter import solve_grid
from .files.loader import read_board_text
from .files.writer import write_text
from .grid.builder import build_grid
from .logging_utils import get_logger
from .postprocess.render_result import render_grid
from .types import Grid

logger = get_logger()


def solve(text: str) -> Grid:
    """
    行区切り記号付きの盤面文字列を解き、解答済みの Grid を返します。
    """
    logger.info("=== solve() START ===")

    grid = build_grid(text)
    logger.info("Grid shape: %s, mines=%d", grid.shape, grid.mine_count())

    solved = solve_grid(grid)

    logger.info("=== solve() END ===")
    return solved


def solve_text(text: str) -> str:
    """盤面文字列を解き、描画済みのテキストを返します。"""
    return render_grid(solve(text))


def solve_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path] = SOLUTION_FILE_NAME,
) -> Grid:
    """
    盤面ファイルを読み込んで解き、解答を output_path に書き出します。

    読み込み・構築・解答・書き出しのどこで失敗しても、例外はそのまま送出します。
    """
    logger.info("Loading board from %s...", input_path)
    solved = solve(read_board_text(input_path))

    write_text(output_path, render_grid(solved))
    logger.info("Solution written to %s", output_path)
    return solved
