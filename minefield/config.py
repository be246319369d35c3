# -*- coding: utf-8 -*-
"""
minefield 全体で共通して使う設定値をまとめたモジュールです。

盤面ファイルの記号を変更したい場合は、ここを編集するだけで
パーサ・描画の両方に反映されます。
"""

from __future__ import annotations

import logging
from typing import Dict

# ==== 盤面の記号 ===========================================================

# 地雷マス
MINE_SYMBOL: str = "*"

# 空きマス（解く前、または周囲に地雷が 0 個）
EMPTY_SYMBOL: str = "."

# 行の終わりを表す記号。ファイル読み込み時に各行の末尾へ付与されます。
ROW_SEPARATOR_SYMBOL: str = "-"

# 記号 → セル種別 の対応表。パーサはこの表だけを参照します。
CELL_KIND_MINE: str = "mine"
CELL_KIND_EMPTY: str = "empty"
CELL_KIND_ROW_SEPARATOR: str = "row_separator"

SYMBOL_TABLE: Dict[str, str] = {
    MINE_SYMBOL: CELL_KIND_MINE,
    EMPTY_SYMBOL: CELL_KIND_EMPTY,
    ROW_SEPARATOR_SYMBOL: CELL_KIND_ROW_SEPARATOR,
}

# ==== 盤面の検証 ===========================================================

# 最後の行にも行区切り記号を必須とするか。
# True の場合、区切られていない末尾の記号列は MalformedBoardError になります。
REQUIRE_TRAILING_SEPARATOR: bool = True

# 1マスの周囲にある地雷数の最大値（3x3 近傍 - 自分自身）
MAX_ADJACENT_MINES: int = 8

# ==== 入出力 ===============================================================

# CLI が解答を書き出すファイル名（カレントディレクトリ）
SOLUTION_FILE_NAME: str = "solution.txt"

FILE_ENCODING: str = "utf-8"

# ==== ログ =================================================================

LOGGER_NAME: str = "minefield"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_LOG_LEVEL: int = logging.INFO
