# -*- coding: utf-8 -*-
"""
盤面の記号をセル（トークン）に変換するモジュールです。

主な役割:
- 1文字の記号を Mine / Empty / RowSeparator に変換
- 文字列全体をトークン列に分解
- セルを表示用の記号に戻す（描画で使用）
"""

from __future__ import annotations

from typing import Iterator

from ..config import (
    CELL_KIND_EMPTY,
    CELL_KIND_MINE,
    CELL_KIND_ROW_SEPARATOR,
    EMPTY_SYMBOL,
    MINE_SYMBOL,
    SYMBOL_TABLE,
)
from ..errors import UnknownSymbolError
from ..types import Cell, Empty, Mine, RowSeparator, Token


def identify_symbol(symbol: str) -> Token:
    """
    1文字の記号を、記号表 :data:`SYMBOL_TABLE` に従ってトークンに変換します。

    変換ルール
    ----------
    - "*" : Mine()
    - "." : Empty(0)
    - "-" : RowSeparator()
    - それ以外 : UnknownSymbolError
    """
    kind = SYMBOL_TABLE.get(symbol)
    if kind == CELL_KIND_MINE:
        return Mine()
    if kind == CELL_KIND_EMPTY:
        return Empty(0)
    if kind == CELL_KIND_ROW_SEPARATOR:
        return RowSeparator()
    raise UnknownSymbolError(symbol)


def tokenize(text: str) -> Iterator[Token]:
    """
    文字列を左から順にトークンへ変換するジェネレータです。

    未知の記号は、その位置まで読み進めた時点で UnknownSymbolError になります。
    """
    for ch in text:
        yield identify_symbol(ch)


def cell_to_symbol(cell: Cell) -> str:
    """
    セルを表示用の 1文字に変換します。

    Empty(0) は "."、Empty(n>0) は数字 n になります。
    数字は入力記号ではないため、Empty(n>0) の記号は再びパースできません。
    """
    if isinstance(cell, Mine):
        return MINE_SYMBOL
    if isinstance(cell, Empty):
        return str(cell.count) if cell.count else EMPTY_SYMBOL
    raise TypeError(f"Not a board cell: {cell!r}")
