# -*- coding: utf-8 -*-
"""
盤面の読み込み・解答で発生する例外をまとめたモジュールです。

ファイル入出力のエラー（FileNotFoundError など）はここでは定義せず、
OSError のまま呼び出し元へ伝播させます。
"""

from __future__ import annotations

from typing import Any


class MinefieldError(ValueError):
    """盤面に関するエラーの基底クラス。"""


class EmptyBoardError(MinefieldError):
    """入力にマスが 1つも含まれていない。"""

    def __init__(self, message: str = "The board is empty.") -> None:
        super().__init__(message)


class UnknownSymbolError(MinefieldError):
    """記号表にない文字が入力に含まれていた。"""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown symbol {symbol!r} in board.")


class MalformedBoardError(MinefieldError):
    """行ごとのマス数が揃っていない（長方形でない）盤面。"""

    def __init__(self, message: str = "The board is not rectangular.") -> None:
        super().__init__(message)


class CellOutOfBoundsError(MinefieldError):
    """座標 ↔ インデックス変換が盤面の範囲外を指した。"""

    def __init__(self, position: Any) -> None:
        self.position = position
        super().__init__(f"Tried to access a cell that does not exist: {position!r}")
