# -*- coding: utf-8 -*-
"""
盤面ファイルを読み込むモジュールです。

ファイルは 1行 = 盤面の 1行 の普通のテキストです。
読み込み時に各行の末尾へ行区切り記号を付けるので、
ファイル自体に区切り記号を書く必要はありません。

例:
    .**..*
    ..*..*
→ ".**..*-..*..*-"

行末として扱うのは "\\n" と "\\r\\n" だけです。
単独の "\\r" は行の一部として残り、盤面の構築時に未知の記号になります。
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from ..config import FILE_ENCODING, ROW_SEPARATOR_SYMBOL
from ..logging_utils import get_logger

logger = get_logger()


def strip_line_ending(line: str) -> str:
    """行末の "\\n" を 1つ、続けてその直前の "\\r" を 1つだけ取り除きます。"""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def split_lines(text: str) -> List[str]:
    """
    テキストを "\\n" だけで行に分割します。

    最後の改行の後ろの空文字列は行として数えません。
    各行からは末尾の "\\r" を 1つだけ取り除きます。
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [strip_line_ending(line) for line in lines]


def join_rows(lines: Iterable[str]) -> str:
    """各行の改行を取り除き、行区切り記号を付けて 1つの文字列にします。"""
    return "".join(strip_line_ending(line) + ROW_SEPARATOR_SYMBOL for line in lines)


def read_board_text(path: Union[str, Path]) -> str:
    """
    盤面ファイルを読み込み、行区切り記号付きの文字列を返します。

    ファイルが開けない・読めない場合の OSError はそのまま送出します。
    空のファイルなら空文字列を返します。
    """
    p = Path(path)
    logger.debug("Reading board from %s", p)
    with p.open("r", encoding=FILE_ENCODING, newline="") as f:
        text = f.read()
    return join_rows(split_lines(text))
