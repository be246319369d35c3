# -*- coding: utf-8 -*-
"""
コマンドラインから盤面ファイルを解くためのモジュールです。

    python -m minefield board.txt

解答はカレントディレクトリの solution.txt に書き出されます。
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import solve_file
from .config import SOLUTION_FILE_NAME
from .errors import MinefieldError
from .logging_utils import get_logger, set_log_level

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minefield",
        description=f"Annotate every empty cell of a minefield with its adjacent mine count "
                    f"and write the result to {SOLUTION_FILE_NAME}.",
    )
    parser.add_argument("input_path", help="Board file, one row per line ('*' mine, '.' empty)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI のエントリポイント。終了ステータスを返します。

    引数の数が違う場合は argparse が SystemExit(2) を送出します。
    """
    args = build_parser().parse_args(argv)
    set_log_level(logging.DEBUG if args.verbose else None)

    try:
        solve_file(args.input_path, SOLUTION_FILE_NAME)
    except MinefieldError as e:
        logger.error("Invalid board: %s", e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1
    except UnicodeDecodeError as e:
        logger.error("Board file is not valid UTF-8: %s", e)
        return 1
    return 0
