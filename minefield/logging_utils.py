# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- パッケージ内のモジュールは print ではなく、ここで作る logger を使います。
- handler（出力先）は一度だけ登録されるので、何度呼んでも重複しません。
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOGGER_NAME


def get_logger() -> logging.Logger:
    """
    minefield 全体で共通して使う logger を返します。

    すでに handler が設定されていない場合は、
    標準エラー出力に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(DEFAULT_LOG_LEVEL)

    return logger


def set_log_level(level: Optional[int]) -> logging.Logger:
    """CLI の --verbose などからログレベルを切り替えます。"""
    logger = get_logger()
    logger.setLevel(DEFAULT_LOG_LEVEL if level is None else level)
    return logger
