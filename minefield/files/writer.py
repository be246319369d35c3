# -*- coding: utf-8 -*-
"""解答テキストをファイルに書き出すモジュールです。"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ..config import FILE_ENCODING
from ..logging_utils import get_logger

logger = get_logger()


def write_text(path: Union[str, Path], text: str) -> None:
    """
    text を path に書き出します。既存のファイルは上書きされます。
    """
    p = Path(path)
    with p.open("w", encoding=FILE_ENCODING, newline="") as f:
        f.write(text)
    logger.debug("Wrote %d characters to %s", len(text), p)
