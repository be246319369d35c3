from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List

from minefield import solve
from minefield.config import ROW_SEPARATOR_SYMBOL
from minefield.errors import MinefieldError
from minefield.logging_utils import get_logger
from minefield.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()

class SolveRequest(BaseModel):
    board: List[str]  # 1行 = 1文字列（区切り記号なし）

@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives board rows, joins them with the row separator, and returns the solved board.
    """
    # 各行の末尾に区切り記号を付けて builder の形式にする
    text = "".join(row + ROW_SEPARATOR_SYMBOL for row in request.board)
    try:
        solved = solve(text)
    except MinefieldError as e:
        logger.warning("Rejected board: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return build_result(solved)
