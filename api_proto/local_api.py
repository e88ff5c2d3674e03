from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku_solver import solve_puzzle
from sudoku_solver.errors import PuzzleFormatError, SearchLimitExceeded
from sudoku_solver.logging_utils import get_logger

logger = get_logger()

app = FastAPI()

class SolveRequest(BaseModel):
    puzzle: str # 81 cells, "." or "0" for blanks
    max_nodes: int | None = None

@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives a puzzle string and returns the solved board.
    "no-solution" is a normal response, not an error.
    """
    try:
        return solve_puzzle(request.puzzle, max_nodes=request.max_nodes)
    except PuzzleFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SearchLimitExceeded as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error in /api/solve")
        raise HTTPException(status_code=500, detail=str(e))
