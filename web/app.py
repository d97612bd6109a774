"""
FastAPI web application for the Connect Four engine.

Exposes a single REST endpoint (POST /next_move) that accepts the full board,
which side opened the game, and a difficulty level, runs the engine search,
and returns the board with the computer's move applied together with the
score and game outcome. Two plain-text GET routes let a UI check that the
server is up and which version it runs.

Architecture notes:
- Sync endpoint (not async): FastAPI runs sync handlers in a thread pool,
  which is the correct pattern for CPU-bound blocking calls like engine search.
- Stateless per request: the client sends the full grid each time; each
  request builds its own Board and the search builds its own cache, so no
  mutable state is shared between concurrent requests.
- CORS is wide open: the browser UI is served from a different origin.
"""

import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, field_validator

from engine import __version__
from engine.board import Board
from engine.constants import COMPUTER_PLAYER, EMPTY, HEIGHT, USER_PLAYER, WIDTH, Difficulty
from engine.search import Outcome, compute_best_move

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="Connect4 AI", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_CELL_VALUES = {EMPTY, USER_PLAYER, COMPUTER_PLAYER}


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class GameBoard(BaseModel):
    """
    Board snapshot sent by the client.

    Fields:
        grid: HEIGHT rows of WIDTH cells, row 0 at the top. Cells are
              0 (empty), 1 (user) or 2 (computer).
    """

    grid: list[list[int]]

    @field_validator("grid")
    @classmethod
    def check_shape(cls, v: list[list[int]]) -> list[list[int]]:
        """Reject grids that are not HEIGHT x WIDTH or hold unknown cell values."""
        if len(v) != HEIGHT or any(len(row) != WIDTH for row in v):
            raise ValueError(f"grid must have {HEIGHT} rows of {WIDTH} cells")
        if any(cell not in _CELL_VALUES for row in v for cell in row):
            raise ValueError("cells must be 0 (empty), 1 (user) or 2 (computer)")
        return v


class MovePosition(BaseModel):
    x: int
    y: int


class MoveResponse(BaseModel):
    """
    Engine response after computing the best move.

    Fields:
        grid:   Board after the computer's move is applied.
        result: Game outcome after the move (NextMove, ComputerWins,
                PlayerWins, Draw or None).
        score:  Root evaluation from the computer's perspective.
        move:   The cell the computer played, or null when the board was full.
    """

    grid: list[list[int]]
    result: Outcome
    score: int
    move: MovePosition | None


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.get("/", response_class=PlainTextResponse)
def status() -> str:
    """Liveness probe."""
    return "Connect4 Server"


@app.get("/version", response_class=PlainTextResponse)
def version() -> str:
    _log.debug("UI connected, reporting version %s", __version__)
    return __version__


@app.post("/next_move", response_model=MoveResponse)
def next_move(
    game_board: GameBoard,
    computer_started: bool = Query(...),
    difficulty: int = Query(..., ge=0),
) -> MoveResponse:
    """
    Compute and apply the computer's move for the posted board.

    Args:
        game_board:       The current grid (request body).
        computer_started: Query flag, true when the computer opened the game.
        difficulty:       Query level: 0 easy, 1 medium, anything else hard.

    Returns:
        MoveResponse with the updated grid, outcome, score and move.

    Raises:
        HTTPException 422: Malformed grid or query parameters (FastAPI).
        HTTPException 500: The engine raised unexpectedly.
    """
    board = Board.from_grid(game_board.grid)

    try:
        move, score, outcome = compute_best_move(
            board, computer_started, Difficulty.from_level(difficulty)
        )
    except Exception as exc:
        _log.exception("Engine search failed for grid=%s", game_board.grid)
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    _log.info(
        "Move=%s score=%d result=%s difficulty=%d computer_started=%s",
        move,
        score,
        outcome.value,
        difficulty,
        computer_started,
    )

    return MoveResponse(
        grid=board.grid,
        result=outcome,
        score=score,
        move=MovePosition(x=move.x, y=move.y) if move is not None else None,
    )
