"""
Board API route.

GET /api/board returns live NBA games merged with head-to-head moneylines:

    {"generatedAt": "...", "games": [MergedGame, ...]}

Any upstream failure fails the whole request with
{"error": "Failed to load board", "message": "..."} and status 500.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.models.board import BoardError, BoardResponse
from app.services.sync.orchestrator import BoardOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["board"])


def get_board_orchestrator(config: Settings = Depends(get_settings)) -> BoardOrchestrator:
    """Dependency building a per-request orchestrator from settings."""
    return BoardOrchestrator(config)


@router.get(
    "/board",
    response_model=BoardResponse,
    responses={500: {"model": BoardError}},
)
async def get_board(orchestrator: BoardOrchestrator = Depends(get_board_orchestrator)):
    """
    Get the merged live board.

    Games come from API-Sports; moneylines from the first bookmaker on
    The Odds API. A provider without a configured key contributes nothing.
    """
    try:
        return await orchestrator.build_board()
    except Exception as e:
        logger.error(f"Error building board: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=BoardError(message=str(e)).model_dump(),
        )
