"""
Wins router - win history with pagination and filtering.
"""
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from jackpot_api.config import DEFAULT_WIN_PAGE_SIZE
from jackpot_api.database import get_session
from jackpot_api.schemas import WinResponse
from jackpot_api.services.wins import query_wins

router = APIRouter(prefix="/wins", tags=["wins"])


@router.get("", response_model=list[WinResponse])
def get_wins(
    limit: int = Query(default=DEFAULT_WIN_PAGE_SIZE, description="Max wins to return (<= 0 uses the default)"),
    offset: int = Query(default=0, description="Number of wins to skip (< 0 treated as 0)"),
    player_alias: Optional[str] = Query(default=None, alias="playerAlias"),
    jackpot_id: Optional[uuid.UUID] = Query(default=None, alias="jackpotId"),
    session: Session = Depends(get_session),
):
    """
    Get recorded wins, most recent first.

    playerAlias and jackpotId filters can be combined.
    """
    return query_wins(
        session,
        limit=limit,
        offset=offset,
        player_alias=player_alias,
        jackpot_id=jackpot_id,
    )
