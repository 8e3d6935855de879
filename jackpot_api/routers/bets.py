"""
Bets router - place a bet on a jackpot and report the outcome.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from jackpot_api.database import get_session
from jackpot_api.errors import InvalidBetRequest, JackpotNotFound
from jackpot_api.schemas import BetRequest, BetResult, ErrorResponse
from jackpot_api.services.settlement import settle

router = APIRouter(prefix="/bets", tags=["bets"])


@router.post(
    "",
    response_model=BetResult,
    responses={400: {"description": "Invalid bet or unknown jackpot", "model": ErrorResponse}},
)
def place_bet(
    request: BetRequest,
    session: Session = Depends(get_session),
):
    """
    Place a bet on a jackpot.

    The bet always grows the pool; if the draw wins, the pool is paid out
    to the player and reset to zero.
    """
    try:
        return settle(session, request.jackpot_id, request.player_alias, request.bet_amount)
    except JackpotNotFound as e:
        # The jackpot id is part of the request body, so this is a bad request
        raise InvalidBetRequest(e.message) from e
