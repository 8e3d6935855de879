"""
Jackpots router - create jackpots and inspect their current state.
"""
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from jackpot_api.database import get_session
from jackpot_api.schemas import CreateJackpotRequest, ErrorResponse, JackpotResponse
from jackpot_api.services.jackpots import create_jackpot, get_jackpot, list_jackpots

router = APIRouter(prefix="/jackpots", tags=["jackpots"])


@router.post(
    "",
    response_model=JackpotResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid jackpot name or probability", "model": ErrorResponse}},
)
def create(
    request: CreateJackpotRequest,
    session: Session = Depends(get_session),
):
    """
    Create a new jackpot.

    The jackpot starts with an empty pool and no wins.
    """
    return create_jackpot(session, request.name, request.win_probability)


@router.get("", response_model=list[JackpotResponse])
def list_all(session: Session = Depends(get_session)):
    """Get all jackpots with their current state."""
    return list_jackpots(session)


@router.get(
    "/{jackpot_id}",
    response_model=JackpotResponse,
    responses={404: {"description": "Jackpot not found", "model": ErrorResponse}},
)
def get_one(
    jackpot_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return get_jackpot(session, jackpot_id)
