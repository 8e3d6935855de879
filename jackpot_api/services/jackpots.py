"""
Jackpot management - create, list and look up jackpots.
"""
import math
import uuid
from typing import Optional

import structlog
from sqlmodel import Session, select

from jackpot_api.errors import InvalidJackpotSpec, JackpotNotFound
from jackpot_api.models.jackpot import NAME_MAX_LENGTH, Jackpot

log = structlog.get_logger(__name__)


def validate_jackpot_spec(name: Optional[str], win_probability: Optional[float]) -> str:
    """Return the cleaned name, or raise InvalidJackpotSpec for the first bad field."""
    if name is None or not name.strip():
        raise InvalidJackpotSpec("name: name is required")
    if len(name.strip()) > NAME_MAX_LENGTH:
        raise InvalidJackpotSpec(f"name: name must be at most {NAME_MAX_LENGTH} characters")
    if win_probability is None:
        raise InvalidJackpotSpec("winProbability: winProbability is required")
    if not math.isfinite(win_probability):
        raise InvalidJackpotSpec("winProbability: winProbability must be between 0.0 and 1.0")
    if win_probability < 0.0:
        raise InvalidJackpotSpec("winProbability: winProbability must be >= 0.0")
    if win_probability > 1.0:
        raise InvalidJackpotSpec("winProbability: winProbability must be <= 1.0")
    return name.strip()


def create_jackpot(session: Session, name: Optional[str], win_probability: Optional[float]) -> Jackpot:
    """
    Create a new jackpot.

    The pool always starts empty with no wins, whatever the probability.
    """
    clean_name = validate_jackpot_spec(name, win_probability)

    jackpot = Jackpot(name=clean_name, win_probability=float(win_probability))
    session.add(jackpot)
    session.commit()
    session.refresh(jackpot)

    log.info("jackpot_created", jackpot_id=str(jackpot.id), name=jackpot.name, win_probability=jackpot.win_probability)
    return jackpot


def list_jackpots(session: Session) -> list[Jackpot]:
    return list(session.exec(select(Jackpot).order_by(Jackpot.created_at)).all())


def get_jackpot(session: Session, jackpot_id: uuid.UUID) -> Jackpot:
    jackpot = session.get(Jackpot, jackpot_id)
    if not jackpot:
        raise JackpotNotFound(jackpot_id)
    return jackpot
