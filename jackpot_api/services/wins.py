"""
Win ledger - filtered, paginated history of jackpot wins, most recent first.
"""
import uuid
from typing import Optional

from sqlmodel import Session, select

from jackpot_api.config import DEFAULT_WIN_PAGE_SIZE
from jackpot_api.models.win import Win


def query_wins(
    session: Session,
    limit: int = DEFAULT_WIN_PAGE_SIZE,
    offset: int = 0,
    player_alias: Optional[str] = None,
    jackpot_id: Optional[uuid.UUID] = None,
) -> list[Win]:
    """
    Return at most `limit` wins after skipping `offset`, newest first.

    Filters are combined with AND; a None filter matches everything.
    Non-positive limits fall back to the default page size and negative
    offsets to 0.
    """
    if limit <= 0:
        limit = DEFAULT_WIN_PAGE_SIZE
    if offset < 0:
        offset = 0

    statement = select(Win)
    if player_alias is not None:
        statement = statement.where(Win.player_alias == player_alias)
    if jackpot_id is not None:
        statement = statement.where(Win.jackpot_id == jackpot_id)

    # id breaks timestamp ties so pages stay stable
    statement = statement.order_by(Win.timestamp.desc(), Win.id).offset(offset).limit(limit)
    return list(session.exec(statement).all())
