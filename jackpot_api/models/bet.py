"""
Bets - Immutable audit record of every wager placed against a jackpot.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlmodel import Field, SQLModel

from jackpot_api.models.jackpot import NAME_MAX_LENGTH


class Bet(SQLModel, table=True):
    __tablename__ = "bets"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    jackpot_id: uuid.UUID = Field(foreign_key="jackpots.id", index=True)
    player_alias: str = Field(max_length=NAME_MAX_LENGTH)
    bet_amount: Decimal = Field(max_digits=19, decimal_places=2)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
