"""
Wins - Append-only ledger of jackpot wins.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlmodel import Field, SQLModel

from jackpot_api.models.jackpot import NAME_MAX_LENGTH


class Win(SQLModel, table=True):
    __tablename__ = "wins"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    jackpot_id: uuid.UUID = Field(foreign_key="jackpots.id", index=True)
    player_alias: str = Field(max_length=NAME_MAX_LENGTH, index=True)
    win_amount: Decimal = Field(max_digits=19, decimal_places=2)  # Pool size at the moment of the win
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
