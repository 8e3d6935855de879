"""
Jackpots - Named pools with a fixed win probability and an accumulating size.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

# Shared by jackpot names and player aliases
NAME_MAX_LENGTH = 100


class Jackpot(SQLModel, table=True):
    __tablename__ = "jackpots"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=NAME_MAX_LENGTH)
    win_probability: float  # 0.0 - 1.0, fixed at creation
    current_size: Decimal = Field(default=Decimal("0"), max_digits=19, decimal_places=2)
    win_count: int = Field(default=0)
    last_win_timestamp: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
