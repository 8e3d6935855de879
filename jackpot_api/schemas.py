"""
Request/response models for the jackpot API.

JSON field names are camelCase (winProbability, playerAlias, ...); Python
attributes stay snake_case.
"""
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jackpot_api.models.jackpot import NAME_MAX_LENGTH


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# --- Requests ---

class CreateJackpotRequest(CamelModel):
    # Checked by the jackpot service so failures surface as InvalidJackpotSpec
    name: Optional[str] = Field(default=None, description="Jackpot name", examples=["Super Jackpot"])
    win_probability: Optional[float] = Field(
        default=None, description="Win probability (0.0 - 1.0)", examples=[0.1]
    )


class BetRequest(CamelModel):
    jackpot_id: uuid.UUID = Field(description="Jackpot ID")
    player_alias: str = Field(max_length=NAME_MAX_LENGTH, description="Player alias", examples=["player123"])
    # Missing or non-positive amounts are rejected by settlement as InvalidBetAmount
    bet_amount: Optional[Decimal] = Field(default=None, description="Bet amount", examples=["50.00"])

    @field_validator("player_alias")
    @classmethod
    def alias_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("playerAlias is required")
        return v.strip()


# --- Responses ---

class JackpotResponse(CamelModel):
    id: uuid.UUID
    name: str
    win_probability: float
    current_size: Decimal
    win_count: int
    last_win_timestamp: Optional[datetime] = None
    created_at: datetime


class BetResult(CamelModel):
    won: bool
    win_amount: Decimal = Field(description="Win amount (0 if not won)")
    new_jackpot_size: Decimal = Field(description="Jackpot size after the bet (pre-reset total on a win)")
    message: str


class WinResponse(CamelModel):
    timestamp: datetime
    player_alias: str
    win_amount: Decimal


class ErrorResponse(BaseModel):
    status: int
    message: str
    error: str
    timestamp: str
