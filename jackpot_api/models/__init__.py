"""
SQLModel models for jackpots, bets and the win ledger.
"""
from jackpot_api.models.jackpot import Jackpot
from jackpot_api.models.bet import Bet
from jackpot_api.models.win import Win

__all__ = [
    "Jackpot",
    "Bet",
    "Win",
]
