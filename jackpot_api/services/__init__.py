"""
Service layer: jackpot management, bet settlement and the win ledger.
"""
from jackpot_api.services.jackpots import create_jackpot, get_jackpot, list_jackpots
from jackpot_api.services.settlement import settle
from jackpot_api.services.wins import query_wins

__all__ = [
    "create_jackpot",
    "get_jackpot",
    "list_jackpots",
    "settle",
    "query_wins",
]
