"""
Bet settlement - folds a bet into a jackpot's pool and draws the win/loss outcome.

The whole read-modify-write (load jackpot, insert bet, maybe insert win,
update jackpot) is committed as one transaction. Concurrent bets on the same
jackpot are serialized by the row lock taken when the jackpot is loaded;
SQLite has no row locks and relies on its database-level write lock instead.
"""
import random
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import structlog
from sqlmodel import Session

from jackpot_api.errors import InvalidBetAmount, JackpotNotFound
from jackpot_api.models.bet import Bet
from jackpot_api.models.jackpot import Jackpot
from jackpot_api.models.win import Win
from jackpot_api.schemas import BetResult

log = structlog.get_logger(__name__)

WIN_MESSAGE = "Congratulations! You won!"
LOSS_MESSAGE = "Better luck next time!"

# Plain PRNG: draws only need to be uniform on [0, 1), not unpredictable
_rng = random.Random()

# Money columns are Numeric(19, 2): whole cents, at most 17 integer digits
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal(10) ** 17


def _validate_amount(bet_amount) -> Decimal:
    if bet_amount is None:
        raise InvalidBetAmount("Bet amount must be positive")
    amount = bet_amount if isinstance(bet_amount, Decimal) else Decimal(str(bet_amount))
    if not amount.is_finite() or amount <= 0:
        raise InvalidBetAmount("Bet amount must be positive")
    if amount >= MAX_AMOUNT:
        raise InvalidBetAmount("Bet amount is too large")
    cents = amount.quantize(CENT)
    if cents != amount:
        raise InvalidBetAmount("Bet amount must have at most 2 decimal places")
    return cents


def is_win(draw: float, win_probability: float) -> bool:
    """A draw in [0, 1) wins iff it falls below the probability: 0.0 never wins, 1.0 always does."""
    return draw < win_probability


def settle(
    session: Session,
    jackpot_id: uuid.UUID,
    player_alias: str,
    bet_amount: Optional[Decimal],
    rng: Optional[random.Random] = None,
) -> BetResult:
    """
    Place a bet on a jackpot and determine whether it wins.

    Raises InvalidBetAmount for a missing, non-positive, sub-cent or oversized
    amount and
    JackpotNotFound for an unknown jackpot; neither writes anything.
    Store failures roll the transaction back and propagate unchanged.
    """
    amount = _validate_amount(bet_amount)
    rng = rng or _rng

    try:
        jackpot = session.get(Jackpot, jackpot_id, with_for_update=True)
        if not jackpot:
            raise JackpotNotFound(jackpot_id)

        new_size = jackpot.current_size + amount
        if new_size >= MAX_AMOUNT:
            raise InvalidBetAmount("Bet would push the jackpot past its maximum size")

        session.add(Bet(jackpot_id=jackpot.id, player_alias=player_alias, bet_amount=amount))

        won = is_win(rng.random(), jackpot.win_probability)

        if won:
            now = datetime.now(timezone.utc)
            session.add(Win(jackpot_id=jackpot.id, player_alias=player_alias, win_amount=new_size, timestamp=now))
            jackpot.current_size = Decimal("0")
            jackpot.win_count += 1
            jackpot.last_win_timestamp = now
            # new_jackpot_size reports what the pool grew to, not the reset value
            result = BetResult(won=True, win_amount=new_size, new_jackpot_size=new_size, message=WIN_MESSAGE)
        else:
            jackpot.current_size = new_size
            result = BetResult(won=False, win_amount=Decimal("0"), new_jackpot_size=new_size, message=LOSS_MESSAGE)

        session.add(jackpot)
        session.commit()
    except Exception:
        session.rollback()
        raise

    log.info(
        "bet_settled",
        jackpot_id=str(jackpot_id),
        player_alias=player_alias,
        bet_amount=str(amount),
        won=won,
        jackpot_size=str(new_size),
    )
    return result
