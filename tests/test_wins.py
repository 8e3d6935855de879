"""Win ledger queries: filters, ordering and pagination."""

from decimal import Decimal

import pytest

from jackpot_api.services.wins import query_wins


def _amounts(wins):
    return [w.win_amount for w in wins]


def test_all_wins_newest_first(session, three_wins):
    wins = query_wins(session, limit=10, offset=0)
    assert _amounts(wins) == [Decimal("300"), Decimal("200"), Decimal("100")]


def test_limit_one_offset_one_returns_middle(session, three_wins):
    wins = query_wins(session, limit=1, offset=1)
    assert _amounts(wins) == [Decimal("200")]


def test_filter_by_alias(session, three_wins):
    wins = query_wins(session, limit=10, offset=0, player_alias="bob")
    assert _amounts(wins) == [Decimal("300"), Decimal("200")]
    assert all(w.player_alias == "bob" for w in wins)


def test_filter_by_jackpot(session, three_wins):
    jp_a, _ = three_wins
    wins = query_wins(session, limit=10, offset=0, jackpot_id=jp_a.id)
    assert _amounts(wins) == [Decimal("300"), Decimal("100")]


def test_filters_combine(session, three_wins):
    jp_a, jp_b = three_wins
    assert _amounts(query_wins(session, player_alias="bob", jackpot_id=jp_a.id)) == [Decimal("300")]
    assert query_wins(session, player_alias="alice", jackpot_id=jp_b.id) == []


def test_alias_filter_is_exact(session, three_wins):
    assert query_wins(session, player_alias="Bob") == []
    assert query_wins(session, player_alias="bo") == []


@pytest.mark.parametrize("limit", [0, -5])
def test_non_positive_limit_uses_default(session, make_jackpot, limit):
    from jackpot_api.models import Win

    jp = make_jackpot()
    for i in range(12):
        session.add(Win(jackpot_id=jp.id, player_alias="p", win_amount=Decimal(i + 1)))
    session.commit()

    assert len(query_wins(session, limit=limit, offset=0)) == 10


def test_negative_offset_treated_as_zero(session, three_wins):
    wins = query_wins(session, limit=1, offset=-3)
    assert _amounts(wins) == [Decimal("300")]


def test_offset_past_end_is_empty(session, three_wins):
    assert query_wins(session, limit=10, offset=3) == []
