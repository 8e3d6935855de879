"""Shared fixtures: in-memory SQLite store, a session on it, and an API client bound to it."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from jackpot_api.database import create_db_and_tables, get_session
from jackpot_api.models import Jackpot, Win
from main import app


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def client(session):
    def _get_session():
        return session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_jackpot(session):
    def _make(name="Test Jackpot", win_probability=0.5, current_size="0"):
        jackpot = Jackpot(name=name, win_probability=win_probability, current_size=Decimal(current_size))
        session.add(jackpot)
        session.commit()
        session.refresh(jackpot)
        return jackpot

    return _make


@pytest.fixture
def three_wins(session, make_jackpot):
    """Wins of 100, 200, 300 on two jackpots, one minute apart (300 is the most recent)."""
    jp_a = make_jackpot(name="A")
    jp_b = make_jackpot(name="B")
    base = datetime(2025, 12, 28, 10, 0, tzinfo=timezone.utc)
    rows = [
        Win(jackpot_id=jp_a.id, player_alias="alice", win_amount=Decimal("100"), timestamp=base),
        Win(jackpot_id=jp_b.id, player_alias="bob", win_amount=Decimal("200"), timestamp=base + timedelta(minutes=1)),
        Win(jackpot_id=jp_a.id, player_alias="bob", win_amount=Decimal("300"), timestamp=base + timedelta(minutes=2)),
    ]
    for w in rows:
        session.add(w)
    session.commit()
    return jp_a, jp_b
