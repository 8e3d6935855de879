"""
Database engine and session management.
"""
from sqlmodel import Session, SQLModel, create_engine

from jackpot_api.config import DATABASE_URL, SQL_ECHO

# Use check_same_thread only for SQLite
connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)


def create_db_and_tables(bind=None):
    """Create all tables defined in SQLModel metadata."""
    # Import so the jackpots/bets/wins tables are registered on the metadata
    import jackpot_api.models  # noqa: F401

    SQLModel.metadata.create_all(bind if bind is not None else engine)


def get_session():
    """Yield a database session."""
    with Session(engine) as session:
        yield session
