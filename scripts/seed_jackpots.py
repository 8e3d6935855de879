"""
Seed the jackpots table with a few demo jackpots.
"""
from pathlib import Path

from sqlmodel import Session, select

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in __import__("sys").path:
    __import__("sys").path.insert(0, str(PROJECT_ROOT))

from jackpot_api.database import create_db_and_tables, engine
from jackpot_api.models.jackpot import Jackpot
from jackpot_api.services.jackpots import create_jackpot

DEMO_JACKPOTS = [
    {"name": "Daily Drop", "win_probability": 0.05},
    {"name": "Super Jackpot", "win_probability": 0.01},
    {"name": "Mega Millions", "win_probability": 0.001},
]


def seed_jackpots(jackpots: list[dict] | None = None) -> int:
    """
    Create demo jackpots, skipping names that already exist.
    Returns the number of jackpots created.
    """
    if jackpots is None:
        jackpots = DEMO_JACKPOTS

    count = 0
    with Session(engine) as session:
        for spec in jackpots:
            existing = session.exec(
                select(Jackpot).where(Jackpot.name == spec["name"])
            ).first()
            if existing:
                print(f"Skipping {spec['name']} (already exists)")
                continue

            create_jackpot(session, spec["name"], spec["win_probability"])
            count += 1

    return count


def main():
    print("Creating database tables...")
    create_db_and_tables()

    print("Seeding demo jackpots...")
    count = seed_jackpots()
    print(f"Done! {count} jackpots created.")


if __name__ == "__main__":
    main()
