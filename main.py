from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jackpot_api.config import CORS_ORIGINS, configure_logging
from jackpot_api.database import create_db_and_tables
from jackpot_api.errors import register_error_handlers
from jackpot_api.routers import bets, jackpots, wins

configure_logging()
log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    log.info("tables_ready")
    yield


app = FastAPI(
    title="Jackpot Service API",
    description="Create jackpots, place bets against them and browse the win history.",
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "jackpots", "description": "Jackpot management endpoints"},
        {"name": "bets", "description": "Bet placement endpoints"},
        {"name": "wins", "description": "Win history endpoints"},
    ],
)

# Allow CORS from configured origins ("*" by default for local development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(jackpots.router)
app.include_router(bets.router)
app.include_router(wins.router)


@app.get("/health")
def health():
    return {"status": "ok"}
