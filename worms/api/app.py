"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from worms.api.dependencies import set_game_session
from worms.api.routes import api_router
from worms.api.session import GameSession
from worms.config import GameConfig
from worms.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None, scripted: int = 0) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_game_session(GameSession(_config, scripted=scripted))
        logger.info("API server started: match ready.")
        yield
        set_game_session(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Worms Engine",
        description=(
            "Turn-based artillery worms.\n\n"
            "## API Groups\n\n"
            "- **State**: worms, whose turn it is, recent events\n"
            "- **Actions**: move, fall, turn, jump, shoot and switch weapon for the active worm\n"
            "- **Control**: reset the match or end the current turn\n"
            "- **Config**: read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
