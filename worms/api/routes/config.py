"""GET /api/v1/config: expose the game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from worms.api.dependencies import get_game_session
from worms.api.schemas import GameConfigResponse
from worms.api.session import GameSession

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(session: GameSession = Depends(get_game_session)) -> GameConfigResponse:
    cfg = session.config
    return GameConfigResponse(
        world_seed=cfg.world_seed,
        world_width=cfg.world_width,
        world_height=cfg.world_height,
        worm_count=cfg.worm_count,
        default_worm_radius=cfg.default_worm_radius,
        density=cfg.density,
        min_radius=cfg.min_radius,
        gravitational_constant=cfg.gravitational_constant,
        hp_regen_per_turn=cfg.hp_regen_per_turn,
    )
