"""GET /api/v1/state: worms, turn and recent events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query

from worms.api.dependencies import get_game_session
from worms.api.schemas import EventSchema, PositionSchema, WorldStateResponse, WormSchema
from worms.api.session import GameSession

if TYPE_CHECKING:
    from worms.core.world import World
    from worms.core.worm import Worm

router = APIRouter()


def serialize_worm(worm: Worm) -> WormSchema:
    return WormSchema(
        name=worm.name,
        position=PositionSchema(x=worm.position.x, y=worm.position.y),
        direction=worm.direction,
        radius=worm.radius,
        mass=worm.mass,
        action_points=worm.action_points,
        max_action_points=worm.max_action_points,
        hit_points=worm.hit_points,
        max_hit_points=worm.max_hit_points,
        weapon=worm.current_weapon_name,
        active=worm.is_active,
        scripted=worm.has_controller,
    )


@router.get("/state", response_model=WorldStateResponse)
def get_state(
    events: int = Query(50, ge=0, le=1000, description="Number of recent events"),
    session: GameSession = Depends(get_game_session),
) -> WorldStateResponse:
    def _snapshot(world: World) -> WorldStateResponse:
        active = world.active_worm
        return WorldStateResponse(
            turn=world.turn,
            width=world.width,
            height=world.height,
            active_worm=active.name if active is not None else None,
            worms=[serialize_worm(w) for w in world.worms],
            events=[
                EventSchema(turn=e.turn, category=e.category, message=e.message, worm_names=list(e.worm_names))
                for e in (world.event_log.latest(events) if events else [])
            ],
        )

    return session.read(_snapshot)
