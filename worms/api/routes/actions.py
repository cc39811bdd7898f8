"""POST /api/v1/worms/active/{action}: drive the worm whose turn it is."""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, Query

from worms.api.dependencies import get_game_session
from worms.api.routes.state import serialize_worm
from worms.api.schemas import ActionResponse
from worms.api.session import GameSession, NoActiveWormError
from worms.core.exceptions import WormError
from worms.core.worm import Worm

router = APIRouter(prefix="/worms/active")


def _run(session: GameSession, label: str, fn: Callable[[Worm], object]) -> ActionResponse:
    def apply(worm: Worm) -> ActionResponse:
        fn(worm)
        return ActionResponse(
            status="ok", message=f"{worm.name}: {label}",
            turn=session.world.turn, worm=serialize_worm(worm),
        )

    try:
        return session.act(apply)
    except (NoActiveWormError, WormError) as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.post("/move", response_model=ActionResponse)
def move(session: GameSession = Depends(get_game_session)) -> ActionResponse:
    return _run(session, "moved", lambda w: w.move())


@router.post("/fall", response_model=ActionResponse)
def fall(session: GameSession = Depends(get_game_session)) -> ActionResponse:
    return _run(session, "fell", lambda w: w.fall())


@router.post("/jump", response_model=ActionResponse)
def jump(session: GameSession = Depends(get_game_session)) -> ActionResponse:
    return _run(session, "jumped", lambda w: w.jump())


def _turn(angle: float) -> Callable[[Worm], None]:
    def apply(worm: Worm) -> None:
        if not worm.can_turn(angle):
            raise WormError(worm, f"{worm.name} cannot turn by {angle}")
        worm.turn(angle)
    return apply


@router.post("/turn", response_model=ActionResponse)
def turn(
    angle: float = Query(..., description="Signed rotation in radians"),
    session: GameSession = Depends(get_game_session),
) -> ActionResponse:
    return _run(session, f"turned {angle:+.3f} rad", _turn(angle))


@router.post("/shoot", response_model=ActionResponse)
def shoot(
    yield_: int = Query(50, alias="yield", ge=0, le=100),
    session: GameSession = Depends(get_game_session),
) -> ActionResponse:
    return _run(session, f"fired with yield {yield_}", lambda w: w.shoot(yield_))


@router.post("/next-weapon", response_model=ActionResponse)
def next_weapon(session: GameSession = Depends(get_game_session)) -> ActionResponse:
    return _run(session, "switched weapon", lambda w: w.select_next_weapon())
