"""POST /api/v1/control/{action}: match lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException

from worms.api.dependencies import get_game_session
from worms.api.schemas import ActionResponse
from worms.api.session import GameSession, NoActiveWormError

router = APIRouter()


class ControlAction(str, Enum):
    reset = "reset"
    end_turn = "end-turn"


@router.post("/control/{action}", response_model=ActionResponse)
def control(
    action: ControlAction,
    session: GameSession = Depends(get_game_session),
) -> ActionResponse:
    match action:
        case ControlAction.reset:
            session.reset()
            message = "Match reset."
        case ControlAction.end_turn:
            try:
                session.end_turn()
            except NoActiveWormError as exc:
                raise HTTPException(status_code=409, detail=str(exc)) from exc
            message = "Turn ended."
    turn = session.read(lambda world: world.turn)
    return ActionResponse(status="ok", message=message, turn=turn)
