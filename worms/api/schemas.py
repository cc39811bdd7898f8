"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel


class PositionSchema(BaseModel):
    x: float
    y: float


class WormSchema(BaseModel):
    name: str
    position: PositionSchema
    direction: float
    radius: float
    mass: float
    action_points: int
    max_action_points: int
    hit_points: int
    max_hit_points: int
    weapon: str | None = None
    active: bool = True
    scripted: bool = False


class EventSchema(BaseModel):
    turn: int
    category: str
    message: str
    worm_names: list[str] = []


class WorldStateResponse(BaseModel):
    turn: int
    width: float
    height: float
    active_worm: str | None = None
    worms: list[WormSchema]
    events: list[EventSchema]


class ActionResponse(BaseModel):
    status: str
    message: str
    turn: int
    worm: WormSchema | None = None


class GameConfigResponse(BaseModel):
    world_seed: int
    world_width: float
    world_height: float
    worm_count: int
    default_worm_radius: float
    density: float
    min_radius: float
    gravitational_constant: float
    hp_regen_per_turn: int
