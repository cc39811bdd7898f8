"""FakeHost: a scriptable WorldHost for exercising a single worm.

Terrain answers come from plain callables so each test can describe the
ground it needs in one line:

    host = FakeHost(adjacent=lambda p, r: p.y <= 2.5)
    worm = host.worm(position=Position(5, 5))
"""

from __future__ import annotations

import sys
import os
from typing import Callable

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from worms.config import DEFAULT_CONFIG, GameConfig
from worms.core.geometry import Position
from worms.core.weapons import Projectile
from worms.core.worm import Worm

Predicate = Callable[[Position, float], bool]


def _always(pos: Position, radius: float) -> bool:
    return True


class RecordingStepper:
    """BallisticStepper that jumps straight to a fixed landing spot."""

    def __init__(self, landing: Position | None = None) -> None:
        self.landing = landing
        self.calls: list[tuple[Worm, float]] = []

    def perform_jump(self, worm: Worm, time_step: float) -> None:
        self.calls.append((worm, time_step))
        if self.landing is not None:
            worm.place(self.landing)


class FakeHost:
    """Implements every WorldHost hook and records what the worm asked for."""

    def __init__(
        self,
        adjacent: Predicate = _always,
        passable: Predicate = _always,
        within: Predicate = _always,
        gravity: float = 9.80665,
        next_turn: bool = False,
    ) -> None:
        self._adjacent = adjacent
        self._passable = passable
        self._within = within
        self.gravitational_constant = gravity
        self.next_turn = next_turn
        self.terminated: list[Worm] = []
        self.projectiles: list[Projectile] = []
        self.turns_started = 0
        self.purges = 0

    # -- terrain --

    def is_adjacent_position(self, pos: Position, radius: float) -> bool:
        return self._adjacent(pos, radius)

    def is_passable_spot(self, pos: Position, radius: float) -> bool:
        return self._passable(pos, radius)

    def is_impassable_spot(self, pos: Position, radius: float) -> bool:
        return not self._passable(pos, radius)

    def lies_within_world(self, pos: Position, radius: float) -> bool:
        return self._within(pos, radius)

    # -- commands --

    def terminate(self, worm: Worm) -> None:
        self.terminated.append(worm)
        worm.terminate()

    def should_start_next_turn(self) -> bool:
        return self.next_turn

    def start_next_turn(self) -> None:
        self.turns_started += 1

    def set_active_projectile(self, projectile: Projectile) -> None:
        self.projectiles.append(projectile)

    def remove_dead_worms(self) -> None:
        self.purges += 1

    # -- builders --

    def worm(
        self,
        position: Position = Position(5.0, 5.0),
        radius: float = 0.3,
        name: str = "Ann",
        direction: float = 0.0,
        config: GameConfig = DEFAULT_CONFIG,
        **kwargs,
    ) -> Worm:
        kwargs.setdefault("ballistics", RecordingStepper())
        return Worm(self, position, radius, name, direction=direction, config=config, **kwargs)
