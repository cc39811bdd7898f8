"""ParabolicStepper: closed-form ballistic flight for jumps and shots.

Positions are sampled every ``time_step`` seconds along
``p(t) = p0 + v0*t*(cos a, sin a) - (0, g*t^2/2)`` until the flight ends or
``max_flight_time`` runs out.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterator

from worms.config import DEFAULT_CONFIG, GameConfig
from worms.core.geometry import Position

if TYPE_CHECKING:
    from worms.core.weapons import Projectile
    from worms.core.worm import Worm

logger = logging.getLogger(__name__)


def trajectory(
    origin: Position,
    direction: float,
    velocity: float,
    gravity: float,
    time_step: float,
    max_time: float,
) -> Iterator[tuple[float, Position]]:
    """Yield ``(t, position)`` samples, starting one step after launch."""
    if time_step <= 0:
        raise ValueError(f"time_step must be positive, got {time_step}")
    vx = velocity * math.cos(direction)
    vy = velocity * math.sin(direction)
    steps = int(max_time / time_step)
    for i in range(1, steps + 1):
        t = i * time_step
        yield t, Position(origin.x + vx * t, origin.y + vy * t - 0.5 * gravity * t * t)


class ParabolicStepper:
    """Steps worms and projectiles through their flight."""

    __slots__ = ("_config",)

    def __init__(self, config: GameConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def jump_path(self, worm: Worm, time_step: float) -> Iterator[tuple[float, Position]]:
        velocity = worm.initial_jump_velocity(worm.jump_force)
        return trajectory(
            worm.position, worm.direction, velocity,
            worm.world.gravitational_constant, time_step, self._config.max_flight_time,
        )

    def landing(self, worm: Worm, time_step: float) -> Position:
        """First finished point at least one radius away from the take-off."""
        start = worm.position
        last = start
        for _, pos in self.jump_path(worm, time_step):
            last = pos
            if pos.distance(start) >= worm.radius and worm.is_jump_finished(pos):
                return pos
        return last

    def perform_jump(self, worm: Worm, time_step: float) -> None:
        target = self.landing(worm, time_step)
        worm.place(target)
        if not worm.world.lies_within_world(target, worm.radius):
            logger.info("%s jumped out of the world", worm.name)
            worm.world.terminate(worm)

    def fly(self, projectile: Projectile, targets: list[Worm]) -> tuple[Position, list[Worm]]:
        """Fly *projectile* until it hits a worm, terrain or leaves the world.

        Returns the impact point and the worms within reach of it.
        """
        world = projectile.world
        radius = projectile.radius
        others = [w for w in targets if w is not projectile.shooter]
        impact = projectile.position
        path = trajectory(
            projectile.position, projectile.direction, projectile.initial_velocity(),
            world.gravitational_constant, self._config.jump_time_step, self._config.max_flight_time,
        )
        for _, pos in path:
            impact = pos
            hits = [w for w in others if w.position.distance(pos) <= w.radius + radius]
            if hits:
                return pos, hits
            if not world.lies_within_world(pos, radius) or world.is_impassable_spot(pos, radius):
                break
        logger.debug("%s projectile came down at %s", projectile.weapon.name, impact)
        return impact, []
