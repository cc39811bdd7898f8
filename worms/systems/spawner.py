"""WormSpawner: drop new worms onto solid ground at random columns."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worms.core.enums import Domain
from worms.core.geometry import Position
from worms.core.worm import Worm

if TYPE_CHECKING:
    from worms.core.host import Controller
    from worms.core.world import World
    from worms.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

WORM_NAMES: tuple[str, ...] = (
    "Ann", "Bob", "Chuck Norris", "Dana", "Eddie", "Fred", "Gina", "Hal 9000",
    "Ivy", "Jack O'Neill", "Kim", "Lou", "Mo", "Ned", "Olga", "Pim",
)

_MAX_ATTEMPTS = 50


class WormSpawner:
    """Places worms on adjacent spots chosen from the deterministic RNG."""

    __slots__ = ("_rng", "_spawned")

    def __init__(self, rng: DeterministicRNG) -> None:
        self._rng = rng
        self._spawned = 0

    def find_spot(self, world: World, radius: float, key: int) -> Position | None:
        """Pick a column, start at the top of the map and sink onto the ground."""
        step = radius / world.config.move_step_divisor
        for attempt in range(_MAX_ATTEMPTS):
            x = self._rng.next_uniform(Domain.SPAWN, key, attempt, radius, world.width - radius)
            pos = Position(x, world.height - radius)
            while world.lies_within_world(pos, radius):
                if world.is_adjacent_position(pos, radius):
                    return pos
                if not world.is_passable_spot(pos, radius):
                    break
                pos = pos.with_y(pos.y - step)
        return None

    def spawn(
        self,
        world: World,
        radius: float | None = None,
        name: str | None = None,
        controller: Controller | None = None,
    ) -> Worm | None:
        key = self._spawned
        self._spawned += 1
        if radius is None:
            radius = world.config.default_worm_radius
        if name is None:
            name = WORM_NAMES[key % len(WORM_NAMES)]
        pos = self.find_spot(world, radius, key)
        if pos is None:
            logger.warning("No room for %s after %d attempts", name, _MAX_ATTEMPTS)
            return None
        direction = self._rng.next_heading(Domain.SPAWN, key, _MAX_ATTEMPTS)
        worm = Worm(
            world, pos, radius, name, direction=direction,
            controller=controller, config=world.config, ballistics=world.ballistics,
        )
        world.add_worm(worm)
        logger.info("Spawned %s at %s", name, pos)
        return worm
