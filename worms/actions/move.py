"""MoveAction: terrain-aware step selection and its action-point price.

The planner sweeps candidate steps from the longest distance (one radius)
down to ``move_min_distance``. At each distance it fans out from the
heading by ``move_angle_step`` up to ``move_max_deviation`` on both sides.
The first candidate that is adjacent to terrain and inside the world wins:
distances only shrink, so no later candidate can beat it.

When nothing qualifies, the worm may still walk straight ahead onto the
first passable spot. Failing that it stays put.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterator

from worms.actions.base import finish_action
from worms.core.exceptions import IllegalMoveError

if TYPE_CHECKING:
    from worms.core.geometry import Position
    from worms.core.worm import Worm

logger = logging.getLogger(__name__)

_SIGNS = (-1, 1)


def move_cost(slope: float) -> int:
    """Action points needed to step along *slope*; climbing is dearer."""
    return int(math.ceil(abs(math.cos(slope) + 4.0 * math.sin(slope))))


def _distances(worm: Worm) -> Iterator[float]:
    cfg = worm.config
    step = worm.radius / cfg.move_step_divisor
    i = 0
    while True:
        distance = worm.radius - i * step
        if distance < cfg.move_min_distance:
            return
        yield distance
        i += 1


def _deviations(worm: Worm) -> Iterator[float]:
    cfg = worm.config
    count = int(math.floor(cfg.move_max_deviation / cfg.move_angle_step + 1e-9))
    for j in range(count + 1):
        yield j * cfg.move_angle_step


class MovePlanner:
    """Stateless best-step search over the worm's surroundings."""

    @staticmethod
    def is_better_position(worm: Worm, distance: float, best_distance: float, candidate: Position) -> bool:
        world = worm.world
        return (
            distance > best_distance
            and world.is_adjacent_position(candidate, worm.radius)
            and world.lies_within_world(candidate, worm.radius)
        )

    @staticmethod
    def find_position(worm: Worm) -> Position:
        origin = worm.position
        heading = worm.direction
        deviations = tuple(_deviations(worm))

        for distance in _distances(worm):
            for delta in deviations:
                for sign in _SIGNS:
                    candidate = origin.offset(distance, heading + sign * delta)
                    if MovePlanner.is_better_position(worm, distance, 0.0, candidate):
                        logger.debug(
                            "%s: step %.3f at deviation %+.4f -> %s",
                            worm.name, distance, sign * delta, candidate,
                        )
                        return candidate

        for distance in _distances(worm):
            candidate = origin.offset(distance, heading)
            if worm.world.is_passable_spot(candidate, worm.radius):
                logger.debug("%s: no grounded step, walking ahead to %s", worm.name, candidate)
                return candidate

        return origin


class MoveAction:
    """Stateless handler for worm movement."""

    @staticmethod
    def validate(worm: Worm, target: Position) -> bool:
        # Staying put is not a move: it is refused rather than charged.
        if target == worm.position:
            return False
        cost = move_cost(target.slope(worm.position))
        return worm.action_points >= cost and worm.action_points > 0 and worm.is_active

    @staticmethod
    def can_move(worm: Worm) -> bool:
        if not worm.is_active:
            return False
        return MoveAction.validate(worm, MovePlanner.find_position(worm))

    @staticmethod
    def apply(worm: Worm) -> None:
        old_pos = worm.position
        new_pos = MovePlanner.find_position(worm)
        if not MoveAction.validate(worm, new_pos):
            raise IllegalMoveError(worm)

        cost = move_cost(new_pos.slope(old_pos))
        worm.place(new_pos)
        if not worm.world.lies_within_world(new_pos, worm.radius):
            logger.info("%s walked out of the world at %s", worm.name, new_pos)
            worm.world.terminate(worm)
        worm.use_action_points(cost)
        logger.debug("%s moved %s -> %s for %d AP", worm.name, old_pos, new_pos, cost)
        finish_action(worm)
