"""JumpAction: launch parameters and the end-of-flight predicate.

The flight itself is stepped by a BallisticStepper. This module only
decides whether a jump may start, how hard the worm pushes off and when a
point on the trajectory ends the flight.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worms.actions.base import finish_action
from worms.core.exceptions import IllegalJumpError

if TYPE_CHECKING:
    from worms.core.geometry import Position
    from worms.core.worm import Worm

logger = logging.getLogger(__name__)


def jump_force(action_points: int, mass: float, gravity: float, ap_force: float = 5.0) -> float:
    return ap_force * action_points + mass * gravity


def initial_jump_velocity(force: float, mass: float, factor: float = 0.5) -> float:
    return (force / mass) * factor


class JumpAction:
    """Stateless handler for jumping."""

    @staticmethod
    def can_jump(worm: Worm) -> bool:
        return (
            worm.action_points > 0
            and worm.is_active
            and worm.world.is_passable_spot(worm.position, worm.radius)
        )

    @staticmethod
    def is_finished(worm: Worm, pos: Position) -> bool:
        world = worm.world
        return (
            not worm.is_active
            or world.is_adjacent_position(pos, worm.radius)
            or not world.lies_within_world(pos, worm.radius)
            or world.is_impassable_spot(pos, worm.radius)
        )

    @staticmethod
    def apply(worm: Worm, time_step: float) -> None:
        if not JumpAction.can_jump(worm):
            raise IllegalJumpError(worm)
        start = worm.position
        worm.ballistics.perform_jump(worm, time_step)
        logger.debug("%s jumped %s -> %s", worm.name, start, worm.position)
        worm.use_action_points(worm.action_points)
        finish_action(worm)
