"""FallAction: settle a worm downwards until it rests on terrain."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from worms.actions.base import finish_action

if TYPE_CHECKING:
    from worms.core.geometry import Position
    from worms.core.worm import Worm

logger = logging.getLogger(__name__)


def fall_damage(start_y: float, end_y: float, per_meter: int) -> int:
    return per_meter * int(math.floor(start_y - end_y))


class FallAction:
    """Stateless handler for falling."""

    @staticmethod
    def can_fall(worm: Worm, pos: Position | None = None) -> bool:
        if pos is None:
            pos = worm.position
        return worm.is_active and not worm.world.is_adjacent_position(pos, worm.radius)

    @staticmethod
    def apply(worm: Worm) -> None:
        world = worm.world
        start = worm.position
        step = worm.radius / worm.config.move_step_divisor

        while FallAction.can_fall(worm):
            if not world.lies_within_world(worm.position, worm.radius):
                logger.info("%s fell out of the world", worm.name)
                world.terminate(worm)
                break
            worm.place(worm.position.with_y(worm.position.y - step))

        damage = fall_damage(start.y, worm.position.y, worm.config.fall_damage_per_meter)
        if damage > 0:
            logger.debug("%s fell %.2fm and takes %d damage", worm.name, start.y - worm.position.y, damage)
        worm.deduct_hit_points(damage)
        finish_action(worm)
