"""TurnAction: rotating the worm in place."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from worms.actions.base import finish_action
from worms.core.geometry import TWO_PI, can_accept_direction_change, is_valid_direction

if TYPE_CHECKING:
    from worms.core.worm import Worm


def turn_cost(angle: float, cost_per_rotation: int) -> int:
    return int(math.ceil(abs(angle / TWO_PI * cost_per_rotation)))


class TurnAction:
    """Stateless handler for turning.

    Turning with an illegal angle is a caller bug: check :meth:`can_turn`
    first.
    """

    @staticmethod
    def can_turn(worm: Worm, angle: float) -> bool:
        if not is_valid_direction(angle):
            return False
        cost = turn_cost(angle, worm.config.turn_cost_per_rotation)
        return (
            worm.action_points >= cost
            and worm.action_points > 0
            and can_accept_direction_change(worm.direction, angle)
        )

    @staticmethod
    def apply(worm: Worm, angle: float) -> None:
        assert TurnAction.can_turn(worm, angle), "Precondition: acceptable turn angle"
        worm.rotate(angle)
        worm.use_action_points(turn_cost(angle, worm.config.turn_cost_per_rotation))
        finish_action(worm)
