"""CombatAction: weapon use.

Projectile flight and damage resolution belong to the world; this handler
only checks the shooter, hands over the projectile and settles the cost.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worms.actions.base import finish_action
from worms.core.exceptions import IllegalShootError
from worms.core.weapons import Projectile, is_valid_yield

if TYPE_CHECKING:
    from worms.core.worm import Worm

logger = logging.getLogger(__name__)


class CombatAction:
    """Stateless handler for shooting."""

    @staticmethod
    def can_shoot(worm: Worm) -> bool:
        return (
            worm.action_points >= 0
            and worm.is_active
            and worm.current_weapon_name is not None
            and worm.world.is_passable_spot(worm.position, worm.radius)
        )

    @staticmethod
    def apply(worm: Worm, yield_: int) -> Projectile:
        if not is_valid_yield(yield_) or not CombatAction.can_shoot(worm):
            raise IllegalShootError(worm, yield_)

        projectile = Projectile(
            world=worm.world, shooter=worm, yield_=yield_,
            weapon=worm.current_weapon, density=worm.config.projectile_density,
        )
        logger.info("%s fires %s (yield %d)", worm.name, projectile.weapon.name, yield_)
        worm.world.set_active_projectile(projectile)
        worm.use_action_points(projectile.weapon.cost)
        worm.world.remove_dead_worms()
        finish_action(worm)
        return projectile
