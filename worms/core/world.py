"""World: terrain, the worms on it and the turn order.

Implements the WorldHost capabilities worms rely on, plus the match
bookkeeping (adding worms, whose turn it is, projectile resolution).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worms.config import DEFAULT_CONFIG, GameConfig
from worms.core.geometry import Position
from worms.utils.event_log import EventLog, GameEvent

if TYPE_CHECKING:
    from worms.core.terrain import TerrainMap
    from worms.core.weapons import Projectile
    from worms.core.worm import Worm
    from worms.systems.ballistics import ParabolicStepper

logger = logging.getLogger(__name__)


class World:
    """The single source of truth for a match."""

    __slots__ = (
        "config", "terrain", "worms", "turn", "active_projectile",
        "event_log", "pending_controller", "_active_idx", "_current", "_ballistics",
    )

    def __init__(
        self,
        terrain: TerrainMap,
        config: GameConfig = DEFAULT_CONFIG,
        ballistics: ParabolicStepper | None = None,
    ) -> None:
        if ballistics is None:
            from worms.systems.ballistics import ParabolicStepper
            ballistics = ParabolicStepper(config)
        self.config = config
        self.terrain = terrain
        self.worms: list[Worm] = []
        self.turn: int = 0
        self.active_projectile: Projectile | None = None
        self.event_log = EventLog()
        self.pending_controller: Worm | None = None
        self._active_idx: int = 0
        self._current: Worm | None = None
        self._ballistics = ballistics

    # -- dimensions --

    @property
    def width(self) -> float:
        return self.terrain.width

    @property
    def height(self) -> float:
        return self.terrain.height

    @property
    def gravitational_constant(self) -> float:
        return self.config.gravitational_constant

    @property
    def ballistics(self) -> ParabolicStepper:
        return self._ballistics

    # -- terrain queries --

    def lies_within_world(self, pos: Position, radius: float) -> bool:
        return (
            pos.x - radius >= 0.0 and pos.x + radius <= self.width
            and pos.y - radius >= 0.0 and pos.y + radius <= self.height
        )

    def is_passable_spot(self, pos: Position, radius: float) -> bool:
        return self.terrain.is_passable(pos.x, pos.y, radius)

    def is_impassable_spot(self, pos: Position, radius: float) -> bool:
        return not self.is_passable_spot(pos, radius)

    def is_adjacent_position(self, pos: Position, radius: float) -> bool:
        return self.terrain.is_adjacent(pos.x, pos.y, radius)

    # -- worms --

    def add_worm(self, worm: Worm) -> None:
        if worm.world is not self:
            raise ValueError(f"{worm.name} belongs to another world")
        self.worms.append(worm)
        self._record("spawn", f"{worm.name} joins at {worm.position}", worm)

    def living_worms(self) -> list[Worm]:
        return [w for w in self.worms if w.is_active]

    @property
    def active_worm(self) -> Worm | None:
        return self._current

    def terminate(self, worm: Worm) -> None:
        worm.terminate()
        self._record("terminate", f"{worm.name} left the world", worm)

    def remove_dead_worms(self) -> None:
        survivors = [w for w in self.worms if w.alive and not w.terminated]
        for worm in self.worms:
            if worm not in survivors:
                self._record("purge", f"{worm.name} is removed", worm)
        current = self._current
        if current is not None and current in survivors:
            self._active_idx = survivors.index(current)
        elif current is not None and current in self.worms:
            # Point just before the vacated slot so the next turn lands on
            # the worm that followed the removed one.
            self._active_idx = sum(1 for w in self.worms[:self._active_idx] if w in survivors) - 1
        self.worms = survivors

    # -- turns --

    def start_game(self) -> None:
        self.remove_dead_worms()
        if not self.worms:
            raise ValueError("Cannot start a game without worms")
        self._active_idx = 0
        self._begin_turn()

    def should_start_next_turn(self) -> bool:
        worm = self._current
        return worm is not None and (not worm.is_active or worm.action_points == 0)

    def start_next_turn(self) -> None:
        if self._current is None:
            return
        self.remove_dead_worms()
        if not self.worms:
            logger.info("No worms left after turn %d", self.turn)
            self.pending_controller = None
            return
        self._active_idx = (self._active_idx + 1) % len(self.worms)
        self._begin_turn()

    def _begin_turn(self) -> None:
        self.turn += 1
        worm = self.worms[self._active_idx]
        self._current = worm
        worm.initialize_for_turn()
        self._record("turn", f"Turn {self.turn}: {worm.name}", worm)
        logger.info("Turn %d starts for %s", self.turn, worm.name)
        self.pending_controller = worm if worm.has_controller else None

    def end_turn(self) -> None:
        """Hand the turn to the next worm regardless of points left."""
        self.start_next_turn()

    def run_controllers(self, max_turns: int) -> int:
        """Let scripted worms play until a human worm is up or *max_turns* pass.

        A script that returns without ending its turn forfeits the rest of
        it. Returns the number of scripted turns played.
        """
        played = 0
        while self.pending_controller is not None and played < max_turns:
            worm = self.pending_controller
            self.pending_controller = None
            turn = self.turn
            worm.run_controller()
            played += 1
            if self.turn == turn and self.worms:
                self.start_next_turn()
        return played

    # -- projectiles --

    def set_active_projectile(self, projectile: Projectile) -> None:
        self.active_projectile = projectile
        impact, hits = self._ballistics.fly(projectile, self.living_worms())
        projectile.impact = impact
        projectile.hits = hits
        for target in hits:
            target.deduct_hit_points(projectile.weapon.damage)
            self._record(
                "hit",
                f"{projectile.shooter.name}'s {projectile.weapon.name} hits {target.name} "
                f"for {projectile.weapon.damage}",
                projectile.shooter, target,
            )
        if not hits:
            self._record("miss", f"{projectile.shooter.name}'s {projectile.weapon.name} hits {impact}",
                         projectile.shooter)

    # -- events --

    def _record(self, category: str, message: str, *worms: Worm) -> None:
        self.event_log.append(GameEvent(
            turn=self.turn, category=category, message=message,
            worm_names=tuple(w.name for w in worms),
        ))
