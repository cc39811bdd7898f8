"""Worm: the controllable actor and its stat invariants.

A worm's mass is a function of its radius, and both point-pool maxima are
functions of its mass. Radius changes are validated as a whole so these
quantities can never disagree:

    mass            == density * 4/3 * pi * radius**3
    max_action_pts  == round(mass)   >= action_points >= 0
    max_hit_points  == round(mass)   >= hit_points    >= 0

Actions (move, fall, turn, jump, shoot) live in ``worms.actions``; the
methods here are the public entry points that delegate to them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worms.actions.combat import CombatAction
from worms.actions.fall import FallAction
from worms.actions.jump import JumpAction, initial_jump_velocity, jump_force
from worms.actions.move import MoveAction
from worms.actions.turn import TurnAction
from worms.config import DEFAULT_CONFIG, GameConfig
from worms.core.exceptions import ConfigurationError, IllegalNameError, IllegalRadiusError
from worms.core.geometry import Position, normalize_direction
from worms.core.ledger import PointPool
from worms.core.stats import (
    calculate_mass,
    calculate_max_action_points,
    calculate_max_hit_points,
    is_valid_min_radius,
    is_valid_name,
    is_valid_radius,
)
from worms.core.weapons import DEFAULT_LOADOUT, WEAPONS, Weapon

if TYPE_CHECKING:
    from worms.core.host import BallisticStepper, Controller, WorldHost
    from worms.core.weapons import Projectile

logger = logging.getLogger(__name__)


class Worm:
    """A single worm standing in a world."""

    def __init__(
        self,
        world: WorldHost,
        position: Position,
        radius: float,
        name: str,
        direction: float = 0.0,
        controller: Controller | None = None,
        config: GameConfig = DEFAULT_CONFIG,
        ballistics: BallisticStepper | None = None,
    ) -> None:
        if not is_valid_min_radius(config.min_radius):
            raise ConfigurationError(f"min_radius must be positive, got {config.min_radius}")
        self._config = config
        self._min_radius = config.min_radius
        if not is_valid_radius(radius, self._min_radius):
            raise IllegalRadiusError(None, radius)
        if not is_valid_name(name):
            raise IllegalNameError(None, name)

        self._world = world
        self._position = position
        self._direction = normalize_direction(direction)
        self._radius = radius
        self._mass = calculate_mass(radius, config.density)
        self._action_points = PointPool.full(calculate_max_action_points(self._mass))
        self._hit_points = PointPool.full(calculate_max_hit_points(self._mass))
        self._name = name
        self._weapons: list[Weapon] = [WEAPONS[kind] for kind in DEFAULT_LOADOUT]
        self._weapon_idx = 0
        self._terminated = False

        if ballistics is None:
            from worms.systems.ballistics import ParabolicStepper
            ballistics = ParabolicStepper(config)
        self._ballistics = ballistics

        self._controller = controller
        if controller is not None:
            controller.bind(self)

    def __repr__(self) -> str:
        return (
            f"Worm({self._name!r}, pos={self._position}, r={self._radius:.3f}, "
            f"AP={self.action_points}/{self.max_action_points}, "
            f"HP={self.hit_points}/{self.max_hit_points})"
        )

    # -- collaborators --

    @property
    def world(self) -> WorldHost:
        return self._world

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def ballistics(self) -> BallisticStepper:
        return self._ballistics

    # -- geometry --

    @property
    def position(self) -> Position:
        return self._position

    def place(self, position: Position) -> None:
        """Move the worm without any rule checks (used by actions and spawners)."""
        self._position = position

    @property
    def direction(self) -> float:
        return self._direction

    def rotate(self, delta: float) -> None:
        self._direction = normalize_direction(self._direction + delta)

    # -- radius & mass --

    @property
    def min_radius(self) -> float:
        return self._min_radius

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def mass(self) -> float:
        return self._mass

    def can_have_as_radius(self, radius: float) -> bool:
        return is_valid_radius(radius, self._min_radius)

    def can_accept_for_change_radius(self, radius: float) -> bool:
        if not self.can_have_as_radius(radius):
            return False
        mass = calculate_mass(radius, self._config.density)
        return (
            self._action_points.can_have_as_maximum(calculate_max_action_points(mass))
            and self._hit_points.can_have_as_maximum(calculate_max_hit_points(mass))
        )

    def change_radius(self, radius: float) -> None:
        if not self.can_accept_for_change_radius(radius):
            raise IllegalRadiusError(self, radius)
        mass = calculate_mass(radius, self._config.density)
        self._radius = radius
        self._mass = mass
        self._action_points.resize(calculate_max_action_points(mass))
        self._hit_points.resize(calculate_max_hit_points(mass))

    # -- action points --

    @property
    def action_points(self) -> int:
        return self._action_points.current

    @property
    def max_action_points(self) -> int:
        return self._action_points.maximum

    def use_action_points(self, amount: int) -> None:
        self._action_points.spend(amount)

    # -- hit points --

    @property
    def hit_points(self) -> int:
        return self._hit_points.current

    @property
    def max_hit_points(self) -> int:
        return self._hit_points.maximum

    def deduct_hit_points(self, amount: int) -> None:
        self._hit_points.deduct_to_live(amount)

    @property
    def alive(self) -> bool:
        return self._hit_points.current > 0

    # -- name --

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not is_valid_name(name):
            raise IllegalNameError(self, name)
        self._name = name

    # -- lifecycle --

    @property
    def terminated(self) -> bool:
        return self._terminated

    @property
    def is_active(self) -> bool:
        return not self._terminated and self.alive

    def terminate(self) -> None:
        """Called by the world once it has decided this worm is gone."""
        self._terminated = True

    def initialize_for_turn(self) -> None:
        self._action_points.refill()
        self._hit_points.regenerate(self._config.hp_regen_per_turn)

    # -- movement --

    def can_move(self) -> bool:
        return MoveAction.can_move(self)

    def move(self) -> None:
        MoveAction.apply(self)

    def can_fall(self) -> bool:
        return FallAction.can_fall(self)

    def fall(self) -> None:
        FallAction.apply(self)

    def can_turn(self, angle: float) -> bool:
        return TurnAction.can_turn(self, angle)

    def turn(self, angle: float) -> None:
        TurnAction.apply(self, angle)

    # -- jumping --

    @property
    def jump_force(self) -> float:
        return jump_force(
            self.action_points, self._mass,
            self._world.gravitational_constant, self._config.jump_ap_force,
        )

    def initial_jump_velocity(self, force: float) -> float:
        return initial_jump_velocity(force, self._mass, self._config.jump_velocity_factor)

    def can_jump(self) -> bool:
        return JumpAction.can_jump(self)

    def is_jump_finished(self, pos: Position) -> bool:
        return JumpAction.is_finished(self, pos)

    def jump(self, time_step: float | None = None) -> None:
        JumpAction.apply(self, self._config.jump_time_step if time_step is None else time_step)

    # -- weapons --

    @property
    def weapons(self) -> tuple[Weapon, ...]:
        return tuple(self._weapons)

    @property
    def weapon_index(self) -> int:
        return self._weapon_idx

    @property
    def current_weapon(self) -> Weapon:
        return self._weapons[self._weapon_idx]

    @property
    def current_weapon_name(self) -> str | None:
        if not self._weapons:
            return None
        return self.current_weapon.name

    def select_next_weapon(self) -> None:
        self._weapon_idx += 1
        if self._weapon_idx >= len(self._weapons):
            self._weapon_idx = 0

    def can_shoot(self) -> bool:
        return CombatAction.can_shoot(self)

    def shoot(self, yield_: int) -> Projectile:
        return CombatAction.apply(self, yield_)

    # -- scripted control --

    @property
    def controller(self) -> Controller | None:
        return self._controller

    @property
    def has_controller(self) -> bool:
        return self._controller is not None

    def run_controller(self) -> None:
        if self._controller is None:
            return
        logger.debug("Running controller for %s", self._name)
        self._controller.run()
