"""Weapon catalogue and projectile requests.

Weapons form a closed set keyed by :class:`WeaponKind`. To add a weapon:
  1. Add a WeaponKind member.
  2. Register a Weapon in WEAPONS.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum, unique
from typing import TYPE_CHECKING

from worms.core.geometry import Position

if TYPE_CHECKING:
    from worms.core.host import WorldHost
    from worms.core.worm import Worm

MAX_YIELD = 100


@unique
class WeaponKind(IntEnum):
    RIFLE = 0
    BAZOOKA = 1


@dataclass(frozen=True, slots=True)
class Weapon:
    """Static definition of an equippable weapon."""

    kind: WeaponKind
    name: str
    cost: int                   # action points per shot
    damage: int                 # hit points removed from a worm that is hit
    projectile_mass: float      # kg
    min_force: float            # N at yield 0
    max_force: float            # N at yield MAX_YIELD

    def force(self, yield_: int) -> float:
        return self.min_force + (self.max_force - self.min_force) * yield_ / MAX_YIELD


WEAPONS: dict[WeaponKind, Weapon] = {
    WeaponKind.RIFLE: Weapon(
        kind=WeaponKind.RIFLE, name="Rifle", cost=10, damage=20,
        projectile_mass=0.010, min_force=1.5, max_force=1.5,
    ),
    WeaponKind.BAZOOKA: Weapon(
        kind=WeaponKind.BAZOOKA, name="Bazooka", cost=50, damage=80,
        projectile_mass=0.300, min_force=2.5, max_force=9.5,
    ),
}

DEFAULT_LOADOUT: tuple[WeaponKind, ...] = (WeaponKind.RIFLE, WeaponKind.BAZOOKA)


def is_valid_yield(yield_: int) -> bool:
    return isinstance(yield_, int) and 0 <= yield_ <= MAX_YIELD


@dataclass(slots=True)
class Projectile:
    """A shot handed to the world for ballistic resolution."""

    world: WorldHost
    shooter: Worm
    yield_: int
    weapon: Weapon
    density: float = 7800.0
    position: Position = field(init=False)
    direction: float = field(init=False)
    impact: Position | None = field(default=None, init=False)
    hits: list[Worm] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.direction = self.shooter.direction
        self.position = self.shooter.position.offset(self.shooter.radius, self.direction)

    @property
    def mass(self) -> float:
        return self.weapon.projectile_mass

    @property
    def radius(self) -> float:
        return (self.mass / (self.density * (4.0 / 3.0) * math.pi)) ** (1.0 / 3.0)

    @property
    def force(self) -> float:
        return self.weapon.force(self.yield_)

    def initial_velocity(self) -> float:
        return (self.force / self.mass) * 0.5
