"""Capabilities a worm needs from the world it lives in.

The worm keeps a non-owning reference to a :class:`WorldHost` and never
reaches past this interface, so tests can supply a small fake.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from worms.core.geometry import Position
    from worms.core.weapons import Projectile
    from worms.core.worm import Worm


@runtime_checkable
class WorldHost(Protocol):
    """Terrain queries plus the turn and projectile hooks."""

    gravitational_constant: float

    def is_adjacent_position(self, pos: Position, radius: float) -> bool: ...

    def is_passable_spot(self, pos: Position, radius: float) -> bool: ...

    def is_impassable_spot(self, pos: Position, radius: float) -> bool: ...

    def lies_within_world(self, pos: Position, radius: float) -> bool: ...

    def terminate(self, worm: Worm) -> None: ...

    def should_start_next_turn(self) -> bool: ...

    def start_next_turn(self) -> None: ...

    def set_active_projectile(self, projectile: Projectile) -> None: ...

    def remove_dead_worms(self) -> None: ...


@runtime_checkable
class Controller(Protocol):
    """Something that can drive a worm's actions on its behalf."""

    def bind(self, worm: Worm) -> None: ...

    def run(self) -> None: ...


class BallisticStepper(Protocol):
    """Integrates a jump trajectory for a worm."""

    def perform_jump(self, worm: Worm, time_step: float) -> None: ...
