"""Shared action plumbing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from worms.core.worm import Worm


def finish_action(worm: Worm) -> None:
    """Turn-advance check run after every completed action."""
    world = worm.world
    if world.should_start_next_turn():
        world.start_next_turn()
