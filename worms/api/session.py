"""GameSession: owns one match and serializes access to it.

Each HTTP request runs one action to completion under the session lock,
so at most one worm acts at a time.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, TypeVar

from worms.core.world import World
from worms.systems.controller import CommandScript
from worms.systems.rng import DeterministicRNG
from worms.systems.spawner import WormSpawner
from worms.systems.terrain_gen import generate_terrain

if TYPE_CHECKING:
    from worms.config import GameConfig
    from worms.core.worm import Worm

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Script handed to computer-controlled worms in a fresh match.
DEFAULT_SCRIPT: tuple[str, ...] = ("fall", "move", "move", "turn 0.3", "shoot 60", "move")


class NoActiveWormError(RuntimeError):
    """Raised when an action targets the active worm but none is up."""


class GameSession:
    """Builds a match from config and runs actions on it one at a time."""

    def __init__(self, config: GameConfig, scripted: int = 0, max_scripted_turns: int = 50) -> None:
        self.config = config
        self._scripted = scripted
        self._max_scripted_turns = max_scripted_turns
        self._lock = threading.Lock()
        self._world: World | None = None
        self._build()

    @property
    def world(self) -> World:
        assert self._world is not None
        return self._world

    # -- lifecycle --

    def _build(self) -> None:
        cfg = self.config
        rng = DeterministicRNG(cfg.world_seed)
        world = World(generate_terrain(cfg, rng), cfg)
        spawner = WormSpawner(rng)
        for i in range(cfg.worm_count):
            controller = CommandScript(list(DEFAULT_SCRIPT)) if i >= cfg.worm_count - self._scripted else None
            spawner.spawn(world, controller=controller)
        if world.worms:
            world.start_game()
            world.run_controllers(self._max_scripted_turns)
        self._world = world
        logger.info("Match ready: %d worms, seed %d", len(world.worms), cfg.world_seed)

    def reset(self) -> None:
        with self._lock:
            self._build()

    # -- access --

    def read(self, fn: Callable[[World], T]) -> T:
        with self._lock:
            return fn(self.world)

    def act(self, fn: Callable[[Worm], T]) -> T:
        """Run *fn* on the active worm, then let scripted worms play."""
        with self._lock:
            world = self.world
            worm = world.active_worm
            if worm is None or not worm.is_active:
                raise NoActiveWormError("No worm is currently able to act.")
            result = fn(worm)
            world.run_controllers(self._max_scripted_turns)
            return result

    def end_turn(self) -> None:
        with self._lock:
            world = self.world
            if world.active_worm is None:
                raise NoActiveWormError("The match has not started.")
            world.end_turn()
            world.run_controllers(self._max_scripted_turns)
