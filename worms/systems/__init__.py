"""Reference collaborators: RNG, terrain generation, spawning, ballistics, scripts."""

from worms.systems.ballistics import ParabolicStepper
from worms.systems.controller import CommandScript
from worms.systems.rng import DeterministicRNG
from worms.systems.spawner import WormSpawner
from worms.systems.terrain_gen import generate_terrain

__all__ = ["CommandScript", "DeterministicRNG", "ParabolicStepper", "WormSpawner", "generate_terrain"]
