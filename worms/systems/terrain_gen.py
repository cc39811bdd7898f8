"""Seeded rolling-hills terrain."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from worms.core.enums import Domain
from worms.core.terrain import TerrainMap

if TYPE_CHECKING:
    from worms.config import GameConfig
    from worms.systems.rng import DeterministicRNG

_WAVES = 3


def generate_terrain(config: GameConfig, rng: DeterministicRNG) -> TerrainMap:
    """Sum a few random sine waves into a ground line and fill below it.

    Ground stays between 15% and 60% of the map height so there is always
    a floor to stand on and open sky to jump into.
    """
    terrain = TerrainMap(config.world_width, config.world_height, config.terrain_columns, config.terrain_rows)
    waves = [
        (
            rng.next_uniform(Domain.TERRAIN, w, 0, 0.5, 2.5),          # frequency (cycles per map)
            rng.next_uniform(Domain.TERRAIN, w, 1, 0.0, 2 * math.pi),  # phase
            rng.next_uniform(Domain.TERRAIN, w, 2, 0.3, 1.0),          # weight
        )
        for w in range(_WAVES)
    ]
    total = sum(weight for _, _, weight in waves)
    low, high = 0.15, 0.60
    for col in range(terrain.columns):
        u = col / terrain.columns
        wave = sum(weight * math.sin(2 * math.pi * freq * u + phase) for freq, phase, weight in waves) / total
        level = low + (high - low) * (wave + 1.0) / 2.0
        terrain.fill_column(col, int(level * terrain.rows))
    return terrain
