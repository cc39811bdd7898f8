"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a match."""

    # Worm physics
    density: float = 1062.0                 # kg/m^3, mass = density * sphere volume
    min_radius: float = 0.25
    hp_regen_per_turn: int = 10
    fall_damage_per_meter: int = 3
    turn_cost_per_rotation: int = 60        # AP for a full 2*pi turn

    # Movement search
    move_step_divisor: int = 100            # distance step = radius / divisor
    move_min_distance: float = 0.1
    move_max_deviation: float = 0.7875      # radians either side of the heading
    move_angle_step: float = 0.0175

    # Jumping
    jump_ap_force: float = 5.0              # N per remaining action point
    jump_velocity_factor: float = 0.5       # force is applied for half a second
    jump_time_step: float = 0.01
    max_flight_time: float = 30.0

    # World
    world_seed: int = 42
    world_width: float = 20.0
    world_height: float = 12.0
    terrain_columns: int = 200
    terrain_rows: int = 120
    gravitational_constant: float = 9.80665

    # Projectiles
    projectile_density: float = 7800.0

    # Match
    worm_count: int = 4
    default_worm_radius: float = 0.3

    # Logging
    log_level: str = "INFO"


DEFAULT_CONFIG = GameConfig()
