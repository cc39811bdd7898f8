"""Geometry primitives: continuous 2D positions and heading helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable 2D coordinate in world meters (y points up)."""

    x: float = 0.0
    y: float = 0.0

    def offset(self, distance: float, angle: float) -> Position:
        """Return the point *distance* away along *angle*."""
        return Position(self.x + distance * math.cos(angle), self.y + distance * math.sin(angle))

    def with_y(self, y: float) -> Position:
        return Position(self.x, y)

    def distance(self, other: Position) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def slope(self, origin: Position) -> float:
        """Angle of the segment from *origin* to this position."""
        return math.atan2(self.y - origin.y, self.x - origin.x)

    def __repr__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"


def is_valid_direction(angle: float) -> bool:
    return isinstance(angle, (int, float)) and math.isfinite(angle)


def can_accept_direction_change(direction: float, delta: float) -> bool:
    return is_valid_direction(direction) and is_valid_direction(delta)


def normalize_direction(angle: float) -> float:
    """Map *angle* onto [0, 2*pi)."""
    result = math.fmod(angle, TWO_PI)
    if result < 0:
        result += TWO_PI
    # fmod of a tiny negative value can round up to exactly 2*pi
    return 0.0 if result >= TWO_PI else result
