"""Stat model: mass and point-pool maxima derived from the radius.

Every derived quantity is a pure function of the one before it:
radius -> mass -> max action points / max hit points.
"""

from __future__ import annotations

import math
import re

_NAME_CHARS = re.compile(r"[A-Za-z0-9'\" ]*")


def calculate_mass(radius: float, density: float) -> float:
    """Mass of a sphere of the given radius and density."""
    return density * ((4.0 / 3.0) * math.pi * radius ** 3)


def calculate_max_action_points(mass: float) -> int:
    """Nearest integer, halves rounding up."""
    return int(math.floor(mass + 0.5))


def calculate_max_hit_points(mass: float) -> int:
    return int(math.floor(mass + 0.5))


def is_valid_radius(radius: float, min_radius: float) -> bool:
    return (
        isinstance(radius, (int, float))
        and not math.isnan(radius)
        and not math.isinf(radius)
        and radius >= min_radius
    )


def is_valid_min_radius(min_radius: float) -> bool:
    return min_radius > 0


def is_valid_name(name: str) -> bool:
    """At least two characters, leading uppercase, letters/digits/quotes/spaces only."""
    return (
        isinstance(name, str)
        and len(name) >= 2
        and name[0].isupper()
        and _NAME_CHARS.fullmatch(name) is not None
    )
