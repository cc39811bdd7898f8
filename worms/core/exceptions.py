"""Worms exception hierarchy.

Action legality failures carry the offending worm so callers can report
which actor was refused.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from worms.core.worm import Worm


class WormsError(Exception):
    """Root of all Worms domain exceptions."""


class ConfigurationError(WormsError):
    """Invalid or inconsistent configuration."""


class WormError(WormsError):
    """An action or mutation refused for a specific worm."""

    def __init__(self, worm: Worm | None, message: str) -> None:
        super().__init__(message)
        self.worm = worm


class IllegalRadiusError(WormError):
    def __init__(self, worm: Worm | None, radius: float) -> None:
        super().__init__(worm, f"Illegal radius {radius!r}")
        self.radius = radius


class IllegalNameError(WormError):
    def __init__(self, worm: Worm | None, name: str) -> None:
        super().__init__(worm, f"Illegal name {name!r}")
        self.name = name


class IllegalMoveError(WormError):
    def __init__(self, worm: Worm) -> None:
        super().__init__(worm, f"{worm.name} cannot move")


class IllegalJumpError(WormError):
    def __init__(self, worm: Worm) -> None:
        super().__init__(worm, f"{worm.name} cannot jump")


class IllegalShootError(WormError):
    def __init__(self, worm: Worm, yield_: int) -> None:
        super().__init__(worm, f"{worm.name} cannot shoot with yield {yield_}")
        self.yield_ = yield_
