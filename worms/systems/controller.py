"""CommandScript: a minimal scripted controller for computer worms.

A script is a list of text commands run in order on the worm's turn::

    move            step once along the heading
    turn <radians>  rotate by a signed angle
    jump            jump with the configured time step
    fall            settle onto the ground
    shoot <yield>   fire the selected weapon
    next_weapon     cycle to the next weapon

Commands the worm cannot perform right now are skipped. The script stops
once the worm is inactive or its turn has passed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from worms.core.exceptions import WormError

if TYPE_CHECKING:
    from worms.core.worm import Worm

logger = logging.getLogger(__name__)


Args = list[float]


def _move(worm: Worm, args: Args) -> bool:
    if not worm.can_move():
        return False
    worm.move()
    return True


def _turn(worm: Worm, args: Args) -> bool:
    angle = args[0]
    if not worm.can_turn(angle):
        return False
    worm.turn(angle)
    return True


def _jump(worm: Worm, args: Args) -> bool:
    if not worm.can_jump():
        return False
    worm.jump()
    return True


def _fall(worm: Worm, args: Args) -> bool:
    if not worm.can_fall():
        return False
    worm.fall()
    return True


def _shoot(worm: Worm, args: Args) -> bool:
    if not worm.can_shoot():
        return False
    worm.shoot(int(args[0]) if args else 50)
    return True


def _next_weapon(worm: Worm, args: Args) -> bool:
    worm.select_next_weapon()
    return True


COMMANDS: dict[str, Callable[[Worm, Args], bool]] = {
    "move": _move,
    "turn": _turn,
    "jump": _jump,
    "fall": _fall,
    "shoot": _shoot,
    "next_weapon": _next_weapon,
}

# verb -> (min args, max args, argument type)
_SIGNATURES: dict[str, tuple[int, int, type]] = {
    "move": (0, 0, float),
    "turn": (1, 1, float),
    "jump": (0, 0, float),
    "fall": (0, 0, float),
    "shoot": (0, 1, int),
    "next_weapon": (0, 0, float),
}


def parse_script(lines: list[str]) -> list[tuple[str, Args]]:
    """Split and type-check commands up front so a typo fails at load time."""
    parsed: list[tuple[str, Args]] = []
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        verb, raw = parts[0].lower(), parts[1:]
        if verb not in COMMANDS:
            raise ValueError(f"Unknown command {verb!r}")
        low, high, kind = _SIGNATURES[verb]
        if not low <= len(raw) <= high:
            raise ValueError(f"{verb} takes {low}..{high} arguments, got {len(raw)}")
        try:
            args = [kind(a) for a in raw]
        except ValueError:
            raise ValueError(f"Bad argument for {verb}: {' '.join(raw)!r}") from None
        parsed.append((verb, args))
    return parsed


class CommandScript:
    """Runs a fixed list of commands each time its worm's turn comes up."""

    __slots__ = ("_commands", "_worm", "executed", "skipped")

    def __init__(self, lines: list[str]) -> None:
        self._commands = parse_script(lines)
        self._worm: Worm | None = None
        self.executed = 0
        self.skipped = 0

    @property
    def worm(self) -> Worm | None:
        return self._worm

    def bind(self, worm: Worm) -> None:
        self._worm = worm

    def run(self) -> None:
        worm = self._worm
        if worm is None:
            raise RuntimeError("CommandScript is not bound to a worm")
        world = worm.world
        for verb, args in self._commands:
            if not worm.is_active or getattr(world, "active_worm", worm) is not worm:
                break
            try:
                done = COMMANDS[verb](worm, args)
            except WormError as exc:
                logger.debug("%s: %s refused (%s)", worm.name, verb, exc)
                done = False
            if done:
                self.executed += 1
            else:
                self.skipped += 1
                logger.debug("%s skips %s %s", worm.name, verb, " ".join(str(a) for a in args))
