"""Worm actions: validation and execution of each move a worm can make."""

from worms.actions.combat import CombatAction
from worms.actions.fall import FallAction
from worms.actions.jump import JumpAction
from worms.actions.move import MoveAction, MovePlanner
from worms.actions.turn import TurnAction

__all__ = ["CombatAction", "FallAction", "JumpAction", "MoveAction", "MovePlanner", "TurnAction"]
