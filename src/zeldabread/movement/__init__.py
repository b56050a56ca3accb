from .participant import DEFAULT_MAX_ENERGY, Participant
from .validator import MOVE_COST, MoveOutcome, MovementValidator

__all__ = [
    "DEFAULT_MAX_ENERGY",
    "MOVE_COST",
    "MoveOutcome",
    "MovementValidator",
    "Participant",
]
