from .state import UNPLACED, ExplorationState
from .tracker import ExplorationTracker

__all__ = ["ExplorationState", "ExplorationTracker", "UNPLACED"]
