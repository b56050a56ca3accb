from .directions import Facing, Turn, turned
from .rng import RNG

__all__ = ["Facing", "RNG", "Turn", "turned"]
