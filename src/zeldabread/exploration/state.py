from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..core.directions import Facing

UNPLACED: Tuple[int, int] = (-1, -1)


@dataclass
class ExplorationState:
    """One player's fog-of-war overlay and pose on a shared board.

    Grids are indexed ``[row][col]``. ``position`` stays at ``(-1, -1)``
    until the player is placed on the start cell.
    """

    width: int
    height: int
    visited: List[List[bool]] = field(init=False, repr=False)
    explored: List[List[bool]] = field(init=False, repr=False)
    position: Tuple[int, int] = UNPLACED
    facing: Facing = Facing.NORTH

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("ExplorationState dimensions must be positive")
        self.visited = [[False for _ in range(self.width)] for _ in range(self.height)]
        self.explored = [[False for _ in range(self.width)] for _ in range(self.height)]

    @property
    def placed(self) -> bool:
        return self.position != UNPLACED

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width
