from __future__ import annotations

from enum import Enum, IntEnum
from typing import Tuple


class Facing(IntEnum):
    """Compass direction, numbered clockwise from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Facing":
        return Facing((self + 2) % 4)

    @property
    def arrow(self) -> str:
        return "^>v<"[self]


_DELTAS = {
    Facing.NORTH: (-1, 0),
    Facing.EAST: (0, 1),
    Facing.SOUTH: (1, 0),
    Facing.WEST: (0, -1),
}


class Turn(Enum):
    LEFT = "left"
    RIGHT = "right"


def turned(facing: Facing, turn: Turn) -> Facing:
    if turn is Turn.LEFT:
        return Facing((facing + 3) % 4)
    return Facing((facing + 1) % 4)
