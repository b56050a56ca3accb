from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from .rooms import Room, RoomType

if TYPE_CHECKING:  # pragma: no cover
    from ..exploration.state import ExplorationState

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class Board:
    """
    Fixed-size grid of :class:`Room` addressed as ``(row, col)``.

    The board is written only while a dungeon is being generated. During play
    it is shared by reference between every player's exploration overlay and
    treated as read-only. Odd dimensions give a unique center cell, which is
    where the start room lives.
    """

    __slots__ = ("_w", "_h", "_grid")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        # grid[row][col]
        self._grid: List[List[Room]] = [[Room() for _ in range(self._w)] for _ in range(self._h)]
        logger.debug("Initialized Board %dx%d", self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def start(self) -> Position:
        """Center cell where the start room is placed."""
        return (self._h // 2, self._w // 2)

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._h and 0 <= col < self._w

    def room(self, row: int, col: int) -> Room:
        """Return the room at (row, col).

        Raises IndexError when out of bounds; movement and exploration code
        goes through :meth:`safe_room` or :meth:`is_traversable` instead.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Room out of bounds: ({row},{col}) not in [0,{self._h})x[0,{self._w})")
        return self._grid[row][col]

    def safe_room(self, row: int, col: int) -> Optional[Room]:
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def room_type(self, row: int, col: int) -> RoomType:
        return self.room(row, col).room_type

    def is_traversable(self, row: int, col: int) -> bool:
        """True when (row, col) is in bounds and walkable. Never raises."""
        room = self.safe_room(row, col)
        return room is not None and room.traversable

    def set_room_type(self, row: int, col: int, room_type: RoomType) -> bool:
        room = self.safe_room(row, col)
        if room is None:
            logger.error("Attempt to set room type out of bounds at (%d,%d)", row, col)
            return False
        room.room_type = room_type
        return True

    # ---- Query -----------------------------------------------------------
    def positions(self, room_type: Optional[RoomType] = None) -> Iterator[Position]:
        """Yield positions in row-major order, optionally filtered by type."""
        for r in range(self._h):
            for c in range(self._w):
                if room_type is None or self._grid[r][c].room_type is room_type:
                    yield (r, c)

    def count(self, room_type: RoomType) -> int:
        return sum(1 for _ in self.positions(room_type))

    def counts(self) -> Dict[RoomType, int]:
        return dict(Counter(room.room_type for row in self._grid for room in row))

    def traversable_count(self) -> int:
        return sum(1 for row in self._grid for room in row if room.traversable)

    # ---- Export ----------------------------------------------------------
    def to_lines(self) -> List[str]:
        """ASCII dump of room types, one string per row."""
        return ["".join(room.room_type.glyph for room in row) for row in self._grid]

    def view_for(self, state: "ExplorationState") -> "Board":
        """Return a detached copy carrying one player's visited/explored flags.

        The shared board keeps its own flags untouched; renderers that read
        ``room.visited``/``room.explored`` directly can be handed this copy.
        """
        if (state.height, state.width) != (self._h, self._w):
            raise ValueError("Exploration state does not match board dimensions")
        copy = Board(self._w, self._h)
        for r in range(self._h):
            for c in range(self._w):
                src = self._grid[r][c]
                copy._grid[r][c] = Room(
                    room_type=src.room_type,
                    visited=state.visited[r][c],
                    explored=state.explored[r][c],
                    items=list(src.items),
                )
        return copy

    def __repr__(self) -> str:
        return f"Board(width={self._w}, height={self._h})"
