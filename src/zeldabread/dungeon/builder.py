from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .board import Board, Position
from .rooms import RoomType

logger = logging.getLogger(__name__)

# Growth order used when collecting candidates: N, S, E, W
_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))

# For each corner of a 2x2 window around a candidate: two orthogonal
# neighbours followed by the diagonal one.
_SQUARE_WINDOWS = (
    ((-1, 0), (0, -1), (-1, -1)),
    ((-1, 0), (0, 1), (-1, 1)),
    ((1, 0), (0, -1), (1, -1)),
    ((1, 0), (0, 1), (1, 1)),
)

PlaceCallback = Callable[[Board, Position], None]


@dataclass(frozen=True)
class BuildReport:
    """Summary of the last build, for logs and tests."""

    rooms_placed: int
    target: int
    starved: bool
    capped: bool

    @property
    def reached_target(self) -> bool:
        return self.rooms_placed >= self.target


def completes_square(board: Board, row: int, col: int) -> bool:
    """True if making (row, col) traversable would fill a 2x2 block.

    Out-of-bounds cells count as empty.
    """
    for window in _SQUARE_WINDOWS:
        if all(board.is_traversable(row + dr, col + dc) for dr, dc in window):
            return True
    return False


def growth_candidates(board: Board, row: int, col: int) -> List[Position]:
    """Empty in-bounds 4-neighbours of (row, col) that keep the layout square-free."""
    out: List[Position] = []
    for dr, dc in _STEPS:
        nr, nc = row + dr, col + dc
        room = board.safe_room(nr, nc)
        if room is None or room.room_type is not RoomType.EMPTY_SPACE:
            continue
        if completes_square(board, nr, nc):
            continue
        out.append((nr, nc))
    return out


class DungeonBuilder:
    """Grows a connected, corridor-shaped layout outward from the center.

    Algorithm:
    - Mark the center cell START and seed the frontier with it.
    - Repeatedly shuffle the frontier and look at its first cell. If it has
      a neighbour that can be opened without completing a 2x2 block of
      traversable cells, open one at random (CORRIDOR) and add it to the
      frontier; otherwise drop the cell from the frontier for good.
    - Stop at the target count, when the frontier is exhausted, or when half
      of the board is open.

    The start cell counts as the first placed room, so the number of
    traversable cells on the result always equals ``rooms_placed``. Running
    out of frontier before the target is reached is a valid, smaller dungeon.
    """

    def __init__(self) -> None:
        self.last_report: Optional[BuildReport] = None

    def build(
        self,
        width: int,
        height: int,
        target_room_count: int,
        rng,
        on_place: Optional[PlaceCallback] = None,
    ) -> Board:
        """Grow a dungeon of up to ``target_room_count`` rooms, start included.

        The start room is always placed, so a 1x1 board reports one room even
        though its half-board cap is 0.
        """
        if target_room_count <= 0:
            raise ValueError("target_room_count must be positive")
        board = Board(width, height)
        cap = board.width * board.height // 2

        start = board.start
        board.set_room_type(*start, RoomType.START)
        frontier: List[Position] = [start]
        rooms_placed = 1
        if on_place is not None:
            on_place(board, start)

        while rooms_placed < target_room_count and frontier and rooms_placed < cap:
            rng.shuffle(frontier)
            row, col = frontier[0]
            candidates = growth_candidates(board, row, col)
            if not candidates:
                frontier.pop(0)
                continue
            nr, nc = rng.choice(candidates)
            board.set_room_type(nr, nc, RoomType.CORRIDOR)
            frontier.append((nr, nc))
            rooms_placed += 1
            if on_place is not None:
                on_place(board, (nr, nc))

        report = BuildReport(
            rooms_placed=rooms_placed,
            target=target_room_count,
            starved=not frontier and rooms_placed < target_room_count,
            capped=rooms_placed >= cap and rooms_placed < target_room_count,
        )
        self.last_report = report
        if report.reached_target:
            logger.info("Built %dx%d dungeon with %d rooms", board.width, board.height, rooms_placed)
        else:
            logger.warning(
                "Dungeon growth stopped early at %d/%d rooms (starved=%s capped=%s)",
                rooms_placed,
                target_room_count,
                report.starved,
                report.capped,
            )
        logger.debug("Generated board:\n%s", "\n".join(board.to_lines()))
        return board


def has_open_square(board: Board) -> bool:
    """True if any 2x2 window of the board is entirely traversable."""
    for r in range(board.height - 1):
        for c in range(board.width - 1):
            if (
                board.is_traversable(r, c)
                and board.is_traversable(r + 1, c)
                and board.is_traversable(r, c + 1)
                and board.is_traversable(r + 1, c + 1)
            ):
                return True
    return False


def build_dungeon(width: int, height: int, target_room_count: int, rng) -> Board:
    """Convenience wrapper around :meth:`DungeonBuilder.build`."""
    return DungeonBuilder().build(width, height, target_room_count, rng)


__all__ = [
    "BuildReport",
    "DungeonBuilder",
    "build_dungeon",
    "completes_square",
    "growth_candidates",
    "has_open_square",
]
