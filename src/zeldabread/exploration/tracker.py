from __future__ import annotations

import logging
from typing import List, Tuple

from ..core.directions import Facing
from ..dungeon.board import Board
from .state import ExplorationState

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class ExplorationTracker:
    """
    Records what one player has seen and walked on.

    Responsibilities:
    - Mark the cell a player steps on as visited (and therefore explored).
    - Reveal the traversable cells in the 3x3 block around the player.
    - Answer whether a renderer may draw a cell for this player.

    The board is only read. Flags only ever go from False to True.
    """

    def __init__(self, board: Board, state: ExplorationState) -> None:
        if (state.height, state.width) != (board.height, board.width):
            raise ValueError("Exploration state does not match board dimensions")
        self.board = board
        self.state = state

    def reveal_around(self, position: Position) -> List[Position]:
        """Explore traversable cells around ``position``.

        Returns the cells that were not explored before this call.
        """
        row, col = position
        newly: List[Position] = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                r, c = row + dr, col + dc
                if not self.board.is_traversable(r, c):
                    continue
                if not self.state.explored[r][c]:
                    self.state.explored[r][c] = True
                    newly.append((r, c))
        if newly:
            logger.debug("Revealed %d cells around %s", len(newly), position)
        return newly

    def mark_visited(self, position: Position) -> None:
        row, col = position
        if not self.state.in_bounds(row, col):
            logger.debug("Ignoring visit outside the board at %s", position)
            return
        self.state.visited[row][col] = True
        self.state.explored[row][col] = True

    def is_visible(self, position: Position, show_full_map: bool = False) -> bool:
        if show_full_map:
            return True
        row, col = position
        if not self.state.in_bounds(row, col):
            return False
        return self.state.explored[row][col]

    def is_visited(self, position: Position) -> bool:
        row, col = position
        return self.state.in_bounds(row, col) and self.state.visited[row][col]

    def is_explored(self, position: Position) -> bool:
        row, col = position
        return self.state.in_bounds(row, col) and self.state.explored[row][col]

    def place(self, position: Position, facing: Facing = Facing.NORTH) -> List[Position]:
        """Put the player on ``position`` and record the initial view."""
        self.state.position = position
        self.state.facing = facing
        self.mark_visited(position)
        return self.reveal_around(position)

    def visited_count(self) -> int:
        return sum(sum(1 for v in row if v) for row in self.state.visited)

    def explored_count(self) -> int:
        return sum(sum(1 for v in row if v) for row in self.state.explored)
