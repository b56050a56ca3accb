from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from ..core.directions import Facing, Turn, turned
from ..dungeon.board import Board
from ..exploration.tracker import ExplorationTracker
from .participant import Participant

logger = logging.getLogger(__name__)

MOVE_COST = 1

Position = Tuple[int, int]


class MoveOutcome(Enum):
    """Why the last move attempt ended the way it did."""

    MOVED = "moved"
    BLOCKED = "blocked"
    OUT_OF_BOUNDS = "out_of_bounds"
    NO_ENERGY = "no_energy"
    NOT_PLACED = "not_placed"
    INVALID_DIRECTION = "invalid_direction"


class MovementValidator:
    """Facing/position state machine for one player.

    Turning is free and always succeeds. A move succeeds only when the
    player has been placed, still has energy, and the target cell is on the
    board and traversable; then the tracker records the visit and the 3x3
    reveal and energy drops by MOVE_COST. A failed move changes nothing.
    Failure is reported through the boolean result and ``last_outcome``,
    never by raising.
    """

    def __init__(self, board: Board, tracker: ExplorationTracker, participant: Participant) -> None:
        self.board = board
        self.tracker = tracker
        self.participant = participant
        self.last_outcome: Optional[MoveOutcome] = None
        self.last_revealed: List[Position] = []

    @property
    def position(self) -> Position:
        return self.tracker.state.position

    @property
    def facing(self) -> Facing:
        return self.tracker.state.facing

    def turn(self, turn: Turn) -> bool:
        state = self.tracker.state
        state.facing = turned(state.facing, turn)
        logger.debug("%s now facing %s", self.participant.name, state.facing.name)
        return True

    def move(self, direction: Facing) -> bool:
        self.last_revealed = []
        try:
            facing = Facing(direction)
        except (TypeError, ValueError):
            return self._fail(MoveOutcome.INVALID_DIRECTION, direction)
        state = self.tracker.state
        if not state.placed:
            return self._fail(MoveOutcome.NOT_PLACED, direction)
        if self.participant.energy <= 0:
            return self._fail(MoveOutcome.NO_ENERGY, direction)

        dr, dc = facing.delta
        target = (state.position[0] + dr, state.position[1] + dc)
        if not self.board.in_bounds(*target):
            return self._fail(MoveOutcome.OUT_OF_BOUNDS, direction)
        if not self.board.is_traversable(*target):
            return self._fail(MoveOutcome.BLOCKED, direction)

        state.position = target
        self.tracker.mark_visited(target)
        self.last_revealed = self.tracker.reveal_around(target)
        self.participant.spend_energy(MOVE_COST)
        self.last_outcome = MoveOutcome.MOVED
        logger.debug(
            "%s moved to %s (%s); energy=%d",
            self.participant.name,
            target,
            self.board.room(*target).description,
            self.participant.energy,
        )
        return True

    def move_forward(self) -> bool:
        return self.move(self.facing)

    def move_backward(self) -> bool:
        return self.move(self.facing.opposite)

    def _fail(self, outcome: MoveOutcome, direction) -> bool:
        self.last_outcome = outcome
        logger.debug(
            "%s cannot move %s from %s: %s",
            self.participant.name,
            getattr(direction, "name", direction),
            self.tracker.state.position,
            outcome.value,
        )
        return False
