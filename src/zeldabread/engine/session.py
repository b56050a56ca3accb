from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..config.generation import GenerationSettings
from ..config.room_settings import RoomSettings
from ..core.directions import Facing, Turn
from ..core.rng import RNG
from ..dungeon.board import Board
from ..dungeon.builder import BuildReport, DungeonBuilder
from ..dungeon.events import (
    DEFAULT_ENEMY_CHANCE_PERCENT,
    AssignmentReport,
    EventAssigner,
    compute_quotas,
    corridor_pool,
)
from ..dungeon.rooms import RoomType
from ..exceptions import SessionError
from ..exploration.state import ExplorationState
from ..exploration.tracker import ExplorationTracker
from ..movement.participant import Participant
from ..movement.validator import MovementValidator
from .events import GameEvent

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
Listener = Callable[[GameEvent, "GameSession"], None]

_ENEMY_TYPES = (RoomType.ENEMY, RoomType.DIFFICULT_ENEMY)


@dataclass
class PlayerSlot:
    """Everything one player owns during a session."""

    participant: Participant
    state: ExplorationState
    tracker: ExplorationTracker
    validator: MovementValidator

    @property
    def name(self) -> str:
        return self.participant.name

    @property
    def position(self) -> Position:
        return self.state.position

    @property
    def facing(self) -> Facing:
        return self.state.facing


class GameSession:
    """Holds the state of one game: the shared board, the players and UI toggles.

    The board is generated and classified once in :meth:`create`; afterwards
    it is only read. Each player gets an independent exploration overlay and
    movement validator. Input handlers act on the active player through
    :meth:`turn`, :meth:`move`, :meth:`move_forward` and :meth:`move_backward`,
    all of which return booleans.
    """

    def __init__(
        self,
        board: Board,
        players: Sequence[Participant],
        rng=None,
        settings: Optional[RoomSettings] = None,
    ) -> None:
        if not players:
            raise SessionError("A session needs at least one player")
        start = board.start
        if not board.is_traversable(*start):
            raise SessionError(f"Start cell {start} is not traversable")

        self.board = board
        self.rng = rng if rng is not None else RNG()
        self.settings = settings or RoomSettings.load()
        self.show_full_map = False
        self.build_report: Optional[BuildReport] = None
        self.assignment_report: Optional[AssignmentReport] = None
        self._listeners: List[Listener] = []
        self._active = 0
        self.players: List[PlayerSlot] = [self._place(p, start) for p in players]
        logger.info(
            "Session ready: %d player(s) at %s on a %dx%d board",
            len(self.players),
            start,
            board.width,
            board.height,
        )

    @classmethod
    def create(
        cls,
        players: Iterable[str] = ("Adventurer",),
        generation: Optional[GenerationSettings] = None,
        settings: Optional[RoomSettings] = None,
        rng=None,
    ) -> "GameSession":
        """Generate a dungeon, assign its events and place the players."""
        generation = generation or GenerationSettings()
        settings = settings or RoomSettings.load()
        rng = rng if rng is not None else RNG(generation.seed)

        builder = DungeonBuilder()
        board = builder.build(generation.width, generation.height, generation.target_room_count, rng)
        available = len(corridor_pool(board))
        quotas = compute_quotas(settings, available)
        chance = settings.percent_setting(RoomType.ENEMY, "event_chance_percent", DEFAULT_ENEMY_CHANCE_PERCENT)
        assigner = EventAssigner(chance)
        report = assigner.assign(board, rng, quotas)

        session = cls(board, [Participant(name=n) for n in players], rng=rng, settings=settings)
        session.build_report = builder.last_report
        session.assignment_report = report
        return session

    def _place(self, participant: Participant, start: Position) -> PlayerSlot:
        state = ExplorationState(self.board.width, self.board.height)
        tracker = ExplorationTracker(self.board, state)
        tracker.place(start, Facing.NORTH)
        validator = MovementValidator(self.board, tracker, participant)
        return PlayerSlot(participant, state, tracker, validator)

    # ------------------------ Listeners ------------------------
    def add_listener(self, listener: Listener) -> None:
        """Subscribe to session events (movement, turns, sensed enemies)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:  # listeners must not break the session
                logger.exception("Listener errored on %s: %s", event, ex)

    # ------------------------ Players ------------------------
    @property
    def active_player(self) -> PlayerSlot:
        return self.players[self._active]

    @property
    def active_index(self) -> int:
        return self._active

    def next_player(self) -> PlayerSlot:
        """Hand control to the next player, wrapping around."""
        self._active = (self._active + 1) % len(self.players)
        logger.debug("Active player is now %s", self.active_player.name)
        return self.active_player

    # ------------------------ Actions ------------------------
    def turn(self, turn: Turn) -> bool:
        result = self.active_player.validator.turn(turn)
        self._emit(GameEvent.PLAYER_TURNED)
        return result

    def move(self, direction: Facing) -> bool:
        validator = self.active_player.validator
        moved = validator.move(direction)
        self._after_move(moved, validator)
        return moved

    def move_forward(self) -> bool:
        return self.move(self.active_player.facing)

    def move_backward(self) -> bool:
        return self.move(self.active_player.facing.opposite)

    def _after_move(self, moved: bool, validator: MovementValidator) -> None:
        if not moved:
            self._emit(GameEvent.MOVE_BLOCKED)
            return
        self._emit(GameEvent.PLAYER_MOVED)
        if any(self.board.room_type(*p) in _ENEMY_TYPES for p in validator.last_revealed):
            logger.info("%s senses enemies nearby", self.active_player.name)
            self._emit(GameEvent.ENEMY_SENSED)

    def toggle_full_map(self) -> bool:
        """Debug toggle that lets renderers draw the whole board."""
        self.show_full_map = not self.show_full_map
        logger.info("Full map display toggled: %s", self.show_full_map)
        self._emit(GameEvent.FULL_MAP_TOGGLED)
        return self.show_full_map

    def is_visible(self, position: Position, player: Optional[int] = None) -> bool:
        slot = self.active_player if player is None else self.players[player]
        return slot.tracker.is_visible(position, self.show_full_map)
