from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config.defaults import DEFAULT_ROOM_SETTINGS, FALLBACK_COLOR
from ..config.room_settings import RoomSettings
from ..dungeon.board import Board
from ..dungeon.rooms import RoomType
from ..exploration.state import ExplorationState


Position = Tuple[int, int]

EXPLORED_NEUTRAL = "EXPLORED_NEUTRAL"
EXPLORED_NEUTRAL_COLOR = str(DEFAULT_ROOM_SETTINGS[EXPLORED_NEUTRAL]["color"])

_HIDDEN_GLYPH = " "
_EXPLORED_GLYPH = ":"


@dataclass(frozen=True)
class LegendRow:
    room_type: RoomType
    label: str
    color: str
    total: int
    visited: int


def cell_color(
    board: Board,
    state: ExplorationState,
    position: Position,
    settings: RoomSettings,
    show_full_map: bool = False,
) -> Optional[str]:
    """Color a renderer should paint for one cell, or None to leave it blank.

    Visited cells (or every cell with the full map on) show their room
    color. Cells that are only explored get the neutral explored color so
    their category stays hidden until entered.
    """
    row, col = position
    room = board.safe_room(row, col)
    if room is None or room.room_type is RoomType.EMPTY_SPACE:
        return None
    if show_full_map or state.visited[row][col]:
        return settings.color(room.room_type, FALLBACK_COLOR)
    if state.explored[row][col]:
        return settings.color(EXPLORED_NEUTRAL, EXPLORED_NEUTRAL_COLOR)
    return None


def legend(board: Board, state: ExplorationState, settings: RoomSettings) -> List[LegendRow]:
    """Per-type totals on the board and how many of them this player visited."""
    totals = board.counts()
    visited: Dict[RoomType, int] = {}
    for r, c in board.positions():
        if state.visited[r][c]:
            t = board.room_type(r, c)
            visited[t] = visited.get(t, 0) + 1
    rows: List[LegendRow] = []
    for room_type in RoomType:
        if room_type in (RoomType.EMPTY_SPACE, RoomType.UNKNOWN):
            continue
        rows.append(
            LegendRow(
                room_type=room_type,
                label=room_type.label,
                color=settings.color(room_type, FALLBACK_COLOR),
                total=totals.get(room_type, 0),
                visited=visited.get(room_type, 0),
            )
        )
    return rows


def render_ascii(board: Board, state: ExplorationState, show_full_map: bool = False) -> List[str]:
    """Text map as one player sees it, with an arrow for the player."""
    lines: List[str] = []
    for r in range(board.height):
        row_chars = []
        for c in range(board.width):
            if (r, c) == state.position:
                row_chars.append(state.facing.arrow)
                continue
            room = board.room(r, c)
            if show_full_map or state.visited[r][c]:
                row_chars.append(room.room_type.glyph)
            elif state.explored[r][c]:
                row_chars.append(_EXPLORED_GLYPH)
            else:
                row_chars.append(_HIDDEN_GLYPH)
        lines.append("".join(row_chars))
    return lines
