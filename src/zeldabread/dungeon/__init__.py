"""
Dungeon systems for ZeldaBread.

Contains the board/room model, the corridor growth generator and the event
assigner that turns generated corridors into gameplay rooms.
"""

from .board import Board, Position
from .builder import BuildReport, DungeonBuilder, build_dungeon, has_open_square
from .events import AssignmentReport, EventAssigner, Quota, compute_quotas
from .rooms import Room, RoomType

__all__ = [
    "AssignmentReport",
    "Board",
    "BuildReport",
    "DungeonBuilder",
    "EventAssigner",
    "Position",
    "Quota",
    "Room",
    "RoomType",
    "build_dungeon",
    "compute_quotas",
    "has_open_square",
]
