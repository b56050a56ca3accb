from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


class RoomType(Enum):
    """Gameplay category of a single board cell.

    Each member carries a stable integer code, a human readable label and
    whether players may walk onto it. EMPTY_SPACE and UNKNOWN are the only
    non-traversable members.
    """

    EMPTY_SPACE = (0, "Empty Space", False)
    CORRIDOR = (1, "Corridor", True)
    START = (2, "Starting Room", True)
    ENEMY = (3, "Enemy Room", True)
    DIFFICULT_ENEMY = (4, "Difficult Enemy Room", True)
    SHOP = (5, "Shop", True)
    SMITHY = (6, "Smithy", True)
    TREASURE = (7, "Treasure Room", True)
    PLAIN = (8, "Plain Room", True)
    SHRINE = (9, "Shrine", True)
    BOSS = (10, "Boss Room", True)
    UNKNOWN = (-1, "Unknown Room", False)

    def __init__(self, code: int, label: str, traversable: bool) -> None:
        self.code = code
        self.label = label
        self.traversable = traversable

    @property
    def glyph(self) -> str:
        """Single-character symbol used by ASCII dumps."""
        return _GLYPHS[self]

    @classmethod
    def from_value(cls, code: int) -> "RoomType":
        for member in cls:
            if member.code == code:
                return member
        return cls.UNKNOWN


_GLYPHS = {
    RoomType.EMPTY_SPACE: " ",
    RoomType.CORRIDOR: ".",
    RoomType.START: "S",
    RoomType.ENEMY: "e",
    RoomType.DIFFICULT_ENEMY: "E",
    RoomType.SHOP: "$",
    RoomType.SMITHY: "A",
    RoomType.TREASURE: "T",
    RoomType.PLAIN: "o",
    RoomType.SHRINE: "+",
    RoomType.BOSS: "B",
    RoomType.UNKNOWN: "?",
}


@dataclass
class Room:
    """One board cell.

    ``visited`` implies ``explored``; use :meth:`set_visited` to keep that
    true. Items are carried opaquely for the inventory layer.
    """

    room_type: RoomType = RoomType.EMPTY_SPACE
    visited: bool = False
    explored: bool = False
    items: List[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.visited:
            self.explored = True

    @property
    def traversable(self) -> bool:
        return self.room_type.traversable

    @property
    def description(self) -> str:
        return self.room_type.label

    def set_visited(self, visited: bool = True) -> None:
        self.visited = visited
        if visited:
            self.explored = True

    def set_explored(self, explored: bool = True) -> None:
        if not explored and self.visited:
            # explored may not drop below visited
            return
        self.explored = explored

    def add_item(self, item: Any) -> None:
        if item is not None:
            self.items.append(item)

    def remove_item(self, item: Any) -> bool:
        try:
            self.items.remove(item)
        except ValueError:
            return False
        return True

    def clear_items(self) -> None:
        self.items.clear()
