from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by GameSession to notify UI, audio or dialogue systems."""

    PLAYER_MOVED = auto()
    PLAYER_TURNED = auto()
    MOVE_BLOCKED = auto()
    # A newly revealed cell holds an enemy; audio can play a monster cue
    ENEMY_SENSED = auto()
    FULL_MAP_TOGGLED = auto()
