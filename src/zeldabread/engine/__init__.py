from .events import GameEvent
from .session import GameSession, PlayerSlot

__all__ = ["GameEvent", "GameSession", "PlayerSlot"]
