from .defaults import DEFAULT_ROOM_SETTINGS, FALLBACK_COLOR
from .generation import GenerationSettings
from .room_settings import RoomSettings

__all__ = ["DEFAULT_ROOM_SETTINGS", "FALLBACK_COLOR", "GenerationSettings", "RoomSettings"]
