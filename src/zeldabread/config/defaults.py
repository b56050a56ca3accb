from __future__ import annotations

from typing import Dict, Union

SettingValue = Union[str, int]

# Built-in room settings, used whenever the YAML file cannot be read.
DEFAULT_ROOM_SETTINGS: Dict[str, Dict[str, SettingValue]] = {
    "ENEMY": {"color": "#FF0000", "event_chance_percent": 60},
    "DIFFICULT_ENEMY": {"color": "#8B0000", "event_divisor": 12, "event_max_count": 20},
    "SHOP": {"color": "#FFFF00", "event_divisor": 25, "event_max_count": 6},
    "SMITHY": {"color": "#FFA500", "event_divisor": 30, "event_max_count": 4},
    "TREASURE": {"color": "#00FF00", "event_divisor": 18, "event_max_count": 10},
    "SHRINE": {"color": "#0000FF", "event_divisor": 20, "event_max_count": 8},
    "BOSS": {"color": "#FF00FF", "event_divisor": 60, "event_max_count": 3},
    "START": {"color": "#00FFFF"},
    "PLAIN": {"color": "#FFFFFF"},
    "CORRIDOR": {"color": "#D3D3D3"},
    "EXPLORED_NEUTRAL": {"color": "#696969"},
}

# Color for anything the settings do not cover
FALLBACK_COLOR = "#808080"

ROOM_SETTINGS_ENV = "ZB_ROOM_SETTINGS"
