from __future__ import annotations

import copy
import logging
import os
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .defaults import DEFAULT_ROOM_SETTINGS, FALLBACK_COLOR, ROOM_SETTINGS_ENV, SettingValue

logger = logging.getLogger(__name__)

RoomKey = Union[str, Any]


def _key(room: RoomKey) -> str:
    # Accept RoomType members as well as plain names
    name = getattr(room, "name", room)
    return str(name).upper()


class RoomSettings:
    """Per-room-type settings: display color and quota parameters.

    Loading never fails. A missing or unreadable file, invalid YAML, or a
    document that is not a mapping of mappings leaves the built-in defaults
    in place and logs the problem. Entries from a valid file are merged over
    the defaults type by type, so a file only needs the values it changes.

    Lookup order for the file: explicit ``path``, the ``ZB_ROOM_SETTINGS``
    environment variable, then the ``rooms.yaml`` shipped with the package.
    """

    def __init__(self, settings: Optional[Mapping[str, Mapping[str, SettingValue]]] = None) -> None:
        self._settings: Dict[str, Dict[str, SettingValue]] = copy.deepcopy(DEFAULT_ROOM_SETTINGS)
        self.using_defaults = True
        if settings:
            self._merge(settings)
            self.using_defaults = False

    # ------------------------ Loading ------------------------
    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None, env: Optional[Mapping[str, str]] = None) -> "RoomSettings":
        env = os.environ if env is None else env
        if path is None and env.get(ROOM_SETTINGS_ENV):
            path = Path(env[ROOM_SETTINGS_ENV]).expanduser()

        try:
            if path is None:
                text = resource_files("zeldabread.config").joinpath("rooms.yaml").read_text(encoding="utf-8")
                source = "embedded rooms.yaml"
            else:
                text = Path(path).read_text(encoding="utf-8")
                source = str(path)
        except (OSError, ModuleNotFoundError) as exc:
            logger.error("Could not read room settings (%s); using defaults", exc)
            return cls()

        return cls.from_yaml(text, source=source)

    @classmethod
    def from_yaml(cls, text: str, source: str = "<string>") -> "RoomSettings":
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            logger.error("Invalid YAML in room settings %s: %s; using defaults", source, exc)
            return cls()

        parsed = cls._parse(raw, source)
        if not parsed:
            return cls()
        logger.info("Loaded room settings for %d room types from %s", len(parsed), source)
        return cls(parsed)

    @staticmethod
    def _parse(raw: Any, source: str) -> Dict[str, Dict[str, SettingValue]]:
        if not isinstance(raw, dict):
            logger.error("Room settings %s is not a mapping; using defaults", source)
            return {}
        out: Dict[str, Dict[str, SettingValue]] = {}
        for name, block in raw.items():
            if not isinstance(block, dict):
                logger.warning("Ignoring settings for %r in %s: expected a mapping", name, source)
                continue
            values = {str(k): v for k, v in block.items() if isinstance(v, (str, int)) and not isinstance(v, bool)}
            if values:
                out[_key(name)] = values
        return out

    def _merge(self, settings: Mapping[str, Mapping[str, SettingValue]]) -> None:
        for name, block in settings.items():
            self._settings.setdefault(_key(name), {}).update(block)

    # ------------------------ Accessors ------------------------
    def settings_for(self, room: RoomKey) -> Dict[str, SettingValue]:
        """Return a copy of the settings for a room type (empty if unknown)."""
        return dict(self._settings.get(_key(room), {}))

    def color(self, room: RoomKey, default: str = FALLBACK_COLOR) -> str:
        value = self._settings.get(_key(room), {}).get("color")
        if not isinstance(value, str) or not _is_hex_color(value):
            if value is not None:
                logger.warning("Invalid color %r for %s; using %s", value, _key(room), default)
            return default
        return value

    def int_setting(self, room: RoomKey, name: str, default: int) -> int:
        value = self._settings.get(_key(room), {}).get(name, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Invalid integer %r for %s.%s; using %d", value, _key(room), name, default)
            return default

    def percent_setting(self, room: RoomKey, name: str, default: int) -> int:
        """Like :meth:`int_setting` but values outside 0..100 give ``default``."""
        value = self.int_setting(room, name, default)
        if not 0 <= value <= 100:
            logger.warning("Percentage %d for %s.%s out of range; using %d", value, _key(room), name, default)
            return default
        return value

    def as_dict(self) -> Dict[str, Dict[str, SettingValue]]:
        return copy.deepcopy(self._settings)


def _is_hex_color(value: str) -> bool:
    if len(value) != 7 or not value.startswith("#"):
        return False
    try:
        int(value[1:], 16)
    except ValueError:
        return False
    return True
