from __future__ import annotations

import logging
import textwrap

import pytest

from zeldabread.config import DEFAULT_ROOM_SETTINGS, FALLBACK_COLOR, RoomSettings
from zeldabread.dungeon import RoomType


def test_missing_file_falls_back_to_defaults(tmp_path, caplog):
    caplog.set_level(logging.ERROR)
    settings = RoomSettings.load(tmp_path / "nope.yaml")
    assert settings.using_defaults
    assert settings.color(RoomType.BOSS) == "#FF00FF"
    assert settings.as_dict() == DEFAULT_ROOM_SETTINGS
    assert "using defaults" in caplog.text


@pytest.mark.parametrize(
    "text",
    [
        "BOSS: [unclosed",
        "- just\n- a list\n",
        "42",
        "",
    ],
)
def test_bad_documents_fall_back_to_defaults(tmp_path, text):
    path = tmp_path / "rooms.yaml"
    path.write_text(text, encoding="utf-8")
    settings = RoomSettings.load(path)
    assert settings.using_defaults
    assert settings.int_setting("SHOP", "event_divisor", 0) == 25


def test_partial_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "rooms.yaml"
    path.write_text(
        textwrap.dedent(
            """
            SHOP:
              color: "#123456"
            boss:
              event_max_count: 1
            PLAIN: not-a-mapping
            """
        ),
        encoding="utf-8",
    )
    settings = RoomSettings.load(path)

    assert not settings.using_defaults
    assert settings.color(RoomType.SHOP) == "#123456"
    assert settings.int_setting(RoomType.SHOP, "event_divisor", 0) == 25
    assert settings.int_setting("BOSS", "event_max_count", 0) == 1
    assert settings.int_setting("BOSS", "event_divisor", 0) == 60
    assert settings.color("PLAIN") == "#FFFFFF"


def test_env_var_points_at_settings_file(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("TREASURE:\n  color: '#ABCDEF'\n", encoding="utf-8")
    settings = RoomSettings.load(env={"ZB_ROOM_SETTINGS": str(path)})
    assert settings.color(RoomType.TREASURE) == "#ABCDEF"


def test_packaged_settings_match_defaults():
    settings = RoomSettings.load(env={})
    assert not settings.using_defaults
    assert settings.as_dict() == DEFAULT_ROOM_SETTINGS


def test_invalid_values_use_the_caller_default(caplog):
    caplog.set_level(logging.WARNING)
    settings = RoomSettings({"SHOP": {"event_divisor": "lots", "color": "yellow"}})
    assert settings.int_setting("SHOP", "event_divisor", 7) == 7
    assert settings.color("SHOP") == FALLBACK_COLOR
    assert settings.color("SHOP", "#000000") == "#000000"
    assert "Invalid integer" in caplog.text


def test_unknown_room_type_has_no_settings():
    settings = RoomSettings()
    assert settings.settings_for("DRAGON_LAIR") == {}
    assert settings.color("DRAGON_LAIR") == FALLBACK_COLOR
    assert settings.int_setting("DRAGON_LAIR", "event_divisor", 3) == 3


def test_settings_for_returns_a_copy():
    settings = RoomSettings()
    block = settings.settings_for(RoomType.ENEMY)
    block["event_chance_percent"] = 5
    assert settings.int_setting(RoomType.ENEMY, "event_chance_percent", 0) == 60


def test_percent_setting_rejects_out_of_range(caplog):
    caplog.set_level(logging.WARNING)
    settings = RoomSettings({"ENEMY": {"event_chance_percent": 150}, "BOSS": {"event_chance_percent": 0}})
    assert settings.percent_setting("ENEMY", "event_chance_percent", 60) == 60
    assert settings.percent_setting("BOSS", "event_chance_percent", 60) == 0
    assert settings.percent_setting(RoomType.SHOP, "event_chance_percent", 25) == 25
    assert "out of range" in caplog.text
