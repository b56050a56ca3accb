from __future__ import annotations

import pytest

from zeldabread import __version__
from zeldabread.__main__ import main


def test_main_prints_map(capsys, monkeypatch):
    monkeypatch.delenv("ZB_ROOM_SETTINGS", raising=False)
    assert main(["--seed", "7", "--moves", "FRFL", "--legend"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Adventurer at (")
    assert "move(s) succeeded" in out
    map_lines = [line for line in out.splitlines() if line.startswith("|")]
    assert len(map_lines) == 21
    assert all(len(line) == 23 for line in map_lines)
    assert "Boss Room" in out


def test_main_full_map_small_board(capsys):
    assert main(["--width", "9", "--height", "7", "--rooms", "12", "--seed", "1", "--full-map"]) == 0
    out = capsys.readouterr().out
    map_lines = [line for line in out.splitlines() if line.startswith("|")]
    assert len(map_lines) == 7
    assert "^" in "".join(map_lines)


def test_main_rejects_bad_size(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--rooms", "0"])
    assert exc.value.code == 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out
