import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from zeldabread.dungeon import Board, RoomType  # noqa: E402

_BY_GLYPH = {t.glyph: t for t in RoomType}


@pytest.fixture
def board_from_lines():
    """Build a Board from rows of RoomType glyphs (' ' empty, '.' corridor, 'S' start, ...)."""

    def make(lines):
        width = len(lines[0])
        board = Board(width, len(lines))
        for r, row in enumerate(lines):
            assert len(row) == width, "all rows must have equal width"
            for c, ch in enumerate(row):
                board.set_room_type(r, c, _BY_GLYPH[ch])
        return board

    return make
