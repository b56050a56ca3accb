from __future__ import annotations

import logging
import random
from collections import deque

import pytest

from zeldabread.core import RNG
from zeldabread.dungeon import Board, DungeonBuilder, RoomType, build_dungeon, has_open_square
from zeldabread.dungeon.builder import completes_square, growth_candidates


def _reachable_from_start(board: Board) -> set:
    seen = {board.start}
    queue = deque([board.start])
    while queue:
        r, c = queue.popleft()
        for dr, dc in ((-1, 0), (1, 0), (0, 1), (0, -1)):
            nxt = (r + dr, c + dc)
            if nxt not in seen and board.is_traversable(*nxt):
                seen.add(nxt)
                queue.append(nxt)
    return seen


def test_classic_board_reaches_fifty_rooms():
    builder = DungeonBuilder()
    board = builder.build(21, 21, 50, RNG(7))

    assert builder.last_report.rooms_placed == 50
    assert builder.last_report.reached_target
    assert board.traversable_count() == 50
    assert board.room_type(10, 10) is RoomType.START
    assert list(board.positions(RoomType.START)) == [(10, 10)]
    assert not has_open_square(board)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_no_open_square_after_any_placement(seed):
    seen = []

    def check(board, pos):
        assert not has_open_square(board)
        seen.append(pos)

    DungeonBuilder().build(15, 11, 60, RNG(seed), on_place=check)
    assert seen[0] == (5, 7)
    assert len(seen) == len(set(seen))


@pytest.mark.parametrize("seed", [11, 12, 13])
def test_generated_rooms_are_connected(seed):
    board = build_dungeon(21, 21, 80, RNG(seed))
    traversable = {(r, c) for r, c in board.positions() if board.is_traversable(r, c)}
    assert _reachable_from_start(board) == traversable
    assert board.count(RoomType.CORRIDOR) == len(traversable) - 1


@pytest.mark.parametrize(
    "w,h,target",
    [(5, 5, 100), (7, 9, 10), (21, 21, 300), (9, 3, 4)],
)
def test_room_count_respects_target_and_half_board_cap(w, h, target):
    builder = DungeonBuilder()
    board = builder.build(w, h, target, RNG(5))
    report = builder.last_report
    assert report.rooms_placed == board.traversable_count()
    assert report.rooms_placed <= target
    assert report.rooms_placed <= w * h // 2


def test_small_board_stops_early_and_warns(caplog):
    caplog.set_level(logging.WARNING)
    builder = DungeonBuilder()
    board = builder.build(3, 3, 9, RNG(1))

    report = builder.last_report
    assert not report.reached_target
    assert report.capped
    assert board.traversable_count() == 4
    assert "stopped early" in caplog.text


def test_same_seed_same_layout():
    a = build_dungeon(21, 21, 50, RNG(2024))
    b = build_dungeon(21, 21, 50, RNG(2024))
    assert a.to_lines() == b.to_lines()


def test_plain_random_is_accepted():
    board = build_dungeon(11, 11, 20, random.Random(3))
    assert board.room_type(5, 5) is RoomType.START
    assert board.traversable_count() == 20


@pytest.mark.parametrize("target", [0, -3])
def test_non_positive_target_is_rejected(target):
    with pytest.raises(ValueError):
        DungeonBuilder().build(21, 21, target, RNG(1))


def test_non_positive_dimensions_are_rejected():
    with pytest.raises(ValueError):
        DungeonBuilder().build(0, 21, 10, RNG(1))


def test_square_completion_check(board_from_lines):
    board = board_from_lines([
        "..   ",
        ".S   ",
        "     ",
    ])
    # (1,1) is already open; (0,0),(0,1),(1,0),(1,1) form a square
    assert has_open_square(board)

    board = board_from_lines([
        "..   ",
        " S   ",
        "     ",
    ])
    assert completes_square(board, 1, 0)
    assert not completes_square(board, 2, 1)
    # from the start: N is open, W would close the square, S and E are free
    assert sorted(growth_candidates(board, 1, 1)) == [(1, 2), (2, 1)]


def test_single_cell_board_holds_only_the_start():
    builder = DungeonBuilder()
    board = builder.build(1, 1, 5, RNG(1))
    assert board.room_type(0, 0) is RoomType.START
    assert builder.last_report.rooms_placed == 1
    assert builder.last_report.capped
