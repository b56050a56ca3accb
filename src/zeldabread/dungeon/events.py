from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Protocol, Sequence

from .board import Board, Position
from .rooms import RoomType

logger = logging.getLogger(__name__)

# Special categories in the order they claim corridor cells
QUOTA_PRIORITY: Sequence[RoomType] = (
    RoomType.BOSS,
    RoomType.SHOP,
    RoomType.SHRINE,
    RoomType.TREASURE,
    RoomType.SMITHY,
    RoomType.DIFFICULT_ENEMY,
)

DEFAULT_ENEMY_CHANCE_PERCENT = 60


class QuotaSettings(Protocol):
    """Settings provider consulted when computing quotas."""

    def int_setting(self, key: str, name: str, default: int) -> int: ...


@dataclass(frozen=True)
class Quota:
    room_type: RoomType
    count: int


@dataclass
class AssignmentReport:
    """How many cells each category received in one assignment pass."""

    pool_size: int = 0
    assigned: Dict[RoomType, int] = field(default_factory=dict)

    @property
    def specialized(self) -> int:
        return sum(n for t, n in self.assigned.items() if t not in (RoomType.ENEMY, RoomType.PLAIN))


def quota_count(available: int, divisor: int, cap: int) -> int:
    """``min(cap, available // divisor)``, with bad divisors/caps giving 0."""
    if divisor <= 0 or cap <= 0 or available <= 0:
        return 0
    return min(cap, available // divisor)


def compute_quotas(settings: QuotaSettings, available: int) -> List[Quota]:
    """Build the conventional quota list for ``available`` corridor cells.

    Each category reads ``event_divisor`` and ``event_max_count`` from the
    settings provider under its RoomType name.
    """
    quotas: List[Quota] = []
    for room_type in QUOTA_PRIORITY:
        divisor = settings.int_setting(room_type.name, "event_divisor", 0)
        cap = settings.int_setting(room_type.name, "event_max_count", 0)
        if divisor <= 0 or cap <= 0:
            logger.warning(
                "Quota for %s disabled (divisor=%s cap=%s)", room_type.name, divisor, cap
            )
        quotas.append(Quota(room_type, quota_count(available, divisor, cap)))
    logger.debug("Quotas for %d rooms: %s", available, [(q.room_type.name, q.count) for q in quotas])
    return quotas


def corridor_pool(board: Board) -> List[Position]:
    """Row-major list of CORRIDOR cells, excluding the start cell."""
    start = board.start
    return [p for p in board.positions(RoomType.CORRIDOR) if p != start]


class EventAssigner:
    """Relabels generated corridor cells into gameplay categories.

    The pool of non-start corridor cells is shuffled once. Quotas are then
    served in the given order, each taking cells from the end of the pool.
    Whatever is left becomes an enemy room or a plain room by a per-cell
    percentage draw. The start cell is re-asserted last.
    """

    def __init__(self, enemy_chance_percent: int = DEFAULT_ENEMY_CHANCE_PERCENT) -> None:
        if not 0 <= enemy_chance_percent <= 100:
            raise ValueError("enemy_chance_percent must be between 0 and 100")
        self.enemy_chance_percent = enemy_chance_percent

    def assign(self, board: Board, rng, quotas: Iterable[Quota]) -> AssignmentReport:
        pool = corridor_pool(board)
        rng.shuffle(pool)
        report = AssignmentReport(pool_size=len(pool))

        for quota in quotas:
            placed = 0
            while pool and placed < quota.count:
                row, col = pool.pop()
                if board.room_type(row, col) is not RoomType.CORRIDOR:
                    continue
                board.set_room_type(row, col, quota.room_type)
                placed += 1
            if placed:
                report.assigned[quota.room_type] = report.assigned.get(quota.room_type, 0) + placed
            logger.debug("Placed %d/%d rooms of type %s", placed, quota.count, quota.room_type.name)

        for row, col in pool:
            if board.room_type(row, col) is not RoomType.CORRIDOR:
                continue
            if rng.randrange(100) < self.enemy_chance_percent:
                fill = RoomType.ENEMY
            else:
                fill = RoomType.PLAIN
            board.set_room_type(row, col, fill)
            report.assigned[fill] = report.assigned.get(fill, 0) + 1

        board.set_room_type(*board.start, RoomType.START)
        logger.info(
            "Assigned events to %d rooms: %s",
            report.pool_size,
            {t.name: n for t, n in report.assigned.items()},
        )
        return report


__all__ = [
    "AssignmentReport",
    "EventAssigner",
    "QUOTA_PRIORITY",
    "Quota",
    "compute_quotas",
    "corridor_pool",
    "quota_count",
]
