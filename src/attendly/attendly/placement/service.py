from __future__ import annotations

import logging
import math
from datetime import date, time
from fractions import Fraction
from typing import Iterable

from ..common.validators import require_placement_status
from ..core.enums import PlacementStatus
from .model import PlacementSession, PlacementStats
from .repository import PlacementSessionRepository

logger = logging.getLogger(__name__)


def placement_stats(sessions: Iterable[PlacementSession]) -> PlacementStats:
    """Counts per status and the attendance rate of decided sessions.

    Pending sessions count toward ``total`` only. ``rate`` is a whole
    percent, halves rounded up; 0 while nothing is decided.
    """
    counts = {status: 0 for status in PlacementStatus}
    for s in sessions:
        counts[require_placement_status(s.status)] += 1

    attended = counts[PlacementStatus.ATTENDED]
    missed = counts[PlacementStatus.MISSED]
    decided = attended + missed
    rate = math.floor(Fraction(attended * 100, decided) + Fraction(1, 2)) if decided else 0

    return PlacementStats(
        total=sum(counts.values()),
        attended=attended,
        missed=missed,
        pending=counts[PlacementStatus.PENDING],
        rate=rate,
    )


def group_by_date(sessions: Iterable[PlacementSession]) -> list[tuple[date, list[PlacementSession]]]:
    """Sessions grouped per day, days ascending, each day ordered by start time."""
    groups: dict[date, list[PlacementSession]] = {}
    for s in sessions:
        groups.setdefault(s.session_date, []).append(s)
    return [
        (day, sorted(items, key=lambda s: s.start_time or time.min))
        for day, items in sorted(groups.items())
    ]


class PlacementService:
    def __init__(self, sessions: PlacementSessionRepository):
        self._sessions = sessions

    def get_stats(self, user_id: int) -> PlacementStats:
        stats = placement_stats(self._sessions.list_for_user(user_id))
        logger.debug("placement stats for user %s: %s", user_id, stats)
        return stats

    def get_schedule(self, user_id: int) -> list[tuple[date, list[PlacementSession]]]:
        return group_by_date(self._sessions.list_for_user(user_id))
