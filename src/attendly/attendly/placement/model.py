from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import PlacementStatus


@dataclass(frozen=True)
class PlacementSession:
    """Placement-training session, tracked apart from subject attendance."""

    session_id: int
    name: str
    session_date: date
    status: PlacementStatus = PlacementStatus.PENDING
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class PlacementStats:
    total: int
    attended: int
    missed: int
    pending: int
    rate: int
