from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from fractions import Fraction
from typing import Union

from ..core.enums import AttendanceBand, AttendanceMark, TrackStatus

# Buffer and recovery are whole class counts, or math.inf for the sentinels.
ClassCount = Union[int, float]


@dataclass(frozen=True)
class AttendanceLog:
    """One mark for one session of a subject."""

    log_id: int
    subject_id: int
    status: AttendanceMark
    # Storage may keep only the date of the session.
    marked_at: Union[date, datetime]
    session_number: int = 1

    @property
    def session_date(self) -> date:
        if isinstance(self.marked_at, datetime):
            return self.marked_at.date()
        return self.marked_at

    @property
    def marked_timestamp(self) -> datetime:
        if isinstance(self.marked_at, datetime):
            return self.marked_at
        return datetime.combine(self.marked_at, time.min)


@dataclass(frozen=True)
class AttendanceCounts:
    """Per-outcome class counts. Cancelled sessions never enter the ratio."""

    present: int = 0
    absent: int = 0
    cancelled: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent


@dataclass(frozen=True)
class AttendanceResult:
    """Metrics for one set of counts.

    ``percentage`` is the float rendering of ``exact_percentage``. Threshold
    fields (``is_above_goal``, ``is_safe``, ``status``) are decided on the
    exact value; re-derive them from ``exact_percentage``, not the float.
    """

    counts: AttendanceCounts
    goal_percentage: float
    percentage: float
    exact_percentage: Fraction
    bunk_buffer: ClassCount
    recovery_required: ClassCount
    is_above_goal: bool
    is_safe: bool
    status: AttendanceBand

    @property
    def track_status(self) -> TrackStatus:
        return TrackStatus.ON_TRACK if self.is_above_goal else TrackStatus.AT_RISK
