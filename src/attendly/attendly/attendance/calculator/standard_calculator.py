from __future__ import annotations

from numbers import Real

from ..metrics import compute_attendance
from ..model import AttendanceResult
from .base import AttendanceCalculator


class StandardAttendanceCalculator(AttendanceCalculator):
    """Standard rule: cancelled sessions are neutral, thresholds inclusive."""

    def compute(self, present: int, absent: int, cancelled: int, goal_percentage: Real) -> AttendanceResult:
        return compute_attendance(present, absent, cancelled, goal_percentage)
