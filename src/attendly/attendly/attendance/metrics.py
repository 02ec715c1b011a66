"""Attendance math: percentage, bunk buffer, recovery path and status bands.

Everything here is pure. Ratios are evaluated on exact fractions so that the
inclusive goal threshold and the floor/ceil steps never drift by one because
of binary float rounding. ``percentage`` is handed back as a float for
display, next to ``exact_percentage`` for any further threshold checks.

With ``g = goal / 100`` and ``total = present + absent``:

* bunk buffer: largest ``x >= 0`` with ``present / (total + x) >= g``,
  i.e. ``floor((present - g * total) / g)``;
* recovery: smallest ``x >= 0`` with ``(present + x) / (total + x) >= g``,
  i.e. ``ceil((g * total - present) / (1 - g))``.
"""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Real

from ..common.validators import (
    require_count,
    require_goal_percentage,
    require_percentage,
    require_present_within_total,
)
from ..core.constants import (
    DEFAULT_GOAL_PERCENTAGE,
    RECOVERY_UNREACHABLE,
    SAFE_MARGIN,
    UNLIMITED_BUNKS,
    WARNING_MARGIN,
)
from ..core.enums import AttendanceBand, TrackStatus
from .model import AttendanceCounts, AttendanceResult, ClassCount


def _ratio(present: int, total: int) -> Fraction:
    if total == 0:
        return Fraction(0)
    return Fraction(present, total) * 100


def _bunk_buffer(present: int, total: int, goal: Fraction) -> ClassCount:
    if total == 0:
        return 0
    if goal == 0:
        return UNLIMITED_BUNKS
    g = goal / 100
    return max(math.floor((present - g * total) / g), 0)


def _recovery(present: int, total: int, goal: Fraction) -> ClassCount:
    if total == 0 or _ratio(present, total) >= goal:
        return 0
    if goal == 100:
        # Any past absence keeps the ratio below 1 forever.
        return RECOVERY_UNREACHABLE
    g = goal / 100
    return max(math.ceil((g * total - present) / (1 - g)), 0)


def _band(percentage: Fraction, goal: Fraction) -> AttendanceBand:
    if percentage >= goal + SAFE_MARGIN:
        return AttendanceBand.SAFE
    if percentage >= goal - WARNING_MARGIN:
        return AttendanceBand.WARNING
    return AttendanceBand.DANGER


def attendance_percentage(present: int, absent: int) -> float:
    """Share of attended classes in percent; 0 when nothing is logged yet."""
    present = require_count(present, "present")
    absent = require_count(absent, "absent")
    return float(_ratio(present, present + absent))


def compute_attendance(
    present: int,
    absent: int,
    cancelled: int = 0,
    goal_percentage: Real = DEFAULT_GOAL_PERCENTAGE,
) -> AttendanceResult:
    """Derive every attendance metric for one set of counts.

    ``cancelled`` is carried through for display only. Raises
    ``ValidationError`` for negative or non-integer counts and for goals
    outside ``[0, 100]``.
    """
    counts = AttendanceCounts(
        present=require_count(present, "present"),
        absent=require_count(absent, "absent"),
        cancelled=require_count(cancelled, "cancelled"),
    )
    goal = require_goal_percentage(goal_percentage)

    total = counts.total
    ratio = _ratio(counts.present, total)
    is_above_goal = ratio >= goal

    return AttendanceResult(
        counts=counts,
        goal_percentage=goal_percentage,
        percentage=float(ratio),
        exact_percentage=ratio,
        bunk_buffer=_bunk_buffer(counts.present, total, goal) if is_above_goal else 0,
        recovery_required=_recovery(counts.present, total, goal) if not is_above_goal else 0,
        is_above_goal=is_above_goal,
        is_safe=ratio >= goal + SAFE_MARGIN,
        status=_band(ratio, goal),
    )


def calculate_bunk_buffer(
    present: int,
    total: int,
    goal_percentage: Real = DEFAULT_GOAL_PERCENTAGE,
) -> ClassCount:
    """Classes that can still be skipped while staying at or above the goal."""
    present = require_count(present, "present")
    total = require_count(total, "total")
    require_present_within_total(present, total)
    return _bunk_buffer(present, total, require_goal_percentage(goal_percentage))


def calculate_recovery(
    present: int,
    total: int,
    goal_percentage: Real = DEFAULT_GOAL_PERCENTAGE,
) -> ClassCount:
    """Consecutive classes to attend before the goal is reached again."""
    present = require_count(present, "present")
    total = require_count(total, "total")
    require_present_within_total(present, total)
    return _recovery(present, total, require_goal_percentage(goal_percentage))


def get_attendance_status(
    percentage: Real,
    goal_percentage: Real = DEFAULT_GOAL_PERCENTAGE,
) -> AttendanceBand:
    return _band(require_percentage(percentage), require_goal_percentage(goal_percentage))


def get_track_status(
    percentage: Real,
    goal_percentage: Real = DEFAULT_GOAL_PERCENTAGE,
) -> TrackStatus:
    if require_percentage(percentage) >= require_goal_percentage(goal_percentage):
        return TrackStatus.ON_TRACK
    return TrackStatus.AT_RISK
