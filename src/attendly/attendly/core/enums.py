from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Outcome of one class session as logged by the student."""

    PRESENT = "present"
    ABSENT = "absent"
    CANCELLED = "cancelled"


class AttendanceBand(str, Enum):
    """Display band of a percentage relative to its goal."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


class TrackStatus(str, Enum):
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"


class PlacementStatus(str, Enum):
    """State of a placement-training session."""

    PENDING = "pending"
    ATTENDED = "attended"
    MISSED = "missed"
