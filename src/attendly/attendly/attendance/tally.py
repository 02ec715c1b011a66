from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.validators import require_mark
from ..core.enums import AttendanceMark
from .model import AttendanceCounts, AttendanceLog


def latest_marks(logs: Iterable[AttendanceLog]) -> list[AttendanceLog]:
    """Keep one log per (subject, date, session): re-marking a slot replaces it.

    The latest ``marked_at`` wins; ``log_id`` breaks ties.
    """
    slots: dict[tuple[int, date, int], AttendanceLog] = {}
    for log in logs:
        key = (log.subject_id, log.session_date, log.session_number)
        current = slots.get(key)
        if current is None or (log.marked_timestamp, log.log_id) > (current.marked_timestamp, current.log_id):
            slots[key] = log
    return list(slots.values())


def tally_logs(logs: Iterable[AttendanceLog]) -> dict[int, AttendanceCounts]:
    totals: dict[int, dict[AttendanceMark, int]] = {}
    for log in latest_marks(logs):
        per_subject = totals.setdefault(log.subject_id, {mark: 0 for mark in AttendanceMark})
        per_subject[require_mark(log.status)] += 1

    return {
        subject_id: AttendanceCounts(
            present=c[AttendanceMark.PRESENT],
            absent=c[AttendanceMark.ABSENT],
            cancelled=c[AttendanceMark.CANCELLED],
        )
        for subject_id, c in totals.items()
    }


def counts_for_subject(logs: Iterable[AttendanceLog], subject_id: int) -> AttendanceCounts:
    return tally_logs(log for log in logs if log.subject_id == subject_id).get(subject_id, AttendanceCounts())
