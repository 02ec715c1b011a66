from __future__ import annotations

import math
from dataclasses import dataclass

from ..attendance.model import ClassCount
from ..subjects.service import SubjectAttendanceService


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


def _format_count(value: ClassCount) -> str:
    if math.isinf(value):
        return "-"
    return str(int(value))


def _format_percentage(value: float) -> str:
    return f"{value:.1f}"


class AttendanceReportService:
    def __init__(self, subjects: SubjectAttendanceService):
        self._subjects = subjects

    def build_report(self, user_id: int) -> ReportData:
        cards = self._subjects.get_subject_cards(user_id)
        cards.sort(key=lambda c: c.result.percentage)

        rows: list[dict] = []
        for card in cards:
            r = card.result
            rows.append(
                {
                    "subject_id": card.subject.subject_id,
                    "name": card.subject.name,
                    "code": card.subject.code or "-",
                    "present": r.counts.present,
                    "absent": r.counts.absent,
                    "cancelled": r.counts.cancelled,
                    "total": r.counts.total,
                    "percentage": _format_percentage(r.percentage),
                    "goal": _format_percentage(float(r.goal_percentage)),
                    "bunk_buffer": _format_count(r.bunk_buffer),
                    "recovery_required": _format_count(r.recovery_required),
                    "status": r.status.value,
                    "label": card.label,
                }
            )

        overview = self._subjects.get_overview(user_id)
        o = overview.result
        summary = {
            "subjects": overview.subject_count,
            "present": o.counts.present,
            "absent": o.counts.absent,
            "total": o.counts.total,
            "percentage": _format_percentage(o.percentage) if overview.has_data else "--",
            "safe_bunks": _format_count(o.bunk_buffer),
            "recovery_required": _format_count(o.recovery_required),
            "label": overview.label,
        }
        return ReportData(rows=rows, summary=summary)
