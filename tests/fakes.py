from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from src.attendly.attendly.attendance.model import AttendanceLog
from src.attendly.attendly.core.enums import AttendanceMark
from src.attendly.attendly.subjects.model import Subject


@dataclass
class InMemorySubjects:
    subjects_by_user: dict[int, list[Subject]] = field(default_factory=dict)

    def list_for_user(self, user_id: int) -> list[Subject]:
        return self.subjects_by_user.get(user_id, [])


class InMemoryLogs:
    def __init__(self):
        self._by_user: dict[int, list[AttendanceLog]] = {}
        self._id = 0

    def list_for_user(self, user_id: int) -> list[AttendanceLog]:
        return self._by_user.get(user_id, [])

    def mark_many(self, user_id: int, subject_id: int, status: AttendanceMark, count: int) -> None:
        """Log ``count`` sessions on consecutive days."""
        start = datetime(2026, 1, 5, 9, 0)
        existing = sum(1 for log in self._by_user.get(user_id, []) if log.subject_id == subject_id)
        for i in range(count):
            self._id += 1
            self._by_user.setdefault(user_id, []).append(
                AttendanceLog(
                    log_id=self._id,
                    subject_id=subject_id,
                    status=status,
                    marked_at=start + timedelta(days=existing + i),
                )
            )
