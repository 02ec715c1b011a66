from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceLog


class AttendanceLogRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[AttendanceLog]:
        """Every attendance log the user has marked, in any order."""

        raise NotImplementedError
