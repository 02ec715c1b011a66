from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Optional

from ..attendance.calculator.base import AttendanceCalculator
from ..attendance.calculator.standard_calculator import StandardAttendanceCalculator
from ..attendance.model import AttendanceCounts, AttendanceResult
from ..attendance.repository import AttendanceLogRepository
from ..attendance.tally import tally_logs
from ..core.constants import DEFAULT_GOAL_PERCENTAGE
from ..core.enums import TrackStatus
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)

CARD_LABELS = {TrackStatus.ON_TRACK: "On Track", TrackStatus.AT_RISK: "Risk"}
OVERVIEW_LABELS = {TrackStatus.ON_TRACK: "On Track", TrackStatus.AT_RISK: "Needs Work"}


@dataclass(frozen=True)
class SubjectCard:
    subject: Subject
    result: AttendanceResult
    label: str

    @property
    def counts(self) -> AttendanceCounts:
        return self.result.counts


@dataclass(frozen=True)
class DashboardOverview:
    result: AttendanceResult
    subject_count: int
    label: str

    @property
    def has_data(self) -> bool:
        return self.result.counts.total > 0


class SubjectAttendanceService:
    def __init__(
        self,
        subjects: SubjectRepository,
        logs: AttendanceLogRepository,
        *,
        calculator: Optional[AttendanceCalculator] = None,
        overall_goal: Real = DEFAULT_GOAL_PERCENTAGE,
    ):
        self._subjects = subjects
        self._logs = logs
        self._calculator = calculator or StandardAttendanceCalculator()
        self._overall_goal = overall_goal

    def _counts_by_subject(self, user_id: int) -> tuple[list[Subject], dict[int, AttendanceCounts]]:
        subjects = list(self._subjects.list_for_user(user_id))
        counts = tally_logs(self._logs.list_for_user(user_id))
        return subjects, counts

    def _evaluate(self, counts: AttendanceCounts, goal: Real) -> AttendanceResult:
        return self._calculator.compute(counts.present, counts.absent, counts.cancelled, goal)

    def get_subject_cards(self, user_id: int) -> list[SubjectCard]:
        subjects, counts = self._counts_by_subject(user_id)
        cards = []
        for subject in subjects:
            result = self._evaluate(counts.get(subject.subject_id, AttendanceCounts()), subject.min_attendance_req)
            cards.append(SubjectCard(subject=subject, result=result, label=CARD_LABELS[result.track_status]))
        logger.debug("built %d subject cards for user %s", len(cards), user_id)
        return cards

    def get_overview(self, user_id: int) -> DashboardOverview:
        """Overall figure across subjects, judged against the overall goal.

        Logs of subjects the user no longer has are ignored.
        """
        subjects, counts = self._counts_by_subject(user_id)
        per_subject = [counts.get(s.subject_id, AttendanceCounts()) for s in subjects]
        overall = AttendanceCounts(
            present=sum(c.present for c in per_subject),
            absent=sum(c.absent for c in per_subject),
            cancelled=sum(c.cancelled for c in per_subject),
        )
        result = self._evaluate(overall, self._overall_goal)
        return DashboardOverview(
            result=result,
            subject_count=len(subjects),
            label=OVERVIEW_LABELS[result.track_status],
        )
