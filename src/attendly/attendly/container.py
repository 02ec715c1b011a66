from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .attendance.calculator.base import AttendanceCalculator
from .attendance.calculator.memoized_calculator import MemoizedAttendanceCalculator
from .attendance.calculator.standard_calculator import StandardAttendanceCalculator
from .attendance.repository import AttendanceLogRepository
from .common.validators import require_goal_percentage
from .core.constants import DEFAULT_CACHE_SIZE, DEFAULT_GOAL_PERCENTAGE
from .placement.repository import PlacementSessionRepository
from .placement.service import PlacementService
from .reports.service import AttendanceReportService
from .subjects.repository import SubjectRepository
from .subjects.service import SubjectAttendanceService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    subjects_repo: SubjectRepository
    logs_repo: AttendanceLogRepository

    calculator: AttendanceCalculator
    subject_service: SubjectAttendanceService
    report_service: AttendanceReportService
    placement_service: Optional[PlacementService] = None


def build_container(
    *,
    settings,
    subjects_repo: SubjectRepository,
    logs_repo: AttendanceLogRepository,
    placement_repo: Optional[PlacementSessionRepository] = None,
) -> Container:
    overall_goal = getattr(settings, "DEFAULT_GOAL_PERCENTAGE", DEFAULT_GOAL_PERCENTAGE)
    require_goal_percentage(overall_goal)
    cache_size = int(getattr(settings, "CALCULATOR_CACHE_SIZE", DEFAULT_CACHE_SIZE))

    if cache_size > 0:
        calculator: AttendanceCalculator = MemoizedAttendanceCalculator(StandardAttendanceCalculator(), maxsize=cache_size)
    else:
        calculator = StandardAttendanceCalculator()

    subject_service = SubjectAttendanceService(
        subjects_repo,
        logs_repo,
        calculator=calculator,
        overall_goal=overall_goal,
    )
    report_service = AttendanceReportService(subject_service)

    logger.info("container ready (goal=%s, calculator=%s)", overall_goal, type(calculator).__name__)
    return Container(
        subjects_repo=subjects_repo,
        logs_repo=logs_repo,
        calculator=calculator,
        subject_service=subject_service,
        report_service=report_service,
        placement_service=PlacementService(placement_repo) if placement_repo is not None else None,
    )
