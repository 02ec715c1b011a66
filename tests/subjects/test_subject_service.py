from __future__ import annotations

from src.attendly.attendly.attendance.calculator.memoized_calculator import MemoizedAttendanceCalculator
from src.attendly.attendly.core.enums import AttendanceBand, AttendanceMark, TrackStatus
from src.attendly.attendly.subjects.model import Subject
from src.attendly.attendly.subjects.service import SubjectAttendanceService
from tests.fakes import InMemoryLogs, InMemorySubjects


def _setup():
    subjects = InMemorySubjects(
        {
            1: [
                Subject(subject_id=10, name="Maths", code="MA101"),
                Subject(subject_id=20, name="Physics", min_attendance_req=80),
                Subject(subject_id=30, name="Chemistry"),
            ]
        }
    )
    logs = InMemoryLogs()
    logs.mark_many(1, 10, AttendanceMark.PRESENT, 38)
    logs.mark_many(1, 10, AttendanceMark.ABSENT, 2)
    logs.mark_many(1, 20, AttendanceMark.PRESENT, 20)
    logs.mark_many(1, 20, AttendanceMark.ABSENT, 20)
    logs.mark_many(1, 20, AttendanceMark.CANCELLED, 3)
    return subjects, logs


def test_cards_use_each_subject_goal():
    subjects, logs = _setup()
    svc = SubjectAttendanceService(subjects, logs)

    cards = {c.subject.subject_id: c for c in svc.get_subject_cards(1)}

    maths = cards[10]
    assert maths.result.percentage == 95
    assert maths.result.bunk_buffer == 10
    assert maths.label == "On Track"
    assert maths.result.status == AttendanceBand.SAFE

    physics = cards[20]
    assert physics.counts.cancelled == 3
    assert physics.result.goal_percentage == 80
    # (0.8 * 40 - 20) / 0.2
    assert physics.result.recovery_required == 60
    assert physics.label == "Risk"


def test_subject_without_logs_gets_zero_card():
    subjects, logs = _setup()
    svc = SubjectAttendanceService(subjects, logs)

    chemistry = [c for c in svc.get_subject_cards(1) if c.subject.subject_id == 30][0]

    assert chemistry.counts.total == 0
    assert chemistry.result.percentage == 0
    assert chemistry.result.track_status == TrackStatus.AT_RISK


def test_overview_sums_all_subjects_against_overall_goal():
    subjects, logs = _setup()
    svc = SubjectAttendanceService(subjects, logs, overall_goal=75)

    overview = svc.get_overview(1)

    assert overview.subject_count == 3
    assert overview.result.counts.present == 58
    assert overview.result.counts.absent == 22
    assert overview.result.percentage == 72.5
    assert overview.result.bunk_buffer == 0
    # (0.75 * 80 - 58) / 0.25
    assert overview.result.recovery_required == 8
    assert overview.label == "Needs Work"


def test_overview_ignores_logs_of_removed_subjects():
    subjects, logs = _setup()
    logs.mark_many(1, 99, AttendanceMark.ABSENT, 50)
    svc = SubjectAttendanceService(subjects, logs)

    assert svc.get_overview(1).result.counts.absent == 22


def test_overview_without_subjects():
    svc = SubjectAttendanceService(InMemorySubjects(), InMemoryLogs())

    overview = svc.get_overview(7)

    assert overview.has_data is False
    assert overview.result.percentage == 0
    assert overview.result.bunk_buffer == 0


def test_service_accepts_memoized_calculator():
    subjects, logs = _setup()
    calc = MemoizedAttendanceCalculator(maxsize=16)
    svc = SubjectAttendanceService(subjects, logs, calculator=calc)

    svc.get_subject_cards(1)
    svc.get_subject_cards(1)

    assert calc.cache_info().hits == 3
