"""Example: drive the service layer with in-memory storage.

Storage is an external collaborator; anything with ``list_for_user`` works.
"""

from datetime import datetime, timedelta

from src.attendly.attendly.attendance.model import AttendanceLog
from src.attendly.attendly.core.enums import AttendanceMark
from src.attendly.attendly.main import create_container
from src.attendly.attendly.subjects.model import Subject


class Subjects:
    def list_for_user(self, user_id):
        return [Subject(1, "Data Structures", code="CS201"), Subject(2, "Physics Lab", min_attendance_req=80)]


class Logs:
    def list_for_user(self, user_id):
        start = datetime(2026, 1, 5, 9, 0)
        marks = [AttendanceMark.PRESENT] * 9 + [AttendanceMark.ABSENT] * 3 + [AttendanceMark.CANCELLED]
        logs = []
        for subject_id in (1, 2):
            for i, mark in enumerate(marks[subject_id - 1:]):
                logs.append(AttendanceLog(len(logs) + 1, subject_id, mark, start + timedelta(days=i)))
        return logs


def main():
    container = create_container(subjects_repo=Subjects(), logs_repo=Logs())
    report = container.report_service.build_report(user_id=1)
    for row in report.rows:
        print(row)
    print(report.summary)


if __name__ == "__main__":
    main()
