from __future__ import annotations

from datetime import timedelta

import pytest

from src.school_portal.school_portal.core.enums import AttendanceStanding, Grade, Role
from src.school_portal.school_portal.core.exceptions import NotFoundError
from src.school_portal.school_portal.users.model import User

STUDENT1 = User(username="student1", password="student123", role=Role.STUDENT, name="Rajesh Kumar", id="STU001")
FACULTY1 = User(username="faculty1", password="faculty123", role=Role.FACULTY, name="Dr. Ramesh Verma", id="FAC001")


def _take_attendance(container, subject, date, statuses):
    container.faculty_service.submit_attendance(subject_code=subject, date=date, statuses=statuses)


def test_dashboard_for_seeded_student(container, fixed_now):
    _take_attendance(container, "CS301", "2026-01-01", {"STU001": "present"})
    _take_attendance(container, "CS301", "2026-01-02", {"STU001": "present"})
    _take_attendance(container, "CS302", "2026-01-02", {})
    for i in range(6):
        container.faculty_service.post_announcement(
            FACULTY1, title=f"n{i}", subject_code="all", message="m", now=fixed_now + timedelta(seconds=i)
        )

    dash = container.student_service.dashboard(STUDENT1)

    assert dash.student.name == "Rajesh Kumar"
    assert dash.total_subjects == 2
    assert (dash.overall.total, dash.overall.present, dash.overall.percentage) == (3, 2, 66.67)
    assert dash.overall.standing == AttendanceStanding.LOW
    assert [(a.subject.code, a.rollup.percentage) for a in dash.subject_attendance] == [("CS301", 100.0), ("CS302", 0.0)]
    assert dash.announcement_count == 6
    assert [a.title for a in dash.recent_announcements] == ["n5", "n4", "n3", "n2", "n1"]


def test_profile_missing(container):
    ghost = User(username="ghost", password="x", role=Role.STUDENT, name="Ghost", id="STU999")

    with pytest.raises(NotFoundError, match="Student profile not found"):
        container.student_service.dashboard(ghost)


def test_attendance_page_without_records(container):
    page = container.student_service.attendance_page(STUDENT1)

    assert page.overall.total == 0
    assert page.overall.percentage == 0.0
    assert [s.subject.code for s in page.subjects] == ["CS301", "CS302"]


def test_marks_page_uses_subject_names(container, fixed_now):
    container.faculty_service.submit_marks(
        subject_code="CS301", assessment_type="Quiz", max_marks="20", marks={"STU001": "18"}, now=fixed_now
    )
    container.store.write(
        "marks",
        container.store.read("marks")
        + [
            {
                "studentId": "STU001",
                "subjectCode": "XX100",
                "assessmentType": "Lab",
                "maxMarks": 10,
                "marksObtained": 5,
                "date": "2026-01-31T08:30:00.000Z",
            }
        ],
    )

    page = container.student_service.marks_page(STUDENT1)

    assert [(name, line.percentage, line.grade) for name, line in page.lines] == [
        ("Data Structures", 90.0, Grade.A_PLUS),
        ("XX100", 50.0, Grade.D),
    ]
    assert [(name, p.percentage) for name, p in page.performance] == [("Data Structures", 90.0), ("XX100", 50.0)]


def test_timetable_rotates_class_subjects(container):
    rows = container.student_service.timetable(STUDENT1)

    assert len(rows) == 7
    assert rows[3].is_break
    assert [s.code for s in rows[0].cells] == ["CS301", "CS302", "CS301", "CS302", "CS301"]
    assert [s.code for s in rows[1].cells] == ["CS302", "CS301", "CS302", "CS301", "CS302"]


def test_announcements_page_filter(container, fixed_now):
    svc = container.faculty_service
    svc.post_announcement(FACULTY1, title="General", subject_code="all", message="m", now=fixed_now)
    svc.post_announcement(
        FACULTY1, title="DS quiz", subject_code="CS301", message="m", now=fixed_now + timedelta(seconds=1)
    )

    everything = container.student_service.announcements_page(STUDENT1)
    only_ds = container.student_service.announcements_page(STUDENT1, "CS301")
    only_db = container.student_service.announcements_page(STUDENT1, "CS302")

    assert [s.code for s in everything.subjects] == ["CS301", "CS302"]
    assert [a.title for a in everything.announcements] == ["DS quiz", "General"]
    assert [a.title for a in only_ds.announcements] == ["DS quiz", "General"]
    assert [a.title for a in only_db.announcements] == ["General"]
