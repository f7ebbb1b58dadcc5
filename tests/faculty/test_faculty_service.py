from __future__ import annotations

from datetime import timedelta

import pytest

from src.school_portal.school_portal.core.enums import AnnouncementTarget, AttendanceStatus, Role
from src.school_portal.school_portal.core.exceptions import ValidationError
from src.school_portal.school_portal.users.model import User

FACULTY1 = User(username="faculty1", password="faculty123", role=Role.FACULTY, name="Dr. Ramesh Verma", id="FAC001")


def test_dashboard_counts_assigned_classes(container, fixed_now):
    container.faculty_service.post_announcement(FACULTY1, title="Welcome", subject_code="all", message="hi", now=fixed_now)

    dash = container.faculty_service.dashboard(FACULTY1)

    assert [s.code for s in dash.subjects] == ["CS301", "CS302"]
    assert dash.total_students == 2
    assert dash.classes_today == 2
    assert dash.pending_tasks == 0
    assert [a.title for a in dash.recent_announcements] == ["Welcome"]


def test_roster_is_class_of_subject(container):
    roster = container.faculty_service.roster("EC201")

    assert [s.id for s in roster.students] == ["STU003"]


def test_roster_for_unknown_subject(container):
    with pytest.raises(ValidationError, match="Subject not found"):
        container.faculty_service.roster("ZZ999")


def test_submit_attendance_defaults_to_absent(container):
    records = container.faculty_service.submit_attendance(
        subject_code="CS301", date="2026-01-31", statuses={"STU001": "present"}
    )

    assert [(r.student_id, r.status) for r in records] == [
        ("STU001", AttendanceStatus.PRESENT),
        ("STU002", AttendanceStatus.ABSENT),
    ]
    assert container.store.read("attendance") == [
        {"studentId": "STU001", "subjectCode": "CS301", "date": "2026-01-31", "status": "present"},
        {"studentId": "STU002", "subjectCode": "CS301", "date": "2026-01-31", "status": "absent"},
    ]


def test_submitting_same_session_twice_keeps_both(container):
    for _ in range(2):
        container.faculty_service.submit_attendance(subject_code="CS301", date="2026-01-31", statuses={})

    assert len(container.attendance_repo.for_subject("CS301")) == 4


def test_submit_attendance_requires_subject_and_date(container):
    with pytest.raises(ValidationError):
        container.faculty_service.submit_attendance(subject_code="CS301", date="", statuses={})


def test_submit_attendance_rejects_unknown_status(container):
    with pytest.raises(ValidationError):
        container.faculty_service.submit_attendance(subject_code="CS301", date="2026-01-31", statuses={"STU001": "late"})
    assert container.store.read("attendance") == []


def test_submit_marks_coerces_numbers(container, fixed_now):
    records = container.faculty_service.submit_marks(
        subject_code="CS301",
        assessment_type="Mid Term",
        max_marks="50",
        marks={"STU001": "45", "STU002": ""},
        now=fixed_now,
    )

    assert [(r.student_id, r.max_marks, r.marks_obtained) for r in records] == [("STU001", 50, 45), ("STU002", 50, 0)]
    assert records[0].date == "2026-01-31T08:30:00.000Z"
    assert len(container.marks_repo.for_subject("CS301")) == 2


def test_submit_marks_requires_fields(container):
    with pytest.raises(ValidationError, match="Please fill all fields"):
        container.faculty_service.submit_marks(subject_code="CS301", assessment_type="", max_marks="50", marks={})


def test_post_announcement_target(container, fixed_now):
    svc = container.faculty_service
    everyone = svc.post_announcement(FACULTY1, title="Holiday", subject_code="all", message="m", now=fixed_now)
    subject = svc.post_announcement(
        FACULTY1, title="Quiz", subject_code="CS301", message="m", now=fixed_now + timedelta(seconds=1)
    )

    assert everyone.target == AnnouncementTarget.ALL
    assert subject.target == AnnouncementTarget.SUBJECT
    assert subject.faculty_name == "Dr. Ramesh Verma"
    assert [a.title for a in svc.my_announcements(FACULTY1)] == ["Quiz", "Holiday"]


def test_my_announcements_only_own(container, fixed_now):
    other = User(username="faculty2", password="faculty123", role=Role.FACULTY, name="Dr. Sunita Gupta", id="FAC002")
    container.faculty_service.post_announcement(other, title="ECE", subject_code="EC201", message="m", now=fixed_now)

    assert container.faculty_service.my_announcements(FACULTY1) == []
