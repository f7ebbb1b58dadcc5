from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional

from ..announcements.model import Announcement
from ..announcements.repository import AnnouncementRepository
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import iso_timestamp, now_utc
from ..common.validators import require_fields, to_int
from ..core.constants import ALL_SUBJECTS
from ..core.enums import AnnouncementTarget, AttendanceStatus
from ..core.exceptions import ValidationError
from ..marks.model import MarksRecord
from ..marks.repository import MarksRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from ..subjects.model import Subject
from ..subjects.repository import SubjectRepository
from ..users.model import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FacultyDashboard:
    name: str
    subjects: list[Subject]
    total_students: int
    classes_today: int
    pending_tasks: int
    recent_announcements: list[Announcement]


@dataclass(frozen=True)
class Roster:
    subject: Subject
    students: list[Student]


class FacultyService:
    """Use cases for a faculty member: class rosters, attendance, marks, notices."""

    def __init__(
        self,
        subjects: SubjectRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
        marks: MarksRepository,
        announcements: AnnouncementRepository,
    ):
        self._subjects = subjects
        self._students = students
        self._attendance = attendance
        self._marks = marks
        self._announcements = announcements

    def assigned_subjects(self, user: User) -> list[Subject]:
        return self._subjects.for_faculty(user.id or "")

    def dashboard(self, user: User) -> FacultyDashboard:
        subjects = self.assigned_subjects(user)
        students = [
            s
            for s in self._students.get_all()
            if any(sub.department == s.department and sub.year == s.year for sub in subjects)
        ]
        return FacultyDashboard(
            name=user.name,
            subjects=subjects,
            total_students=len(students),
            classes_today=len(subjects),
            pending_tasks=0,
            recent_announcements=self._announcements.recent(),
        )

    def roster(self, subject_code: str) -> Roster:
        subject = self._subjects.find(subject_code)
        if not subject:
            raise ValidationError("Subject not found")
        return Roster(subject=subject, students=self._students.for_class(subject.department, subject.year))

    def submit_attendance(
        self,
        *,
        subject_code: str,
        date: str,
        statuses: Mapping[str, str],
    ) -> list[AttendanceRecord]:
        """Record one session for the whole roster; unmarked students are absent."""
        require_fields("Please select subject and date", subject_code, date)
        roster = self.roster(subject_code)

        records = []
        for student in roster.students:
            raw = statuses.get(student.id) or AttendanceStatus.ABSENT.value
            try:
                status = AttendanceStatus(raw)
            except ValueError:
                raise ValidationError(f"Invalid attendance status: {raw}")
            records.append(
                AttendanceRecord(student_id=student.id, subject_code=subject_code, date=date, status=status)
            )

        self._attendance.add_many(records)
        logger.info("attendance for %s on %s: %d record(s)", subject_code, date, len(records))
        return records

    def submit_marks(
        self,
        *,
        subject_code: str,
        assessment_type: str,
        max_marks: object,
        marks: Mapping[str, object],
        now: Optional[datetime] = None,
    ) -> list[MarksRecord]:
        """Record one assessment for the whole roster; blank marks count as zero."""
        require_fields("Please fill all fields", subject_code, assessment_type, max_marks)
        roster = self.roster(subject_code)
        stamp = iso_timestamp(now or now_utc())
        maximum = to_int(max_marks)

        records = [
            MarksRecord(
                student_id=student.id,
                subject_code=subject_code,
                assessment_type=assessment_type,
                max_marks=maximum,
                marks_obtained=to_int(marks.get(student.id) or "0"),
                date=stamp,
            )
            for student in roster.students
        ]

        self._marks.add_many(records)
        logger.info("%s marks for %s: %d record(s)", assessment_type, subject_code, len(records))
        return records

    def post_announcement(
        self,
        user: User,
        *,
        title: str,
        subject_code: str,
        message: str,
        now: Optional[datetime] = None,
    ) -> Announcement:
        target = AnnouncementTarget.ALL if subject_code == ALL_SUBJECTS else AnnouncementTarget.SUBJECT
        return self._announcements.add(
            Announcement(
                title=title,
                message=message,
                subject_code=subject_code,
                faculty_id=user.id or "",
                faculty_name=user.name,
                target=target,
            ),
            now=now,
        )

    def my_announcements(self, user: User) -> list[Announcement]:
        return self._announcements.for_faculty(user.id or "")
