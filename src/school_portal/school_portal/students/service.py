from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..announcements.model import Announcement
from ..announcements.repository import AnnouncementRepository
from ..attendance.repository import AttendanceRepository
from ..core.constants import RECENT_ANNOUNCEMENTS_LIMIT
from ..core.exceptions import NotFoundError
from ..marks.repository import MarksRepository
from ..reports.announcements import announcements_for_class, announcements_for_subject_filter
from ..reports.attendance import AttendanceRollup, summarize_attendance
from ..reports.marks import MarkLine, SubjectPerformance, marks_rollup, performance_by_subject
from ..reports.timetable import TimetableRow, build_timetable
from ..subjects.model import Subject
from ..subjects.repository import SubjectRepository
from ..users.model import User
from .model import Student
from .repository import StudentRepository


@dataclass(frozen=True)
class SubjectAttendance:
    subject: Subject
    rollup: AttendanceRollup


@dataclass(frozen=True)
class StudentDashboard:
    student: Student
    overall: AttendanceRollup
    total_subjects: int
    announcement_count: int
    subject_attendance: list[SubjectAttendance]
    recent_announcements: list[Announcement]


@dataclass(frozen=True)
class AttendancePage:
    overall: AttendanceRollup
    subjects: list[SubjectAttendance]


@dataclass(frozen=True)
class MarksPage:
    lines: list[tuple[str, MarkLine]]
    performance: list[tuple[str, SubjectPerformance]]


@dataclass(frozen=True)
class AnnouncementsPage:
    subjects: list[Subject]
    announcements: list[Announcement]


class StudentService:
    """Read-only views for a logged-in student.

    A student's subjects are those of their department and year.
    """

    def __init__(
        self,
        students: StudentRepository,
        subjects: SubjectRepository,
        attendance: AttendanceRepository,
        marks: MarksRepository,
        announcements: AnnouncementRepository,
    ):
        self._students = students
        self._subjects = subjects
        self._attendance = attendance
        self._marks = marks
        self._announcements = announcements

    def profile(self, user: User) -> Student:
        student = self._students.find(user.id or "")
        if not student:
            raise NotFoundError("Student profile not found")
        return student

    def class_subjects(self, student: Student) -> list[Subject]:
        return self._subjects.for_class(student.department, student.year)

    def _subject_attendance(self, student: Student, subjects: list[Subject]) -> tuple[AttendanceRollup, list[SubjectAttendance]]:
        records = self._attendance.for_student(student.id)
        per_subject = [
            SubjectAttendance(
                subject=subject,
                rollup=summarize_attendance(r for r in records if r.subject_code == subject.code),
            )
            for subject in subjects
        ]
        return summarize_attendance(records), per_subject

    def dashboard(self, user: User) -> StudentDashboard:
        student = self.profile(user)
        subjects = self.class_subjects(student)
        overall, per_subject = self._subject_attendance(student, subjects)
        announcements = self._announcements.get_all()
        return StudentDashboard(
            student=student,
            overall=overall,
            total_subjects=len(subjects),
            announcement_count=len(announcements),
            subject_attendance=per_subject,
            recent_announcements=announcements[:RECENT_ANNOUNCEMENTS_LIMIT],
        )

    def attendance_page(self, user: User) -> AttendancePage:
        student = self.profile(user)
        overall, per_subject = self._subject_attendance(student, self.class_subjects(student))
        return AttendancePage(overall=overall, subjects=per_subject)

    def marks_page(self, user: User) -> MarksPage:
        records = self._marks.for_student(user.id or "")
        names = {s.code: s.name for s in reversed(self._subjects.get_all())}
        return MarksPage(
            lines=[(names.get(line.record.subject_code, line.record.subject_code), line)
                   for line in marks_rollup(records, user.id or "")],
            performance=[(names.get(p.subject_code, p.subject_code), p) for p in performance_by_subject(records)],
        )

    def timetable(self, user: User) -> list[TimetableRow]:
        return build_timetable(self.class_subjects(self.profile(user)))

    def announcements_page(self, user: User, subject_code: Optional[str] = None) -> AnnouncementsPage:
        student = self.profile(user)
        return AnnouncementsPage(
            subjects=self.class_subjects(student),
            announcements=announcements_for_subject_filter(self._announcements.get_all(), subject_code),
        )

    def class_announcements(self, user: User) -> list[Announcement]:
        student = self.profile(user)
        return announcements_for_class(self._announcements.get_all(), student.department, student.year)
