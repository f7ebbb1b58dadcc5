from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_FACULTY_PASSWORD, DEFAULT_STUDENT_PASSWORD
from ..faculty.model import Faculty
from ..faculty.repository import FacultyRepository
from ..reports.attendance import AttendanceReportRow, attendance_report
from ..reports.filters import SubjectWithFaculty, filter_faculty, filter_students, filter_subjects, subjects_with_faculty
from ..reports.statistics import Statistics, summary_statistics
from ..students.model import Student
from ..students.repository import StudentRepository
from ..subjects.model import Subject
from ..subjects.repository import SubjectRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminDashboard:
    statistics: Statistics
    activities: list[str]


class AdminService:
    """Use cases behind the admin pages: directory management and reports.

    Form values are taken as given; nothing here checks for duplicate ids or
    that a subject's faculty exists.
    """

    def __init__(
        self,
        students: StudentRepository,
        faculty: FacultyRepository,
        subjects: SubjectRepository,
        attendance: AttendanceRepository,
    ):
        self._students = students
        self._faculty = faculty
        self._subjects = subjects
        self._attendance = attendance

    def statistics(self) -> Statistics:
        return summary_statistics(self._students.get_all(), self._faculty.get_all(), self._subjects.get_all())

    def dashboard(self) -> AdminDashboard:
        stats = self.statistics()
        return AdminDashboard(
            statistics=stats,
            activities=[
                "System initialized successfully",
                f"{stats.total_students} students registered",
                f"{stats.total_faculty} faculty members added",
                f"{stats.total_subjects} subjects created",
            ],
        )

    # Students
    def list_students(self, *, search: str = "", department: str = "", year: str = "") -> list[Student]:
        return filter_students(self._students.get_all(), search=search, department=department, year=year)

    def add_student(self, form: Mapping[str, Any]) -> Student:
        student_id = str(form.get("id", ""))
        student = Student(
            id=student_id,
            name=form.get("name", ""),
            email=form.get("email", ""),
            phone=form.get("phone", ""),
            department=form.get("department", ""),
            year=form.get("year", ""),
            username=student_id.lower(),
            password=DEFAULT_STUDENT_PASSWORD,
        )
        self._students.add(student)
        return student

    def update_student(self, student_id: str, partial: Mapping[str, Any]) -> bool:
        return self._students.update(student_id, partial)

    def delete_student(self, student_id: str) -> int:
        return self._students.delete(student_id)

    # Faculty
    def list_faculty(self, *, search: str = "", department: str = "") -> list[Faculty]:
        return filter_faculty(self._faculty.get_all(), search=search, department=department)

    def add_faculty(self, form: Mapping[str, Any]) -> Faculty:
        faculty_id = str(form.get("id", ""))
        member = Faculty(
            id=faculty_id,
            name=form.get("name", ""),
            email=form.get("email", ""),
            phone=form.get("phone", ""),
            department=form.get("department", ""),
            designation=form.get("designation", ""),
            username=faculty_id.lower(),
            password=DEFAULT_FACULTY_PASSWORD,
        )
        self._faculty.add(member)
        return member

    def update_faculty(self, faculty_id: str, partial: Mapping[str, Any]) -> bool:
        return self._faculty.update(faculty_id, partial)

    def delete_faculty(self, faculty_id: str) -> int:
        return self._faculty.delete(faculty_id)

    # Subjects
    def list_subjects(self, *, search: str = "", department: str = "") -> list[SubjectWithFaculty]:
        subjects = filter_subjects(self._subjects.get_all(), search=search, department=department)
        return subjects_with_faculty(subjects, self._faculty.get_all())

    def add_subject(self, form: Mapping[str, Any]) -> Subject:
        subject = Subject(
            code=form.get("code", ""),
            name=form.get("name", ""),
            department=form.get("department", ""),
            year=form.get("year", ""),
            credits=form.get("credits", ""),
            faculty_id=form.get("facultyId", ""),
        )
        self._subjects.add(subject)
        return subject

    def update_subject(self, code: str, partial: Mapping[str, Any]) -> bool:
        return self._subjects.update(code, partial)

    def delete_subject(self, code: str) -> int:
        return self._subjects.delete(code)

    # Reports
    def attendance_report(self, *, department: str = "", year: str = "") -> list[AttendanceReportRow]:
        return attendance_report(
            self._students.get_all(),
            self._attendance.get_all(),
            department=department,
            year=year,
        )
