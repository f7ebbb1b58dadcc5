from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import GOOD_ATTENDANCE_FROM, LOW_ATTENDANCE_BELOW
from ..core.enums import AttendanceStanding, AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRollup:
    total: int
    present: int
    absent: int
    percentage: float
    standing: AttendanceStanding

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "absent": self.absent,
            "percentage": self.percentage,
            "status": self.standing.value,
        }


def classify_attendance(percentage: float) -> AttendanceStanding:
    """Low below 75, Average from 75 up to (not including) 85, Good from 85."""
    if percentage < LOW_ATTENDANCE_BELOW:
        return AttendanceStanding.LOW
    if percentage < GOOD_ATTENDANCE_FROM:
        return AttendanceStanding.AVERAGE
    return AttendanceStanding.GOOD


def summarize_attendance(records: Iterable[AttendanceRecord]) -> AttendanceRollup:
    records = list(records)
    total = len(records)
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    percentage = round(present / total * 100, 2) if total > 0 else 0.0
    return AttendanceRollup(
        total=total,
        present=present,
        absent=total - present,
        percentage=percentage,
        standing=classify_attendance(percentage),
    )


def attendance_rollup(
    records: Iterable[AttendanceRecord],
    student_id: str,
    subject_code: Optional[str] = None,
) -> AttendanceRollup:
    return summarize_attendance(
        r
        for r in records
        if r.student_id == student_id and (subject_code is None or r.subject_code == subject_code)
    )


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for the admin attendance report."""

    student: Student
    rollup: AttendanceRollup

    def to_dict(self) -> dict:
        return {
            "id": self.student.id,
            "name": self.student.name,
            "department": self.student.department,
            "year": self.student.year,
            **self.rollup.to_dict(),
        }


def attendance_report(
    students: Sequence[Student],
    attendance: Sequence[AttendanceRecord],
    *,
    department: str = "",
    year: str = "",
) -> list[AttendanceReportRow]:
    selected = list(students)
    if department:
        selected = [s for s in selected if s.department == department]
    if year:
        selected = [s for s in selected if s.year == year]
    return [AttendanceReportRow(student=s, rollup=attendance_rollup(attendance, s.id)) for s in selected]
