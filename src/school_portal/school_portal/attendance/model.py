from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import AttendanceStatus
from ..records.fields import enum_field


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's presence in one class session.

    The same (student, subject, date) may appear more than once; each row
    counts as a separate session.
    """

    student_id: str
    subject_code: str
    date: str
    status: AttendanceStatus

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            student_id=r.get("studentId", ""),
            subject_code=r.get("subjectCode", ""),
            date=r.get("date", ""),
            status=enum_field(r, "status", AttendanceStatus),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "subjectCode": self.subject_code,
            "date": self.date,
            "status": self.status.value,
        }
