from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import AnnouncementTarget
from ..records.fields import enum_field, without_none


@dataclass(frozen=True)
class Announcement:
    """Notice posted by a faculty member.

    ``id`` and ``date`` are assigned when the announcement is stored.
    ``department``/``year`` are optional and never filled by the posting form.
    """

    title: str
    message: str
    subject_code: str
    faculty_id: str
    faculty_name: str
    target: AnnouncementTarget
    id: str = ""
    date: str = ""
    department: Optional[str] = None
    year: Optional[str] = None

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Announcement":
        return cls(
            title=r.get("title", ""),
            message=r.get("message", ""),
            subject_code=r.get("subjectCode", ""),
            faculty_id=r.get("facultyId", ""),
            faculty_name=r.get("facultyName", ""),
            target=enum_field(r, "target", AnnouncementTarget),
            id=r.get("id", ""),
            date=r.get("date", ""),
            department=r.get("department"),
            year=r.get("year"),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "message": self.message,
            "subjectCode": self.subject_code,
            "facultyId": self.faculty_id,
            "facultyName": self.faculty_name,
            "target": self.target.value,
            "date": self.date,
            **without_none({"department": self.department, "year": self.year}),
        }
