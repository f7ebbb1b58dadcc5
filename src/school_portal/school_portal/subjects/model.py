from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class Subject:
    """A course taught to one department/year.

    ``faculty_id`` is a weak reference and may point at nobody.
    """

    code: str
    name: str
    department: str
    year: str
    credits: Union[int, str]
    faculty_id: str = ""

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Subject":
        return cls(
            code=r.get("code", ""),
            name=r.get("name", ""),
            department=r.get("department", ""),
            year=r.get("year", ""),
            credits=r.get("credits", 0),
            faculty_id=r.get("facultyId", ""),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "department": self.department,
            "year": self.year,
            "credits": self.credits,
            "facultyId": self.faculty_id,
        }
