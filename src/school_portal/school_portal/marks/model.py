from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

Number = Union[int, float]


@dataclass(frozen=True)
class MarksRecord:
    """Score of one student in one assessment.

    ``marks_obtained`` is expected within 0..max_marks but nothing enforces it.
    """

    student_id: str
    subject_code: str
    assessment_type: str
    max_marks: Number
    marks_obtained: Number
    date: str

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "MarksRecord":
        return cls(
            student_id=r.get("studentId", ""),
            subject_code=r.get("subjectCode", ""),
            assessment_type=r.get("assessmentType", ""),
            max_marks=r.get("maxMarks", 0),
            marks_obtained=r.get("marksObtained", 0),
            date=r.get("date", ""),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "subjectCode": self.subject_code,
            "assessmentType": self.assessment_type,
            "maxMarks": self.max_marks,
            "marksObtained": self.marks_obtained,
            "date": self.date,
        }
