from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import Grade
from ..marks.model import MarksRecord

# Descending, non-overlapping: the first threshold reached decides the grade.
GRADE_THRESHOLDS = (
    (90, Grade.A_PLUS),
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
)


def _number(value: object) -> float:
    # Marks arrive from forms unvalidated; anything non-numeric scores as zero.
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0


def mark_percentage(obtained: object, maximum: object) -> float:
    maximum = _number(maximum)
    if maximum <= 0:
        return 0.0
    return round(_number(obtained) / maximum * 100, 2)


def grade_for(percentage: float) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if percentage >= threshold:
            return grade
    return Grade.F


@dataclass(frozen=True)
class MarkLine:
    record: MarksRecord
    percentage: float
    grade: Grade

    def to_dict(self) -> dict:
        return {
            **self.record.to_record(),
            "percentage": self.percentage,
            "grade": self.grade.value,
        }


def mark_line(record: MarksRecord) -> MarkLine:
    pct = mark_percentage(record.marks_obtained, record.max_marks)
    return MarkLine(record=record, percentage=pct, grade=grade_for(pct))


def marks_rollup(
    records: Iterable[MarksRecord],
    student_id: str,
    subject_code: Optional[str] = None,
) -> list[MarkLine]:
    return [
        mark_line(r)
        for r in records
        if r.student_id == student_id and (subject_code is None or r.subject_code == subject_code)
    ]


@dataclass(frozen=True)
class SubjectPerformance:
    subject_code: str
    obtained: float
    total: float
    count: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "subjectCode": self.subject_code,
            "obtained": self.obtained,
            "total": self.total,
            "count": self.count,
            "percentage": self.percentage,
        }


def performance_by_subject(records: Iterable[MarksRecord]) -> list[SubjectPerformance]:
    """Sum obtained/max per subject code, in first-seen order."""
    totals: dict[str, list[float]] = {}
    for r in records:
        acc = totals.setdefault(r.subject_code, [0.0, 0.0, 0])
        acc[0] += _number(r.marks_obtained)
        acc[1] += _number(r.max_marks)
        acc[2] += 1

    return [
        SubjectPerformance(
            subject_code=code,
            obtained=obtained,
            total=total,
            count=int(count),
            percentage=mark_percentage(obtained, total),
        )
        for code, (obtained, total, count) in totals.items()
    ]
