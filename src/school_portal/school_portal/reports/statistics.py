from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..faculty.model import Faculty
from ..students.model import Student
from ..subjects.model import Subject


@dataclass(frozen=True)
class Statistics:
    total_students: int
    total_faculty: int
    total_subjects: int
    total_departments: int

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "totalFaculty": self.total_faculty,
            "totalSubjects": self.total_subjects,
            "totalDepartments": self.total_departments,
        }


def summary_statistics(
    students: Sequence[Student],
    faculty: Sequence[Faculty],
    subjects: Sequence[Subject],
) -> Statistics:
    # Departments are counted over students only.
    return Statistics(
        total_students=len(students),
        total_faculty=len(faculty),
        total_subjects=len(subjects),
        total_departments=len({s.department for s in students}),
    )
