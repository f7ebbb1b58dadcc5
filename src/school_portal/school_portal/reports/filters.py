"""Search and filter helpers behind the admin listing pages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.constants import UNASSIGNED_FACULTY
from ..faculty.model import Faculty
from ..students.model import Student
from ..subjects.model import Subject


def _matches(term: str, *values: object) -> bool:
    return any(term in str(v or "").lower() for v in values)


def filter_students(
    students: Iterable[Student],
    *,
    search: str = "",
    department: str = "",
    year: str = "",
) -> list[Student]:
    term = (search or "").lower()
    out = list(students)
    if term:
        out = [s for s in out if _matches(term, s.name, s.id, s.email)]
    if department:
        out = [s for s in out if s.department == department]
    if year:
        out = [s for s in out if s.year == year]
    return out


def filter_faculty(faculty: Iterable[Faculty], *, search: str = "", department: str = "") -> list[Faculty]:
    term = (search or "").lower()
    out = list(faculty)
    if term:
        out = [f for f in out if _matches(term, f.name, f.id, f.email)]
    if department:
        out = [f for f in out if f.department == department]
    return out


def filter_subjects(subjects: Iterable[Subject], *, search: str = "", department: str = "") -> list[Subject]:
    term = (search or "").lower()
    out = list(subjects)
    if term:
        out = [s for s in out if _matches(term, s.name, s.code)]
    if department:
        out = [s for s in out if s.department == department]
    return out


@dataclass(frozen=True)
class SubjectWithFaculty:
    subject: Subject
    faculty_name: str


def faculty_name_for(subject: Subject, faculty: Sequence[Faculty]) -> str:
    for f in faculty:
        if f.id == subject.faculty_id:
            return f.name
    return UNASSIGNED_FACULTY


def subjects_with_faculty(subjects: Iterable[Subject], faculty: Sequence[Faculty]) -> list[SubjectWithFaculty]:
    return [SubjectWithFaculty(subject=s, faculty_name=faculty_name_for(s, faculty)) for s in subjects]
