from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Portal roles; each role sees its own set of pages."""

    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Status recorded for one student in one class session."""

    PRESENT = "present"
    ABSENT = "absent"


class AnnouncementTarget(str, Enum):
    ALL = "all"
    SUBJECT = "subject"


class AttendanceStanding(str, Enum):
    """Classification of an attendance percentage."""

    LOW = "Low"
    AVERAGE = "Average"
    GOOD = "Good"


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
