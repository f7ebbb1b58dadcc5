"""Announcement visibility for students.

Two predicates are in use and they disagree. The statistics side matches
announcements to a class by department and year; the student announcements
page matches by subject code. Both are kept as-is until the intended policy is
confirmed.
"""
from __future__ import annotations

from typing import Iterable, Optional

from ..announcements.model import Announcement
from ..core.enums import AnnouncementTarget


def visible_for_class(announcement: Announcement, department: str, year: str) -> bool:
    return announcement.target == AnnouncementTarget.ALL or (
        announcement.department == department and announcement.year == year
    )


def visible_for_subject_filter(announcement: Announcement, subject_code: Optional[str]) -> bool:
    if not subject_code:
        return True
    return announcement.target == AnnouncementTarget.ALL or announcement.subject_code == subject_code


def announcements_for_class(announcements: Iterable[Announcement], department: str, year: str) -> list[Announcement]:
    return [a for a in announcements if visible_for_class(a, department, year)]


def announcements_for_subject_filter(
    announcements: Iterable[Announcement], subject_code: Optional[str]
) -> list[Announcement]:
    return [a for a in announcements if visible_for_subject_filter(a, subject_code)]
