from __future__ import annotations

from src.school_portal.school_portal.announcements.model import Announcement
from src.school_portal.school_portal.core.enums import AnnouncementTarget
from src.school_portal.school_portal.reports.announcements import (
    announcements_for_class,
    announcements_for_subject_filter,
    visible_for_class,
    visible_for_subject_filter,
)
from src.school_portal.school_portal.reports.timetable import build_timetable
from src.school_portal.school_portal.subjects.model import Subject


def _ann(target: AnnouncementTarget, subject_code: str = "CS301", **kw) -> Announcement:
    return Announcement(
        title="t", message="m", subject_code=subject_code, faculty_id="FAC001",
        faculty_name="Dr. Ramesh Verma", target=target, **kw,
    )


def test_class_predicate_uses_department_and_year():
    everyone = _ann(AnnouncementTarget.ALL, "all")
    posted = _ann(AnnouncementTarget.SUBJECT)
    tagged = _ann(AnnouncementTarget.SUBJECT, department="CSE", year="3")

    assert visible_for_class(everyone, "ECE", "2")
    assert not visible_for_class(posted, "CSE", "3")
    assert visible_for_class(tagged, "CSE", "3")
    assert not visible_for_class(tagged, "CSE", "2")
    assert announcements_for_class([everyone, posted, tagged], "CSE", "3") == [everyone, tagged]


def test_subject_filter_predicate_ignores_department_and_year():
    everyone = _ann(AnnouncementTarget.ALL, "all")
    cs301 = _ann(AnnouncementTarget.SUBJECT, "CS301")
    ec201 = _ann(AnnouncementTarget.SUBJECT, "EC201")

    assert announcements_for_subject_filter([everyone, cs301, ec201], None) == [everyone, cs301, ec201]
    assert announcements_for_subject_filter([everyone, cs301, ec201], "CS301") == [everyone, cs301]
    assert visible_for_subject_filter(ec201, "")


def test_the_two_predicates_disagree_on_subject_posts():
    # A CS301 post is on the CS301 filter but not in the class view.
    post = _ann(AnnouncementTarget.SUBJECT, "CS301")

    assert visible_for_subject_filter(post, "CS301")
    assert not visible_for_class(post, "CSE", "3")


def _subject(code: str) -> Subject:
    return Subject(code=code, name=code.lower(), department="CSE", year="3", credits=4)


def test_timetable_rotates_subjects_with_lunch_break():
    rows = build_timetable([_subject("CS301"), _subject("CS302")])

    assert len(rows) == 7
    assert rows[3].is_break and rows[3].time == "12:00 - 1:00"
    assert [s.code for s in rows[0].cells] == ["CS301", "CS302", "CS301", "CS302", "CS301"]
    assert [s.code for s in rows[1].cells] == ["CS302", "CS301", "CS302", "CS301", "CS302"]
    assert rows[4].cells[0].code == "CS301"


def test_timetable_without_subjects_has_empty_cells():
    rows = build_timetable([])

    assert rows[0].cells == (None,) * 5
    assert rows[0].to_dict()["cells"][0] == {"day": "Monday", "code": None, "name": None}
