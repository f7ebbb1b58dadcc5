from __future__ import annotations

from flask import Flask, g, request

from ..common.guards import ok, role_required
from ..container import Container
from ..core.enums import Role


def _subject_attendance(item) -> dict:
    return {"code": item.subject.code, "name": item.subject.name, **item.rollup.to_dict()}


def register(app: Flask, container: Container) -> None:
    student_required = role_required(container.auth_service, Role.STUDENT)
    service = container.student_service

    @app.route("/student/dashboard", endpoint="student_dashboard")
    @student_required
    def student_dashboard():
        dash = service.dashboard(g.user)
        s = dash.student
        return ok(
            {
                "profile": {"id": s.id, "name": s.name, "department": s.department, "year": s.year, "email": s.email},
                "attendancePercentage": dash.overall.percentage,
                "totalSubjects": dash.total_subjects,
                "classesAttended": dash.overall.present,
                "newAnnouncements": dash.announcement_count,
                "subjectAttendance": [_subject_attendance(i) for i in dash.subject_attendance],
                "recentAnnouncements": [a.to_record() for a in dash.recent_announcements],
            }
        )

    @app.route("/student/attendance", endpoint="student_attendance")
    @student_required
    def student_attendance():
        page = service.attendance_page(g.user)
        return ok(
            {
                "overall": page.overall.to_dict(),
                "subjects": [_subject_attendance(i) for i in page.subjects],
            }
        )

    @app.route("/student/marks", endpoint="student_marks")
    @student_required
    def student_marks():
        page = service.marks_page(g.user)
        return ok(
            {
                "marks": [{"subjectName": name, **line.to_dict()} for name, line in page.lines],
                "performance": [{"subjectName": name, **p.to_dict()} for name, p in page.performance],
            }
        )

    @app.route("/student/timetable", endpoint="student_timetable")
    @student_required
    def student_timetable():
        return ok({"rows": [row.to_dict() for row in service.timetable(g.user)]})

    @app.route("/student/announcements", endpoint="student_announcements")
    @student_required
    def student_announcements():
        page = service.announcements_page(g.user, request.args.get("subject") or None)
        return ok(
            {
                "subjects": [{"code": s.code, "name": s.name} for s in page.subjects],
                "announcements": [a.to_record() for a in page.announcements],
            }
        )

    @app.route("/student/announcements/class", endpoint="student_class_announcements")
    @student_required
    def student_class_announcements():
        return ok({"announcements": [a.to_record() for a in service.class_announcements(g.user)]})
