from __future__ import annotations

from flask import Flask, g, request

from ..common.guards import form_data, ok, role_required
from ..common.validators import require_fields
from ..container import Container
from ..core.enums import Role


def _mapping(value) -> dict:
    return value if isinstance(value, dict) else {}


def register(app: Flask, container: Container) -> None:
    faculty_required = role_required(container.auth_service, Role.FACULTY)
    service = container.faculty_service

    @app.route("/faculty/dashboard", endpoint="faculty_dashboard")
    @faculty_required
    def faculty_dashboard():
        dash = service.dashboard(g.user)
        return ok(
            {
                "name": dash.name,
                "assignedSubjects": len(dash.subjects),
                "totalStudents": dash.total_students,
                "classesToday": dash.classes_today,
                "pendingTasks": dash.pending_tasks,
                "subjects": [s.to_record() for s in dash.subjects],
                "recentAnnouncements": [a.to_record() for a in dash.recent_announcements],
            }
        )

    @app.route("/faculty/subjects", endpoint="faculty_subjects")
    @faculty_required
    def faculty_subjects():
        return ok({"subjects": [s.to_record() for s in service.assigned_subjects(g.user)]})

    @app.route("/faculty/roster", endpoint="faculty_roster")
    @faculty_required
    def faculty_roster():
        subject_code = request.args.get("subject", "")
        require_fields("Please select subject and date", subject_code, request.args.get("date", ""))
        roster = service.roster(subject_code)
        return ok(
            {
                "subject": roster.subject.to_record(),
                "students": [
                    {"id": s.id, "name": s.name, "department": s.department} for s in roster.students
                ],
            }
        )

    @app.route("/faculty/attendance", methods=["POST"], endpoint="faculty_attendance")
    @faculty_required
    def faculty_attendance():
        form = form_data()
        records = service.submit_attendance(
            subject_code=form.get("subjectCode", ""),
            date=form.get("date", ""),
            statuses=_mapping(form.get("statuses")),
        )
        return ok({"recorded": len(records)}, 201)

    @app.route("/faculty/marks", methods=["POST"], endpoint="faculty_marks")
    @faculty_required
    def faculty_marks():
        form = form_data()
        records = service.submit_marks(
            subject_code=form.get("subjectCode", ""),
            assessment_type=form.get("assessmentType", ""),
            max_marks=form.get("maxMarks", ""),
            marks=_mapping(form.get("marks")),
        )
        return ok({"recorded": len(records)}, 201)

    @app.route("/faculty/announcements", methods=["GET", "POST"], endpoint="faculty_announcements")
    @faculty_required
    def faculty_announcements():
        if request.method == "POST":
            form = form_data()
            announcement = service.post_announcement(
                g.user,
                title=form.get("title", ""),
                subject_code=form.get("subjectCode", ""),
                message=form.get("message", ""),
            )
            return ok({"announcement": announcement.to_record()}, 201)

        return ok({"announcements": [a.to_record() for a in service.my_announcements(g.user)]})
