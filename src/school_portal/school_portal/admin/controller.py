from __future__ import annotations

from flask import Flask, request

from ..common.guards import form_data, ok, role_required
from ..container import Container
from ..core.enums import Role


def _profile(record: dict) -> dict:
    return {k: v for k, v in record.items() if k != "password"}


def register(app: Flask, container: Container) -> None:
    admin_required = role_required(container.auth_service, Role.ADMIN)
    admin = container.admin_service

    @app.route("/admin/dashboard", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        dash = admin.dashboard()
        return ok({"statistics": dash.statistics.to_dict(), "activities": dash.activities})

    @app.route("/admin/statistics", endpoint="admin_statistics")
    @admin_required
    def admin_statistics():
        return ok(admin.statistics().to_dict())

    @app.route("/admin/students", methods=["GET", "POST"], endpoint="admin_students")
    @admin_required
    def admin_students():
        if request.method == "POST":
            student = admin.add_student(form_data())
            return ok({"student": _profile(student.to_record())}, 201)

        students = admin.list_students(
            search=request.args.get("search", ""),
            department=request.args.get("department", ""),
            year=request.args.get("year", ""),
        )
        return ok({"students": [_profile(s.to_record()) for s in students]})

    @app.route("/admin/students/<student_id>", methods=["PATCH", "DELETE"], endpoint="admin_student")
    @admin_required
    def admin_student(student_id: str):
        if request.method == "DELETE":
            return ok({"deleted": admin.delete_student(student_id)})
        return ok({"updated": admin.update_student(student_id, form_data())})

    @app.route("/admin/faculty", methods=["GET", "POST"], endpoint="admin_faculty")
    @admin_required
    def admin_faculty():
        if request.method == "POST":
            member = admin.add_faculty(form_data())
            return ok({"faculty": _profile(member.to_record())}, 201)

        faculty = admin.list_faculty(
            search=request.args.get("search", ""),
            department=request.args.get("department", ""),
        )
        return ok({"faculty": [_profile(f.to_record()) for f in faculty]})

    @app.route("/admin/faculty/<faculty_id>", methods=["PATCH", "DELETE"], endpoint="admin_faculty_member")
    @admin_required
    def admin_faculty_member(faculty_id: str):
        if request.method == "DELETE":
            return ok({"deleted": admin.delete_faculty(faculty_id)})
        return ok({"updated": admin.update_faculty(faculty_id, form_data())})

    @app.route("/admin/subjects", methods=["GET", "POST"], endpoint="admin_subjects")
    @admin_required
    def admin_subjects():
        if request.method == "POST":
            subject = admin.add_subject(form_data())
            return ok({"subject": subject.to_record()}, 201)

        rows = admin.list_subjects(
            search=request.args.get("search", ""),
            department=request.args.get("department", ""),
        )
        return ok({"subjects": [{**row.subject.to_record(), "facultyName": row.faculty_name} for row in rows]})

    @app.route("/admin/subjects/<code>", methods=["PATCH", "DELETE"], endpoint="admin_subject")
    @admin_required
    def admin_subject(code: str):
        if request.method == "DELETE":
            return ok({"deleted": admin.delete_subject(code)})
        return ok({"updated": admin.update_subject(code, form_data())})

    @app.route("/admin/reports/attendance", endpoint="admin_attendance_report")
    @admin_required
    def admin_attendance_report():
        rows = admin.attendance_report(
            department=request.args.get("department", ""),
            year=request.args.get("year", ""),
        )
        return ok({"rows": [r.to_dict() for r in rows]})
