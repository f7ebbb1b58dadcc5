"""Example: use the service layer directly (without Flask)."""

from src.school_portal.school_portal.container import build_container
from src.school_portal.school_portal.database.memory_storage import InMemoryStorage


def main():
    container = build_container(storage=InMemoryStorage())
    user = container.auth_service.login("faculty1", "faculty123", "faculty")
    container.faculty_service.submit_attendance(
        subject_code="CS301",
        date="2026-01-31",
        statuses={"STU001": "present"},
    )
    print(container.faculty_service.dashboard(user))
    print([r.to_dict() for r in container.admin_service.attendance_report(department="CSE")])


if __name__ == "__main__":
    main()
