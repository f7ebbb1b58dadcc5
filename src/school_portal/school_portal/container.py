from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .admin.service import AdminService
from .announcements.repository import AnnouncementRepository
from .attendance.repository import AttendanceRepository
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .database.json_file_storage import JsonFileStorage
from .database.memory_storage import InMemoryStorage
from .database.mysql_storage import MySQLStorage
from .database.seed import initialize_database
from .database.storage import Storage
from .faculty.repository import FacultyRepository
from .faculty.service import FacultyService
from .marks.repository import MarksRepository
from .records.store import RecordStore
from .students.repository import StudentRepository
from .students.service import StudentService
from .subjects.repository import SubjectRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .users.session import SessionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: RecordStore
    session: SessionState

    users_repo: UserRepository
    students_repo: StudentRepository
    faculty_repo: FacultyRepository
    subjects_repo: SubjectRepository
    attendance_repo: AttendanceRepository
    marks_repo: MarksRepository
    announcements_repo: AnnouncementRepository

    auth_service: AuthService
    admin_service: AdminService
    faculty_service: FacultyService
    student_service: StudentService


def build_storage(settings: Any) -> Storage:
    """Pick the storage backend named by ``STORAGE_BACKEND`` in the settings module."""
    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()

    if backend == "memory":
        return InMemoryStorage()

    if backend == "json":
        return JsonFileStorage(getattr(settings, "DATA_DIR", "data"))

    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(conn)
        return MySQLStorage(conn)

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(*, storage: Storage, seed: bool = True) -> Container:
    store = RecordStore(storage)
    if seed:
        initialize_database(store)

    session = SessionState(store)

    users_repo = UserRepository(store)
    students_repo = StudentRepository(store, users_repo)
    faculty_repo = FacultyRepository(store, users_repo)
    subjects_repo = SubjectRepository(store)
    attendance_repo = AttendanceRepository(store)
    marks_repo = MarksRepository(store)
    announcements_repo = AnnouncementRepository(store)

    auth_service = AuthService(users_repo, session)
    admin_service = AdminService(students_repo, faculty_repo, subjects_repo, attendance_repo)
    faculty_service = FacultyService(subjects_repo, students_repo, attendance_repo, marks_repo, announcements_repo)
    student_service = StudentService(students_repo, subjects_repo, attendance_repo, marks_repo, announcements_repo)

    return Container(
        store=store,
        session=session,
        users_repo=users_repo,
        students_repo=students_repo,
        faculty_repo=faculty_repo,
        subjects_repo=subjects_repo,
        attendance_repo=attendance_repo,
        marks_repo=marks_repo,
        announcements_repo=announcements_repo,
        auth_service=auth_service,
        admin_service=admin_service,
        faculty_service=faculty_service,
        student_service=student_service,
    )
