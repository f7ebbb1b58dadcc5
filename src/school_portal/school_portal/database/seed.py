from __future__ import annotations

import logging

from ..core.constants import ANNOUNCEMENTS, ATTENDANCE, FACULTY, MARKS, STUDENTS, SUBJECTS, USERS
from ..records.store import RecordStore

logger = logging.getLogger(__name__)

SEED_STUDENTS = [
    {"id": "STU001", "name": "Rajesh Kumar", "email": "rajesh@example.com", "phone": "9876543210",
     "department": "CSE", "year": "3", "username": "student1", "password": "student123"},
    {"id": "STU002", "name": "Priya Sharma", "email": "priya@example.com", "phone": "9876543211",
     "department": "CSE", "year": "3", "username": "student2", "password": "student123"},
    {"id": "STU003", "name": "Amit Patel", "email": "amit@example.com", "phone": "9876543212",
     "department": "ECE", "year": "2", "username": "student3", "password": "student123"},
    {"id": "STU004", "name": "Sneha Reddy", "email": "sneha@example.com", "phone": "9876543213",
     "department": "MECH", "year": "4", "username": "student4", "password": "student123"},
    {"id": "STU005", "name": "Vikram Singh", "email": "vikram@example.com", "phone": "9876543214",
     "department": "CIVIL", "year": "1", "username": "student5", "password": "student123"},
]

SEED_FACULTY = [
    {"id": "FAC001", "name": "Dr. Ramesh Verma", "email": "ramesh@example.com", "phone": "9876543220",
     "department": "CSE", "designation": "Professor", "username": "faculty1", "password": "faculty123"},
    {"id": "FAC002", "name": "Dr. Sunita Gupta", "email": "sunita@example.com", "phone": "9876543221",
     "department": "ECE", "designation": "Associate Professor", "username": "faculty2", "password": "faculty123"},
    {"id": "FAC003", "name": "Prof. Anil Kumar", "email": "anil@example.com", "phone": "9876543222",
     "department": "MECH", "designation": "Assistant Professor", "username": "faculty3", "password": "faculty123"},
    {"id": "FAC004", "name": "Dr. Kavita Joshi", "email": "kavita@example.com", "phone": "9876543223",
     "department": "CIVIL", "designation": "Lecturer", "username": "faculty4", "password": "faculty123"},
]

SEED_SUBJECTS = [
    {"code": "CS301", "name": "Data Structures", "department": "CSE", "year": "3", "credits": 4, "facultyId": "FAC001"},
    {"code": "CS302", "name": "Database Systems", "department": "CSE", "year": "3", "credits": 4, "facultyId": "FAC001"},
    {"code": "EC201", "name": "Digital Electronics", "department": "ECE", "year": "2", "credits": 4, "facultyId": "FAC002"},
    {"code": "ME401", "name": "Thermodynamics", "department": "MECH", "year": "4", "credits": 3, "facultyId": "FAC003"},
    {"code": "CE101", "name": "Engineering Mechanics", "department": "CIVIL", "year": "1", "credits": 4, "facultyId": "FAC004"},
]

SEED_ADMIN = {"username": "admin", "password": "admin123", "role": "admin", "name": "System Administrator"}


def _account(profile: dict, role: str) -> dict:
    return {
        "username": profile["username"],
        "password": profile["password"],
        "role": role,
        "id": profile["id"],
        "name": profile["name"],
    }


def initialize_database(store: RecordStore) -> bool:
    """Populate every collection with sample data on first run.

    The gate is the presence of ``students`` alone: if it exists, nothing is
    written, whatever state the other collections are in.
    """
    if store.has(STUDENTS):
        logger.debug("seed skipped: %s already present", STUDENTS)
        return False

    store.write(STUDENTS, SEED_STUDENTS)
    store.write(FACULTY, SEED_FACULTY)
    store.write(SUBJECTS, SEED_SUBJECTS)
    store.write(
        USERS,
        [dict(SEED_ADMIN)]
        + [_account(s, "student") for s in SEED_STUDENTS]
        + [_account(f, "faculty") for f in SEED_FACULTY],
    )
    store.write(ATTENDANCE, [])
    store.write(MARKS, [])
    store.write(ANNOUNCEMENTS, [])

    logger.info(
        "seeded %d students, %d faculty, %d subjects",
        len(SEED_STUDENTS),
        len(SEED_FACULTY),
        len(SEED_SUBJECTS),
    )
    return True
