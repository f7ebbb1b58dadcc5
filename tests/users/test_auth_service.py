from __future__ import annotations

import pytest

from src.school_portal.school_portal.core.enums import Role
from src.school_portal.school_portal.core.exceptions import AuthenticationError, AuthorizationError, ValidationError


def test_admin_login_after_seed(container):
    user = container.auth_service.login("admin", "admin123", "admin")

    assert user.username == "admin"
    assert user.role == Role.ADMIN
    assert user.name == "System Administrator"
    assert user.id is None
    assert container.auth_service.current_user() == user


def test_wrong_password_leaves_session_untouched(container):
    faculty = container.auth_service.login("faculty1", "faculty123", Role.FACULTY)

    with pytest.raises(AuthenticationError):
        container.auth_service.login("admin", "wrong", "admin")

    assert container.auth_service.current_user() == faculty


def test_wrong_password_with_nobody_logged_in(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.login("admin", "wrong", "admin")

    assert container.auth_service.current_user() is None


def test_role_must_match(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.login("student1", "student123", "faculty")


def test_first_matching_user_wins(container):
    container.store.write(
        "users",
        [
            {"username": "dup", "password": "pw", "role": "student", "id": "S1", "name": "First"},
            {"username": "dup", "password": "pw", "role": "student", "id": "S2", "name": "Second"},
        ],
    )

    assert container.auth_service.login("dup", "pw", "student").id == "S1"


@pytest.mark.parametrize("username, password, role", [("", "x", "admin"), ("admin", "", "admin"), ("admin", "x", "")])
def test_blank_fields_are_rejected(container, username, password, role):
    with pytest.raises(ValidationError):
        container.auth_service.login(username, password, role)


def test_unknown_role_is_rejected(container):
    with pytest.raises(ValidationError):
        container.auth_service.login("admin", "admin123", "janitor")


def test_logout_clears_unconditionally(container):
    container.auth_service.logout()
    assert container.auth_service.current_user() is None

    container.auth_service.login("admin", "admin123", "admin")
    container.auth_service.logout()
    assert container.auth_service.current_user() is None


def test_session_is_persisted_in_current_user_slot(container):
    container.auth_service.login("student2", "student123", "student")

    slot = container.store.read_slot("currentUser")
    assert slot == {"username": "student2", "password": "student123", "role": "student", "id": "STU002", "name": "Priya Sharma"}


def test_require_role(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.require_role(Role.ADMIN)

    container.auth_service.login("student1", "student123", "student")
    assert container.auth_service.has_role(Role.STUDENT)
    assert container.auth_service.require_role(Role.STUDENT).id == "STU001"
    with pytest.raises(AuthorizationError):
        container.auth_service.require_role(Role.ADMIN)


def test_mirrored_account_can_log_in(container):
    container.admin_service.add_student({"id": "STU010", "name": "Test User", "department": "CSE", "year": "2"})

    user = container.auth_service.login("stu010", "student123", "student")
    assert user.id == "STU010"
