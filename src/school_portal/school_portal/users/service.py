from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_fields
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository
from .session import SessionState

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in, log out, and guard role pages."""

    def __init__(self, users: UserRepository, session: SessionState):
        self._users = users
        self._session = session

    def login(self, username: str, password: str, role: Role | str) -> User:
        require_fields("Please fill in all fields", role, username, password)
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Invalid role")

        user = self._users.find_by_credentials(username, password, role)
        if not user:
            logger.warning("login rejected for %r as %s", username, role.value)
            raise AuthenticationError("Invalid credentials. Please check your username, password, and role.")

        self._session.set_user(user)
        logger.info("%s logged in as %s", user.username, user.role.value)
        return user

    def logout(self) -> None:
        self._session.clear()

    def current_user(self) -> Optional[User]:
        return self._session.current_user()

    def has_role(self, role: Role) -> bool:
        user = self.current_user()
        return user is not None and user.role == role

    def require_role(self, role: Role) -> User:
        user = self.current_user()
        if not user:
            raise AuthenticationError("Please log in to continue")
        if user.role != role:
            raise AuthorizationError("Access denied. You do not have permission to view this page.")
        return user
