from __future__ import annotations

from typing import Optional

from ..core.constants import USERS
from ..core.enums import Role
from ..records.collection import AppendOnlyCollection
from ..records.store import RecordStore
from .model import User


class UserRepository(AppendOnlyCollection[User]):
    """The ``users`` collection. Usernames are expected to be unique but not enforced."""

    collection = USERS

    def __init__(self, store: RecordStore):
        super().__init__(store, from_record=User.from_record, to_record=User.to_record)

    def find_by_credentials(self, username: str, password: str, role: Role) -> Optional[User]:
        # First match wins when duplicates exist.
        for r in self._store.read(self.collection):
            if r.get("username") == username and r.get("password") == password and r.get("role") == role.value:
                return User.from_record(r)
        return None

    def get_by_username(self, username: str) -> Optional[User]:
        for user in self.get_all():
            if user.username == username:
                return user
        return None
