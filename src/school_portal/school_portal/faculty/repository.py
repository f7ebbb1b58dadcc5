from __future__ import annotations

from ..core.constants import DEFAULT_FACULTY_PASSWORD, FACULTY
from ..core.enums import Role
from ..records.collection import KeyedCollection
from ..records.store import RecordStore
from ..users.model import User
from ..users.repository import UserRepository
from .model import Faculty


class FacultyRepository(KeyedCollection[Faculty]):
    """The ``faculty`` collection, keyed by ``id``; mirrors each member into ``users``."""

    collection = FACULTY
    key_field = "id"

    def __init__(self, store: RecordStore, users: UserRepository):
        super().__init__(store, from_record=Faculty.from_record, to_record=Faculty.to_record)
        self._users = users

    def add(self, item: Faculty) -> None:
        super().add(item)
        self._users.add(
            User(
                username=item.username or item.id.lower(),
                password=DEFAULT_FACULTY_PASSWORD,
                role=Role.FACULTY,
                id=item.id,
                name=item.name,
            )
        )
