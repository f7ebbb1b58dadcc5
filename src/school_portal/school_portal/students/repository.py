from __future__ import annotations

from ..core.constants import DEFAULT_STUDENT_PASSWORD, STUDENTS
from ..core.enums import Role
from ..records.collection import KeyedCollection
from ..records.store import RecordStore
from ..users.model import User
from ..users.repository import UserRepository
from .model import Student


class StudentRepository(KeyedCollection[Student]):
    """The ``students`` collection, keyed by ``id``.

    Adding a student also appends a login account to ``users``. The two writes
    are independent; deleting a student leaves that account, and the student's
    attendance and marks, in place.
    """

    collection = STUDENTS
    key_field = "id"

    def __init__(self, store: RecordStore, users: UserRepository):
        super().__init__(store, from_record=Student.from_record, to_record=Student.to_record)
        self._users = users

    def add(self, item: Student) -> None:
        super().add(item)
        self._users.add(
            User(
                username=item.username or item.id.lower(),
                password=DEFAULT_STUDENT_PASSWORD,
                role=Role.STUDENT,
                id=item.id,
                name=item.name,
            )
        )

    def for_class(self, department: str, year: str) -> list[Student]:
        return [s for s in self.get_all() if s.department == department and s.year == year]
