from __future__ import annotations

from ..core.constants import SUBJECTS
from ..records.collection import KeyedCollection
from ..records.store import RecordStore
from .model import Subject


class SubjectRepository(KeyedCollection[Subject]):
    collection = SUBJECTS
    key_field = "code"

    def __init__(self, store: RecordStore):
        super().__init__(store, from_record=Subject.from_record, to_record=Subject.to_record)

    def for_faculty(self, faculty_id: str) -> list[Subject]:
        return [s for s in self.get_all() if s.faculty_id == faculty_id]

    def for_class(self, department: str, year: str) -> list[Subject]:
        return [s for s in self.get_all() if s.department == department and s.year == year]
