from __future__ import annotations

from ..core.constants import MARKS
from ..records.collection import AppendOnlyCollection
from ..records.store import RecordStore
from .model import MarksRecord


class MarksRepository(AppendOnlyCollection[MarksRecord]):
    collection = MARKS

    def __init__(self, store: RecordStore):
        super().__init__(store, from_record=MarksRecord.from_record, to_record=MarksRecord.to_record)

    def for_student(self, student_id: str) -> list[MarksRecord]:
        return self.where("studentId", student_id)

    def for_subject(self, subject_code: str) -> list[MarksRecord]:
        return self.where("subjectCode", subject_code)
