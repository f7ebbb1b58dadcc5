from __future__ import annotations

from ..core.constants import ATTENDANCE
from ..records.collection import AppendOnlyCollection
from ..records.store import RecordStore
from .model import AttendanceRecord


class AttendanceRepository(AppendOnlyCollection[AttendanceRecord]):
    collection = ATTENDANCE

    def __init__(self, store: RecordStore):
        super().__init__(store, from_record=AttendanceRecord.from_record, to_record=AttendanceRecord.to_record)

    def for_student(self, student_id: str) -> list[AttendanceRecord]:
        return self.where("studentId", student_id)

    def for_subject(self, subject_code: str) -> list[AttendanceRecord]:
        return self.where("subjectCode", subject_code)
