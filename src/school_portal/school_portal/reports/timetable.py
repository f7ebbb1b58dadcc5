from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..subjects.model import Subject

TIME_SLOTS = (
    "9:00 - 10:00",
    "10:00 - 11:00",
    "11:00 - 12:00",
    "12:00 - 1:00",
    "1:00 - 2:00",
    "2:00 - 3:00",
    "3:00 - 4:00",
)
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
LUNCH_SLOT = 3


@dataclass(frozen=True)
class TimetableRow:
    time: str
    is_break: bool = False
    cells: tuple[Optional[Subject], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        if self.is_break:
            return {"time": self.time, "break": True, "cells": []}
        return {
            "time": self.time,
            "break": False,
            "cells": [
                {"day": day, "code": s.code, "name": s.name} if s else {"day": day, "code": None, "name": None}
                for day, s in zip(WEEKDAYS, self.cells)
            ],
        }


def build_timetable(subjects: Sequence[Subject]) -> list[TimetableRow]:
    """Rotate a class's subjects through the week; slot 3 is lunch."""
    rows: list[TimetableRow] = []
    for index, time in enumerate(TIME_SLOTS):
        if index == LUNCH_SLOT:
            rows.append(TimetableRow(time=time, is_break=True))
            continue

        cells = tuple(
            subjects[(index + day) % len(subjects)] if subjects else None
            for day in range(len(WEEKDAYS))
        )
        rows.append(TimetableRow(time=time, cells=cells))
    return rows
