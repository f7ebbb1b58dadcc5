from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import epoch_millis, iso_timestamp, now_utc
from ..core.constants import ANNOUNCEMENTS, RECENT_ANNOUNCEMENTS_LIMIT
from ..records.collection import KeyedCollection
from ..records.store import RecordStore
from .model import Announcement

logger = logging.getLogger(__name__)


class AnnouncementRepository(KeyedCollection[Announcement]):
    """The ``announcements`` collection, newest first."""

    collection = ANNOUNCEMENTS
    key_field = "id"

    def __init__(self, store: RecordStore):
        super().__init__(store, from_record=Announcement.from_record, to_record=Announcement.to_record)

    def add(self, item: Announcement, *, now: Optional[datetime] = None) -> Announcement:
        """Stamp ``id`` and ``date`` from the clock and insert at the front."""
        now = now or now_utc()
        stored = replace(item, id=str(epoch_millis(now)), date=iso_timestamp(now))

        records = self._store.read(self.collection)
        records.insert(0, stored.to_record())
        self._store.write(self.collection, records)
        logger.info("announcement %s posted by %s", stored.id, stored.faculty_id)
        return stored

    def for_faculty(self, faculty_id: str) -> list[Announcement]:
        return [a for a in self.get_all() if a.faculty_id == faculty_id]

    def recent(self, limit: int = RECENT_ANNOUNCEMENTS_LIMIT) -> list[Announcement]:
        return self.get_all()[:limit]
