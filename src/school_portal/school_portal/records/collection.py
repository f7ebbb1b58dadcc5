from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar

from .store import RecordStore

logger = logging.getLogger(__name__)

E = TypeVar("E")


class KeyedCollection(Generic[E]):
    """Typed view over one named collection, keyed by a single field.

    Reads convert stored records into models; ``update`` merges at the record
    level so fields the model does not know about survive.
    """

    collection: str = ""
    key_field: str = ""

    def __init__(
        self,
        store: RecordStore,
        *,
        from_record: Callable[[Mapping[str, Any]], E],
        to_record: Callable[[E], dict[str, Any]],
    ):
        self._store = store
        self._from_record = from_record
        self._to_record = to_record

    def _records(self) -> list[dict[str, Any]]:
        return self._store.read(self.collection)

    def get_all(self) -> list[E]:
        return [self._from_record(r) for r in self._records()]

    def find(self, key: str) -> Optional[E]:
        for r in self._records():
            if r.get(self.key_field) == key:
                return self._from_record(r)
        return None

    def add(self, item: E) -> None:
        records = self._records()
        records.append(self._to_record(item))
        self._store.write(self.collection, records)
        logger.info("added %s to %s", self._key_of(item), self.collection)

    def update(self, key: str, partial: Mapping[str, Any]) -> bool:
        records = self._records()
        for i, r in enumerate(records):
            if r.get(self.key_field) == key:
                records[i] = {**r, **dict(partial)}
                self._store.write(self.collection, records)
                logger.info("updated %s in %s", key, self.collection)
                return True
        logger.debug("update skipped: %s not in %s", key, self.collection)
        return False

    def delete(self, key: str) -> int:
        records = self._records()
        kept = [r for r in records if r.get(self.key_field) != key]
        self._store.write(self.collection, kept)
        removed = len(records) - len(kept)
        logger.info("deleted %d record(s) with %s=%s from %s", removed, self.key_field, key, self.collection)
        return removed

    def _key_of(self, item: E) -> Any:
        return self._to_record(item).get(self.key_field)


class AppendOnlyCollection(Generic[E]):
    """Collection without a key: records are appended and filtered by field."""

    collection: str = ""

    def __init__(
        self,
        store: RecordStore,
        *,
        from_record: Callable[[Mapping[str, Any]], E],
        to_record: Callable[[E], dict[str, Any]],
    ):
        self._store = store
        self._from_record = from_record
        self._to_record = to_record

    def get_all(self) -> list[E]:
        return [self._from_record(r) for r in self._store.read(self.collection)]

    def add(self, item: E) -> None:
        records = self._store.read(self.collection)
        records.append(self._to_record(item))
        self._store.write(self.collection, records)

    def add_many(self, items: Sequence[E]) -> None:
        for item in items:
            self.add(item)

    def where(self, field: str, value: Any) -> list[E]:
        return [self._from_record(r) for r in self._store.read(self.collection) if r.get(field) == value]
