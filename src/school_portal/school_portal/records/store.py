from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

from ..core.exceptions import SerializationError
from ..database.storage import Storage

logger = logging.getLogger(__name__)


class RecordStore:
    """Named collections of JSON records over a key-value storage.

    Every write replaces the whole collection. There are no transactions across
    collections: a compound operation is several independent writes.
    """

    def __init__(self, storage: Storage):
        self._storage = storage

    @property
    def storage(self) -> Storage:
        return self._storage

    def _raw(self, key: str) -> Optional[str]:
        try:
            return self._storage.get(key)
        except UnicodeDecodeError as e:
            logger.error("value under %r is not valid UTF-8: %s", key, e)
            raise SerializationError(f"Stored value '{key}' is not valid UTF-8", collection=key) from e

    def has(self, collection: str) -> bool:
        return self._raw(collection) is not None

    def read(self, collection: str) -> list[dict[str, Any]]:
        raw = self._raw(collection)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.error("collection %r is not valid JSON: %s", collection, e)
            raise SerializationError(f"Stored collection '{collection}' is corrupt", collection=collection) from e

        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            logger.error("collection %r is not an array of objects", collection)
            raise SerializationError(
                f"Stored collection '{collection}' is not a list of records", collection=collection
            )
        return data

    def write(self, collection: str, records: Sequence[dict[str, Any]]) -> None:
        self._storage.set(collection, self._encode(collection, list(records)))
        logger.debug("wrote %d record(s) to %s", len(records), collection)

    def read_slot(self, key: str) -> Optional[dict[str, Any]]:
        raw = self._raw(key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise SerializationError(f"Stored slot '{key}' is corrupt", collection=key) from e
        if data is None:
            return None
        if not isinstance(data, dict):
            raise SerializationError(f"Stored slot '{key}' is not a record", collection=key)
        return data

    def write_slot(self, key: str, record: dict[str, Any]) -> None:
        self._storage.set(key, self._encode(key, record))

    def clear_slot(self, key: str) -> None:
        self._storage.remove(key)

    @staticmethod
    def _encode(key: str, value: Any) -> str:
        try:
            return json.dumps(value, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode '{key}': {e}", collection=key) from e
