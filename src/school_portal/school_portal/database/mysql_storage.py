from __future__ import annotations

from typing import Iterable, Optional

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone
from .storage import Storage

STORAGE_TABLE = "portal_storage"


class MySQLStorage(Storage):
    """Key-value rows in the ``portal_storage`` table (one row per collection)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT storage_value FROM {STORAGE_TABLE} WHERE storage_key=%s",
                (key,),
            )
            row = fetchone(cur)
            if not row:
                return None
            value = row["storage_value"]
            if isinstance(value, (bytes, bytearray)):
                value = value.decode("utf-8")
            return value

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {STORAGE_TABLE} (storage_key, storage_value)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE storage_value=VALUES(storage_value)
                """,
                (key, value),
            )

    def remove(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {STORAGE_TABLE} WHERE storage_key=%s", (key,))

    def keys(self) -> Iterable[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT storage_key FROM {STORAGE_TABLE} ORDER BY storage_key")
            return [r["storage_key"] for r in fetchall(cur)]
