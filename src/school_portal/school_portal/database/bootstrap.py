from __future__ import annotations

import logging

from .connection import DatabaseConnection
from .mysql_base import db_cursor
from .mysql_storage import STORAGE_TABLE

logger = logging.getLogger(__name__)

STORAGE_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {STORAGE_TABLE} (
    storage_key VARCHAR(64) NOT NULL PRIMARY KEY,
    storage_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    with db_cursor(conn_factory, dictionary=False, with_database=False) as (_, cur):
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create the database and the key-value table if missing (idempotent)."""
    ensure_database_exists(conn_factory)
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(STORAGE_SCHEMA)
    logger.info("storage table %s ready in %s", STORAGE_TABLE, conn_factory.config.database)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
