from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.school_portal.school_portal.container import build_container
from src.school_portal.school_portal.database.memory_storage import InMemoryStorage
from src.school_portal.school_portal.records.store import RecordStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage) -> RecordStore:
    return RecordStore(storage)


@pytest.fixture
def container(storage):
    """Services wired over seeded in-memory storage."""
    return build_container(storage=storage, seed=True)


@pytest.fixture
def empty_container(storage):
    return build_container(storage=storage, seed=False)
